from __future__ import annotations

import random
import re
import time

import pydantic
import pytest

from completion_simulator.common.schema import build_completion_response, new_completion_id


class _FixedBits(random.Random):
    def __init__(self, bits: int) -> None:
        super().__init__()
        self._bits = bits

    def getrandbits(self, k: int) -> int:
        return self._bits


def test_response_shape() -> None:
    before = int(time.time())
    resp = build_completion_response("text-davinci-003", "Call me Ishmael.")
    after = int(time.time())

    data = resp.model_dump(mode="json")
    assert re.fullmatch(r"[0-9a-f]{8}", data["id"])
    assert data["object"] == "text_completion"
    assert before <= data["created"] <= after
    assert data["model"] == "text-davinci-003"
    assert data["choices"] == [
        {"text": "Call me Ishmael.", "index": 0, "logprobs": None, "finish_reason": "stop"},
    ]
    assert data["usage"] == {"prompt_tokens": 16, "completion_tokens": 53, "total_tokens": 69}


def test_id_is_zero_padded_lowercase_hex() -> None:
    assert new_completion_id(_FixedBits(0xAB)) == "000000ab"
    assert new_completion_id(_FixedBits(0xFFFFFFFF)) == "ffffffff"


def test_created_uses_clock_at_build_time() -> None:
    resp = build_completion_response("m", "t", clock=lambda: 1700000000.9)
    assert resp.created == 1700000000


def test_response_is_immutable() -> None:
    resp = build_completion_response("m", "t")
    with pytest.raises(pydantic.ValidationError):
        resp.model = "other"  # type: ignore[misc]
