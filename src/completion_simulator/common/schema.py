"""Pydantic models for completion responses and their factory."""
from __future__ import annotations
import random
import time
from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel, ConfigDict

class CompletionChoice(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    index: int = 0
    logprobs: None = None
    finish_reason: Literal["stop"] = "stop"

class CompletionUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int

# Simulated accounting, unrelated to the actual prompt or completion length.
FIXED_USAGE = CompletionUsage(prompt_tokens=16, completion_tokens=53, total_tokens=69)

class CompletionResponse(BaseModel):
    """Text completion response in the OpenAI completions shape."""
    model_config = ConfigDict(frozen=True)

    id: str
    object: Literal["text_completion"] = "text_completion"
    created: int
    model: str
    choices: tuple[CompletionChoice, ...]
    usage: CompletionUsage = FIXED_USAGE

def new_completion_id(rng: random.Random | None = None) -> str:
    """Random 32-bit value as 8 zero-padded lowercase hex digits."""
    bits = (rng or random).getrandbits(32)
    return f"{bits:08x}"

def build_completion_response(
    model: str,
    text: str,
    *,
    rng: random.Random | None = None,
    clock: Callable[[], float] = time.time,
) -> CompletionResponse:
    """
    Build a completion response around an already chosen text.

    Args:
        model: Model name echoed from the request.
        text: Completion text.
        rng: Random source for the id.
        clock: Returns seconds since the epoch; read at build time.
    """
    return CompletionResponse(
        id=new_completion_id(rng),
        created=int(clock()),
        model=model,
        choices=(CompletionChoice(text=text),),
    )
