"""Validation of the authorization header and completion request bodies.

Validators never raise for bad client input. They return ``VALID`` or a
``ValidationError`` carrying a human-readable message, and the first
failure wins.
"""
from __future__ import annotations
import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

BEARER_PREFIX = "Bearer "

@dataclass(frozen=True)
class Valid:
    """Successful validation result."""

@dataclass(frozen=True)
class ValidationError:
    """Malformed client input."""
    message: str

ValidationResult = Valid | ValidationError

VALID = Valid()

def _dump(value: Any) -> str:
    return json.dumps(value)

def validate_authorization(authorization: str | None) -> ValidationResult:
    if not authorization:
        return ValidationError("Expected an authorization HTTP header but there was none")
    if not authorization.startswith(BEARER_PREFIX):
        return ValidationError(f"Expected a Bearer authorization header but it was: {authorization}")
    return VALID

def validate_defined(obj: Mapping[str, Any], key: str) -> ValidationResult:
    if obj.get(key) is None:
        return ValidationError(f"Expected '{key}' to exist but it was undefined or null")
    return VALID

def validate_string(obj: Mapping[str, Any], key: str) -> ValidationResult:
    result = validate_defined(obj, key)
    if isinstance(result, ValidationError):
        return result
    value = obj[key]
    if not isinstance(value, str):
        return ValidationError(f"Expected '{key}' to be a string but it was: {_dump(value)}")
    return VALID

def validate_number(obj: Mapping[str, Any], key: str) -> ValidationResult:
    result = validate_defined(obj, key)
    if isinstance(result, ValidationError):
        return result
    value = obj[key]
    # bool is an int subclass but JSON true/false are not numbers
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return ValidationError(f"Expected '{key}' to be a number but it was: {_dump(value)}")
    return VALID

def validate_non_empty_string_list(obj: Mapping[str, Any], key: str) -> ValidationResult:
    result = validate_defined(obj, key)
    if isinstance(result, ValidationError):
        return result
    value = obj[key]
    if not isinstance(value, list) or len(value) == 0:
        return ValidationError(f"Expected '{key}' to be a non-empty array but it was: {_dump(value)}")
    for item in value:
        if not isinstance(item, str):
            return ValidationError(
                f"Expected '{key}' to be an array of strings but there is a non-string in it: {_dump(item)}"
            )
    return VALID

COMPLETION_REQUEST_FIELDS: tuple[tuple[str, Callable[[Mapping[str, Any], str], ValidationResult]], ...] = (
    ("model", validate_string),
    ("prompt", validate_string),
    ("temperature", validate_number),
    ("max_tokens", validate_number),
    ("top_p", validate_number),
    ("frequency_penalty", validate_number),
    ("presence_penalty", validate_number),
    ("stop", validate_non_empty_string_list),
)

def validate_completion_request(request: Any) -> ValidationResult:
    """
    Check every required field in declaration order.

    Args:
        request: Decoded JSON body. Anything other than an object is
            treated as an object with no fields.

    Returns:
        ``VALID`` or the first ``ValidationError`` encountered.
    """
    fields: Mapping[str, Any] = request if isinstance(request, Mapping) else {}
    for key, validator in COMPLETION_REQUEST_FIELDS:
        result = validator(fields, key)
        if isinstance(result, ValidationError):
            return result
    return VALID
