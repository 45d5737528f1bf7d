"""Helpers that dig a status code, a message or a body out of error values."""

import re
from collections.abc import Mapping
from typing import Any

from error_normalizer.inspection.predicates import (
    get_field,
    get_string,
    is_number,
    is_object,
    is_present,
)
from error_normalizer.models import UNKNOWN_ERROR_MESSAGE

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _as_status(value: object) -> int | None:
    return int(value) if is_number(value) else None


def _parse_status_code(code: object) -> int | None:
    """Parse the leading integer of a string code such as ``"404"``."""
    if not isinstance(code, str):
        return None
    match = _LEADING_INT.match(code)
    return int(match.group(1)) if match else None


def response_status(response: object) -> int | None:
    """Status of a response object, ``status`` first, then ``status_code``."""
    status = _as_status(get_field(response, "status"))
    if status is not None:
        return status
    return _as_status(get_field(response, "status_code"))


def get_status(error: object) -> int | None:
    """Extract an HTTP-like status code from an error value.

    Lookup order, first hit wins:
        1. numeric ``status``
        2. numeric ``response.status``
        3. numeric ``statusCode``
        4. string ``code`` with a leading integer
        5. numeric ``response.status_code``
        6. numeric ``status_code``

    Origin-specific fields must beat numeric-looking string codes, and the
    snake_case spellings used by Python HTTP libraries only fill the gaps.
    """
    if not is_object(error):
        return None
    response = get_field(error, "response")
    for candidate in (
        _as_status(get_field(error, "status")),
        _as_status(get_field(response, "status")),
        _as_status(get_field(error, "statusCode")),
        _parse_status_code(get_field(error, "code")),
        _as_status(get_field(response, "status_code")),
        _as_status(get_field(error, "status_code")),
    ):
        if candidate is not None:
            return candidate
    return None


def _exception_text(error: BaseException) -> str:
    try:
        return str(error)
    except Exception:
        return ""


def safe_message(error: object) -> str:
    """Best human-readable message for ``error``; never empty, never raises."""
    if isinstance(error, str) and error:
        return error
    message = get_string(error, "message")
    if message:
        return message
    if isinstance(error, BaseException):
        text = _exception_text(error)
        if text:
            return text
    return UNKNOWN_ERROR_MESSAGE


def response_body(response: object) -> Any:
    """Decoded body of a client response.

    Axios-style payloads carry the body in ``data``; httpx responses expose
    it through ``json()``, which is only trusted when it yields a mapping.
    """
    data = get_field(response, "data")
    if is_present(data):
        return data
    decode = get_field(response, "json")
    if not callable(decode) or isinstance(response, Mapping):
        return data
    try:
        decoded = decode()
    except Exception:
        return data
    return decoded if isinstance(decoded, Mapping) else data


def first_entry(errors: object) -> tuple[str, Any] | None:
    """First ``(field, value)`` pair of a field-keyed ``errors`` mapping."""
    if not isinstance(errors, Mapping):
        return None
    try:
        entry = next(iter(errors.items()), None)
    except Exception:
        return None
    if entry is None:
        return None
    key, value = entry
    return str(key), value
