"""Structural checks over arbitrary error values.

Raw errors arrive as mappings (decoded JSON payloads), exception instances,
client-library objects or plain scalars. Every helper here answers a
structural question without raising, whatever the input.
"""

import math
from collections.abc import Mapping
from typing import Any

import httpx

_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, bool)
_COLLECTION_TYPES = (list, tuple, set, frozenset)


def is_object(value: object) -> bool:
    """True for mappings and object instances; False for None, scalars and collections."""
    if value is None:
        return False
    if isinstance(value, Mapping):
        return True
    return not isinstance(value, _SCALAR_TYPES + _COLLECTION_TYPES)


def is_list(value: object) -> bool:
    return isinstance(value, (list, tuple))


def is_number(value: object) -> bool:
    """True for finite ints and floats; bools are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_present(value: object) -> bool:
    """Truthiness as error producers use it.

    None, False, zero, NaN and empty strings are absent. Containers and
    objects count as present even when empty, so ``{"request": {}}`` still
    carries a request.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (str, bytes)):
        return len(value) > 0
    if isinstance(value, (int, float)):
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    return True


def get_field(value: object, name: str) -> Any:
    """Read a mapping key or attribute; None when missing or unreadable."""
    if isinstance(value, Mapping):
        try:
            return value.get(name)
        except Exception:
            return None
    if not is_object(value):
        return None
    try:
        return getattr(value, name, None)
    except Exception:
        # Properties such as httpx.RequestError.request raise when unset.
        return None


def get_string(value: object, name: str) -> str | None:
    candidate = get_field(value, name)
    return candidate if isinstance(candidate, str) else None


def error_name(value: object) -> str | None:
    """The JS-style ``name`` field when given, else the exception class name."""
    name = get_string(value, "name")
    if name:
        return name
    if isinstance(value, BaseException):
        return type(value).__name__
    return None


def is_network_failure(value: object) -> bool:
    """An exception raised when no connection could be made at all."""
    return isinstance(value, ConnectionError)


def is_abort_error(value: object) -> bool:
    if isinstance(value, TimeoutError):
        return True
    return is_object(value) and error_name(value) == "AbortError"


def is_timeout_named(value: object) -> bool:
    return is_object(value) and error_name(value) == "TimeoutError"


def is_http_client_error(value: object) -> bool:
    """True for errors raised by the HTTP client library (axios payloads, httpx)."""
    if isinstance(value, httpx.HTTPError):
        return True
    return is_object(value) and get_field(value, "isAxiosError") is True


def is_client_timeout(value: object) -> bool:
    """Connection-aborted marker set by the HTTP client on timeouts."""
    if isinstance(value, httpx.TimeoutException):
        return True
    return is_object(value) and get_field(value, "code") == "ECONNABORTED"
