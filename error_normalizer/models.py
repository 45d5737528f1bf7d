from dataclasses import dataclass, fields
from typing import Literal, get_args

ErrorType = Literal[
    "network_error",
    "timeout",
    "validation_error",
    "authentication_error",
    "authorization_error",
    "not_found",
    "conflict",
    "rate_limited",
    "server_error",
    "client_error",
    "unknown_error",
]

ErrorSource = Literal["fetch", "axios", "graphql", "rest", "runtime", "custom"]

ERROR_TYPES: frozenset[str] = frozenset(get_args(ErrorType))
ERROR_SOURCES: frozenset[str] = frozenset(get_args(ErrorSource))

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


@dataclass(frozen=True)
class NormalizedError:
    """Normalized view of an arbitrary error value.

    Build instances with ``create_error`` so field defaults stay in one place.
    """

    type: ErrorType
    message: str
    retryable: bool = False
    source: ErrorSource = "custom"
    status: int | None = None
    code: str | None = None
    field: str | None = None
    details: object | None = None
    original: object | None = None

    def to_dict(self) -> dict[str, object]:
        """Return the populated fields, without ``original``, as a plain dict."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "original" and getattr(self, f.name) is not None
        }
