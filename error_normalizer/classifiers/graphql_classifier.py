"""Classifier for GraphQL error payloads.

Accepts either a response envelope with an ``errors`` list, where the first
entry decides the outcome, or a single error object such as a decoded
``{"message": ..., "extensions": {...}}`` entry or a ``GraphQLError``.
"""

from typing import ClassVar

from error_normalizer.classifiers.base import BaseClassifier
from error_normalizer.inspection.predicates import (
    get_field,
    get_string,
    is_list,
)
from error_normalizer.models import ErrorSource, ErrorType, NormalizedError
from error_normalizer.records import create_error

GRAPHQL_FALLBACK_MESSAGE = "GraphQL error occurred"

CODE_TYPES: dict[str, ErrorType] = {
    "UNAUTHENTICATED": "authentication_error",
    "FORBIDDEN": "authorization_error",
    "NOT_FOUND": "not_found",
    "VALIDATION_ERROR": "validation_error",
    "BAD_USER_INPUT": "validation_error",
    "INTERNAL_ERROR": "server_error",
    "RATE_LIMITED": "rate_limited",
}

_RETRYABLE_TYPES = frozenset({"server_error", "rate_limited"})


def map_graphql_code(code: str | None) -> ErrorType:
    if not code:
        return "unknown_error"
    return CODE_TYPES.get(code.upper(), "unknown_error")


class GraphQLClassifier(BaseClassifier):
    """Normalizes GraphQL errors using ``extensions.code`` and ``path``."""

    source: ClassVar[ErrorSource] = "graphql"

    def classify(self, error: object) -> NormalizedError:
        errors = get_field(error, "errors")
        if is_list(errors) and len(errors) > 0:
            first = errors[0]
            return self._build(first, get_string(first, "message"), error)

        message = get_string(error, "message")
        if message is not None:
            return self._build(error, message, error)

        return create_error(
            type="unknown_error",
            message=GRAPHQL_FALLBACK_MESSAGE,
            source=self.source,
            original=error,
        )

    def _build(self, entry: object, message: str | None, original: object) -> NormalizedError:
        code = get_string(get_field(entry, "extensions"), "code") or None
        error_type = map_graphql_code(code)
        return create_error(
            type=error_type,
            message=message or GRAPHQL_FALLBACK_MESSAGE,
            code=code,
            field=self._extract_field(entry),
            retryable=error_type in _RETRYABLE_TYPES,
            source=self.source,
            original=original,
        )

    @staticmethod
    def _extract_field(entry: object) -> str | None:
        extension_field = get_string(get_field(entry, "extensions"), "field")
        if extension_field:
            return extension_field
        path = get_field(entry, "path")
        if is_list(path) and len(path) > 0 and isinstance(path[-1], str):
            return path[-1]
        return None
