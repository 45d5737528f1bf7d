"""Classifier for generic REST API errors.

The payload inspected is ``response.data`` when the error wraps an HTTP
response with a body, otherwise the error value itself. Common API error
shapes are tried in order: ``error``, ``message`` and ``detail`` strings,
an ``errors`` list, then a field-keyed ``errors`` mapping.
"""

from typing import Any, ClassVar

from error_normalizer.classifiers.base import BaseClassifier
from error_normalizer.classifiers.status_map import is_retryable_status, map_status
from error_normalizer.inspection.extractors import first_entry, get_status, safe_message
from error_normalizer.inspection.predicates import (
    get_field,
    get_string,
    is_list,
    is_object,
    is_present,
)
from error_normalizer.models import ErrorSource, NormalizedError
from error_normalizer.records import create_error

REQUEST_FAILED_MESSAGE = "Request failed"
EMPTY_ERRORS_MESSAGE = "Validation errors occurred"


class RestClassifier(BaseClassifier):
    """Normalizes REST-style error bodies."""

    source: ClassVar[ErrorSource] = "rest"

    def classify(self, error: object) -> NormalizedError:
        status = get_status(error)
        payload = self._payload(error)
        return create_error(
            type=map_status(status, missing="unknown_error"),
            message=self._extract_message(payload),
            status=status,
            field=self._extract_field(payload),
            # Unlike fetch and client errors, a missing status is not retryable.
            retryable=is_retryable_status(status),
            source=self.source,
            original=error,
        )

    @staticmethod
    def _payload(error: object) -> Any:
        response = get_field(error, "response")
        if is_object(error) and is_object(response):
            data = get_field(response, "data")
            return data if is_present(data) else error
        return error

    @staticmethod
    def _extract_message(payload: Any) -> str:
        if payload is None:
            return REQUEST_FAILED_MESSAGE
        if not is_object(payload):
            return safe_message(payload)

        for key in ("error", "message", "detail"):
            value = get_string(payload, key)
            if value:
                return value

        errors = get_field(payload, "errors")
        if is_list(errors):
            if len(errors) == 0:
                return EMPTY_ERRORS_MESSAGE
            first = errors[0]
            if isinstance(first, str) and first:
                return first
            message = get_string(first, "message")
            if message:
                return message

        entry = first_entry(errors)
        if entry is not None:
            value = entry[1]
            if is_list(value) and len(value) > 0:
                value = value[0]
            if isinstance(value, str) and value:
                return value

        return REQUEST_FAILED_MESSAGE

    @staticmethod
    def _extract_field(payload: Any) -> str | None:
        if not is_object(payload):
            return None
        entry = first_entry(get_field(payload, "errors"))
        if entry is not None:
            return entry[0]
        return get_string(payload, "field") or None
