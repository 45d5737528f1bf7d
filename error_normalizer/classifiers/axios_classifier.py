"""Classifier for HTTP client-library errors.

Handles axios-style payloads (``isAxiosError``, ``code``, ``request``,
``response.status``, ``response.data``) as well as httpx exceptions, whose
responses expose ``status_code`` and a JSON body.
"""

from typing import Any, ClassVar

from error_normalizer.classifiers.base import BaseClassifier
from error_normalizer.classifiers.status_map import is_retryable_status, map_status
from error_normalizer.inspection.extractors import (
    first_entry,
    response_body,
    response_status,
    safe_message,
)
from error_normalizer.inspection.predicates import (
    get_field,
    get_string,
    is_client_timeout,
    is_present,
    is_timeout_named,
)
from error_normalizer.models import ErrorSource, NormalizedError
from error_normalizer.records import create_error


class AxiosClassifier(BaseClassifier):
    """Normalizes errors raised by an HTTP client library."""

    source: ClassVar[ErrorSource] = "axios"

    def classify(self, error: object) -> NormalizedError:
        # Timeouts can carry a response or not, so they are checked first.
        if is_client_timeout(error):
            return create_error(
                type="timeout",
                message=safe_message(error),
                retryable=True,
                source=self.source,
                original=error,
            )

        response = get_field(error, "response")
        if is_present(get_field(error, "request")) and not is_present(response):
            return create_error(
                type="network_error",
                message=safe_message(error),
                retryable=True,
                source=self.source,
                original=error,
            )

        if is_present(response):
            status = response_status(response)
            body = response_body(response)
            return create_error(
                type=map_status(status, missing="network_error"),
                message=self._body_message(body) or safe_message(error),
                status=status,
                field=self._body_field(body),
                retryable=self._is_retryable(status, error),
                source=self.source,
                original=error,
            )

        return create_error(
            type="unknown_error",
            message=safe_message(error),
            source=self.source,
            original=error,
        )

    @staticmethod
    def _is_retryable(status: int | None, error: object) -> bool:
        if not status:
            return True
        if is_retryable_status(status):
            return True
        return is_client_timeout(error) or is_timeout_named(error)

    @staticmethod
    def _body_message(body: Any) -> str | None:
        for key in ("message", "error"):
            value = get_string(body, key)
            if value:
                return value
        entry = first_entry(get_field(body, "errors"))
        if entry is not None and isinstance(entry[1], str) and entry[1]:
            return entry[1]
        return None

    @staticmethod
    def _body_field(body: Any) -> str | None:
        entry = first_entry(get_field(body, "errors"))
        if entry is not None:
            return entry[0]
        return get_string(body, "field") or None
