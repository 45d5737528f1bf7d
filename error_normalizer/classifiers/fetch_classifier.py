from typing import ClassVar

from error_normalizer.classifiers.base import BaseClassifier
from error_normalizer.classifiers.status_map import is_retryable_status, map_status
from error_normalizer.inspection.extractors import get_status, safe_message
from error_normalizer.inspection.predicates import (
    is_abort_error,
    is_network_failure,
    is_timeout_named,
)
from error_normalizer.models import ErrorSource, NormalizedError
from error_normalizer.records import create_error


class FetchClassifier(BaseClassifier):
    """Normalizes fetch-style failures: Response-like objects and transport exceptions."""

    source: ClassVar[ErrorSource] = "fetch"

    def classify(self, error: object) -> NormalizedError:
        status = get_status(error)

        if not status and is_network_failure(error):
            return create_error(
                type="network_error",
                message="Network request failed",
                retryable=True,
                source=self.source,
                original=error,
            )

        if is_abort_error(error):
            return create_error(
                type="timeout",
                message="Request timed out",
                retryable=True,
                source=self.source,
                original=error,
            )

        return create_error(
            type=map_status(status, missing="network_error"),
            message=safe_message(error),
            status=status,
            retryable=self._is_retryable(status, error),
            source=self.source,
            original=error,
        )

    @staticmethod
    def _is_retryable(status: int | None, error: object) -> bool:
        # No status means the request never got a response.
        if not status:
            return True
        return is_retryable_status(status) or is_timeout_named(error)
