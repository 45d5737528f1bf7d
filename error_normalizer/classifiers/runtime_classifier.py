from typing import ClassVar

from error_normalizer.classifiers.base import BaseClassifier
from error_normalizer.inspection.extractors import safe_message
from error_normalizer.models import ErrorSource, NormalizedError
from error_normalizer.records import create_error


class RuntimeClassifier(BaseClassifier):
    """Fallback for plain exceptions, strings and anything else unrecognised."""

    source: ClassVar[ErrorSource] = "runtime"

    def classify(self, error: object) -> NormalizedError:
        return create_error(
            type="unknown_error",
            message=safe_message(error),
            source=self.source,
            original=error,
        )


class CustomClassifier(RuntimeClassifier):
    """Runtime rules for errors the caller declares as coming from a custom source."""

    source: ClassVar[ErrorSource] = "custom"
