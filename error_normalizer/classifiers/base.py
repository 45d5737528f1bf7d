from abc import ABC, abstractmethod
from typing import ClassVar

from error_normalizer.models import ErrorSource, NormalizedError


class BaseClassifier(ABC):
    """Contract for all per-source error classifiers."""

    source: ClassVar[ErrorSource]

    @abstractmethod
    def classify(self, error: object) -> NormalizedError:
        """Map a raw error value from this source to a NormalizedError.

        Args:
            error: The raw error value, inspected but never modified.

        Returns:
            NormalizedError with ``source`` set to this classifier's source.
            Shapes the classifier does not recognise degrade to
            ``unknown_error`` rather than raising.
        """
