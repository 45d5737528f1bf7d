class ErrorNormalizerError(Exception):
    """Base exception for all error-normalizer failures."""


class InvalidErrorRecordError(ErrorNormalizerError):
    """Raised when a manually built record breaks the record invariants."""
