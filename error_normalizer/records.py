"""Single constructor for normalized error records."""

from error_normalizer.exceptions import InvalidErrorRecordError
from error_normalizer.models import (
    ERROR_SOURCES,
    ERROR_TYPES,
    ErrorSource,
    ErrorType,
    NormalizedError,
)


def create_error(
    *,
    type: ErrorType,
    message: str,
    status: int | None = None,
    code: str | None = None,
    field: str | None = None,
    retryable: bool = False,
    details: object | None = None,
    source: ErrorSource = "custom",
    original: object | None = None,
) -> NormalizedError:
    """Build a NormalizedError.

    Every classifier goes through here, and so should callers describing
    errors from origins the normalizer does not recognise.

    Raises:
        InvalidErrorRecordError: if ``type`` or ``source`` is outside the
            closed sets, or ``message`` is empty.
    """
    if type not in ERROR_TYPES:
        raise InvalidErrorRecordError(
            f"Unknown error type '{type}'. Choose from: {sorted(ERROR_TYPES)}"
        )
    if source not in ERROR_SOURCES:
        raise InvalidErrorRecordError(
            f"Unknown error source '{source}'. Choose from: {sorted(ERROR_SOURCES)}"
        )
    if not isinstance(message, str) or not message:
        raise InvalidErrorRecordError("'message' must be a non-empty string")
    return NormalizedError(
        type=type,
        message=message,
        status=status,
        code=code,
        field=field,
        details=details,
        retryable=bool(retryable),
        source=source,
        original=original,
    )
