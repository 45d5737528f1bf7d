"""Single entry point turning any raw error value into a NormalizedError."""

from error_normalizer.classifiers.factory import ClassifierFactory
from error_normalizer.classifiers.runtime_classifier import RuntimeClassifier
from error_normalizer.detection.detector import detect_error_source
from error_normalizer.logging.logger import Log
from error_normalizer.models import UNKNOWN_ERROR_MESSAGE, ErrorSource, NormalizedError
from error_normalizer.records import create_error


def normalize_error(
    error: object,
    *,
    source: ErrorSource | None = None,
    default_retryable: bool | None = None,
) -> NormalizedError:
    """Normalize ``error`` into a NormalizedError.

    Args:
        error: Any raw error value. It is inspected, never modified, and
            returned unchanged as ``original``.
        source: Force a classifier instead of detecting one from the shape.
        default_retryable: Reserved for filling ``retryable`` defaults; no
            classifier reads it yet.

    Returns:
        A well-formed NormalizedError. This function does not raise.
    """
    _ = default_retryable  # reserved for future configuration
    try:
        resolved = _resolve_source(error, source)
        return ClassifierFactory.create(resolved).classify(error)
    except Exception as exc:
        Log.error(f"Error classification failed, using runtime rules: {exc!r}")
        return _fallback_record(error)


def _fallback_record(error: object) -> NormalizedError:
    try:
        return RuntimeClassifier().classify(error)
    except Exception as exc:
        # The value cannot even be inspected; build the record blind.
        Log.error(f"Runtime rules failed, returning a bare record: {exc!r}")
        return create_error(
            type="unknown_error",
            message=UNKNOWN_ERROR_MESSAGE,
            source="runtime",
            original=error,
        )


def _resolve_source(error: object, override: str | None) -> str:
    if override:
        if not ClassifierFactory.supports(override):
            Log.warning(f"Unsupported error source '{override}', using runtime rules")
        else:
            Log.debug(f"Using error source override '{override}'")
        return override

    detected = detect_error_source(error)
    if Log.debug_enabled():
        Log.debug(f"Detected error source '{detected}' for {type(error).__name__}")
    return detected


class ErrorNormalizer:
    """Configured form of ``normalize_error`` with settings-driven defaults."""

    def __init__(
        self,
        *,
        source: ErrorSource | None = None,
        default_retryable: bool | None = None,
    ) -> None:
        self._source = source
        self._default_retryable = default_retryable

    @property
    def source(self) -> ErrorSource | None:
        return self._source

    def normalize(
        self,
        error: object,
        *,
        source: ErrorSource | None = None,
    ) -> NormalizedError:
        """Normalize ``error``; a per-call ``source`` beats the configured one."""
        return normalize_error(
            error,
            source=source or self._source,
            default_retryable=self._default_retryable,
        )
