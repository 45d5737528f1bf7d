from error_normalizer.detection.detector import detect_error_source
from error_normalizer.exceptions import ErrorNormalizerError, InvalidErrorRecordError
from error_normalizer.guards import is_retryable, is_validation_error
from error_normalizer.models import (
    ERROR_SOURCES,
    ERROR_TYPES,
    ErrorSource,
    ErrorType,
    NormalizedError,
)
from error_normalizer.normalization import ErrorNormalizer, NormalizerFactory, normalize_error
from error_normalizer.records import create_error

__all__ = [
    "ERROR_SOURCES",
    "ERROR_TYPES",
    "ErrorNormalizer",
    "ErrorNormalizerError",
    "ErrorSource",
    "ErrorType",
    "InvalidErrorRecordError",
    "NormalizedError",
    "NormalizerFactory",
    "create_error",
    "detect_error_source",
    "is_retryable",
    "is_validation_error",
    "normalize_error",
]
