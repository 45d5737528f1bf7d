from error_normalizer.models import NormalizedError


def is_retryable(error: NormalizedError) -> bool:
    return error.retryable


def is_validation_error(error: NormalizedError) -> bool:
    return error.type == "validation_error"
