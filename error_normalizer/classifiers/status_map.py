"""HTTP status to error type mapping shared by the HTTP-based classifiers."""

from error_normalizer.models import ErrorType

STATUS_TYPES: dict[int, ErrorType] = {
    400: "client_error",
    401: "authentication_error",
    403: "authorization_error",
    404: "not_found",
    409: "conflict",
    422: "validation_error",
    429: "rate_limited",
}


def map_status(status: int | None, *, missing: ErrorType) -> ErrorType:
    """Return the error type for ``status``.

    A missing or zero status yields ``missing``; unlisted statuses below 500
    are client errors.
    """
    if not status:
        return missing
    exact = STATUS_TYPES.get(status)
    if exact is not None:
        return exact
    if status >= 500:
        return "server_error"
    return "client_error"


def is_retryable_status(status: int | None) -> bool:
    return status is not None and (status >= 500 or status == 429)
