"""Guess which ecosystem produced a raw error value from its shape alone.

``DETECTION_RULES`` is evaluated top to bottom and the first matching rule
wins. Explicit markers (client-library flags, GraphQL ``errors`` lists)
come before the generic numeric-status and nested-response checks, which
would otherwise claim GraphQL and REST payloads as plain fetch errors.
"""

from collections.abc import Callable

from error_normalizer.inspection.predicates import (
    get_field,
    is_abort_error,
    is_http_client_error,
    is_list,
    is_network_failure,
    is_number,
    is_object,
    is_present,
)
from error_normalizer.models import ErrorSource


def _has_errors_list(error: object) -> bool:
    return is_object(error) and is_list(get_field(error, "errors"))


def _is_response_like(error: object) -> bool:
    return (
        is_object(error)
        and isinstance(get_field(error, "ok"), bool)
        and is_number(get_field(error, "status"))
    )


def _is_abort_exception(error: object) -> bool:
    return isinstance(error, BaseException) and is_abort_error(error)


def _has_response_data(error: object) -> bool:
    if not is_object(error):
        return False
    response = get_field(error, "response")
    return is_object(response) and is_present(get_field(response, "data"))


def _has_extensions(error: object) -> bool:
    return is_object(error) and is_object(get_field(error, "extensions"))


def _has_numeric_status(error: object) -> bool:
    return is_object(error) and is_number(get_field(error, "status"))


def _has_api_error_fields(error: object) -> bool:
    if not is_object(error):
        return False
    return any(
        is_present(get_field(error, name))
        for name in ("response", "error", "detail", "errors")
    )


DETECTION_RULES: tuple[tuple[Callable[[object], bool], ErrorSource], ...] = (
    # Client-library flag or httpx exception.
    (is_http_client_error, "axios"),
    # GraphQL response envelope.
    (_has_errors_list, "graphql"),
    # fetch Response: boolean ``ok`` plus numeric ``status``.
    (_is_response_like, "fetch"),
    # Connection never established.
    (is_network_failure, "fetch"),
    # Aborted or timed-out request.
    (_is_abort_exception, "fetch"),
    # HTTP client error wrapping a response body.
    (_has_response_data, "rest"),
    # Single GraphQL error object.
    (_has_extensions, "graphql"),
    (_has_numeric_status, "fetch"),
    # Common REST error keys.
    (_has_api_error_fields, "rest"),
)


def detect_error_source(error: object) -> ErrorSource:
    """Return the source whose classifier should handle ``error``.

    Values matching no rule, including strings, None and bare exceptions,
    are ``"runtime"``.
    """
    for matches, source in DETECTION_RULES:
        if matches(error):
            return source
    return "runtime"
