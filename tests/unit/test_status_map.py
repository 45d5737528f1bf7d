"""Tests for the shared HTTP status mapping."""

import pytest

from error_normalizer.classifiers.axios_classifier import AxiosClassifier
from error_normalizer.classifiers.fetch_classifier import FetchClassifier
from error_normalizer.classifiers.rest_classifier import RestClassifier
from error_normalizer.classifiers.status_map import is_retryable_status, map_status


class TestMapStatus:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (400, "client_error"),
            (401, "authentication_error"),
            (403, "authorization_error"),
            (404, "not_found"),
            (409, "conflict"),
            (422, "validation_error"),
            (429, "rate_limited"),
            (500, "server_error"),
            (503, "server_error"),
            (418, "client_error"),
            (302, "client_error"),
        ],
    )
    def test_table(self, status: int, expected: str) -> None:
        assert map_status(status, missing="network_error") == expected

    def test_missing_uses_given_type(self) -> None:
        assert map_status(None, missing="network_error") == "network_error"
        assert map_status(None, missing="unknown_error") == "unknown_error"

    def test_zero_counts_as_missing(self) -> None:
        assert map_status(0, missing="unknown_error") == "unknown_error"


class TestIsRetryableStatus:
    def test_retryable(self) -> None:
        assert is_retryable_status(500)
        assert is_retryable_status(503)
        assert is_retryable_status(429)

    def test_not_retryable(self) -> None:
        assert not is_retryable_status(None)
        assert not is_retryable_status(404)
        assert not is_retryable_status(422)


class TestHttpClassifiersAgree:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (400, "client_error"),
            (401, "authentication_error"),
            (403, "authorization_error"),
            (404, "not_found"),
            (409, "conflict"),
            (422, "validation_error"),
            (429, "rate_limited"),
            (500, "server_error"),
            (503, "server_error"),
        ],
    )
    def test_same_type_and_retryable(self, status: int, expected: str) -> None:
        axios = AxiosClassifier().classify({"response": {"status": status, "data": {}}})
        fetch = FetchClassifier().classify({"status": status})
        rest = RestClassifier().classify({"response": {"status": status, "data": {}}})
        assert axios.type == fetch.type == rest.type == expected
        assert axios.retryable == fetch.retryable == rest.retryable == is_retryable_status(status)
        assert axios.status == fetch.status == rest.status == status
