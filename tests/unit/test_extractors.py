"""Tests for status, message and body extraction."""

import httpx

from error_normalizer.inspection.extractors import (
    first_entry,
    get_status,
    response_body,
    response_status,
    safe_message,
)


class TestGetStatus:
    def test_direct_status(self) -> None:
        assert get_status({"status": 404}) == 404

    def test_nested_response_status(self) -> None:
        assert get_status({"response": {"status": 503}}) == 503

    def test_status_code_camel_case(self) -> None:
        assert get_status({"statusCode": 409}) == 409

    def test_numeric_string_code(self) -> None:
        assert get_status({"code": "422"}) == 422

    def test_leading_integer_of_code(self) -> None:
        assert get_status({"code": "404 Not Found"}) == 404

    def test_non_numeric_code_ignored(self) -> None:
        assert get_status({"code": "ECONNABORTED"}) is None

    def test_direct_status_beats_nested_and_code(self) -> None:
        error = {"status": 400, "response": {"status": 500}, "statusCode": 401, "code": "403"}
        assert get_status(error) == 400

    def test_nested_beats_status_code_and_code(self) -> None:
        error = {"response": {"status": 500}, "statusCode": 401, "code": "403"}
        assert get_status(error) == 500

    def test_status_code_beats_code(self) -> None:
        assert get_status({"statusCode": 401, "code": "403"}) == 401

    def test_non_numeric_status_skipped(self) -> None:
        assert get_status({"status": "500", "statusCode": 502}) == 502

    def test_bool_status_is_not_a_status(self) -> None:
        assert get_status({"status": True}) is None

    def test_python_spellings_fill_gaps(self) -> None:
        assert get_status({"status_code": 418}) == 418
        assert get_status({"response": {"status_code": 502}}) == 502

    def test_string_code_beats_python_spellings(self) -> None:
        assert get_status({"code": "401", "status_code": 500}) == 401

    def test_reads_httpx_response(self, httpx_request: httpx.Request) -> None:
        response = httpx.Response(429, request=httpx_request)
        error = httpx.HTTPStatusError("limited", request=httpx_request, response=response)
        assert get_status(error) == 429

    def test_non_objects(self) -> None:
        assert get_status(None) is None
        assert get_status("500") is None
        assert get_status([{"status": 500}]) is None


class TestResponseStatus:
    def test_prefers_status(self) -> None:
        assert response_status({"status": 401, "status_code": 500}) == 401

    def test_falls_back_to_status_code(self) -> None:
        assert response_status({"status_code": 500}) == 500

    def test_missing(self) -> None:
        assert response_status({}) is None


class TestSafeMessage:
    def test_string(self) -> None:
        assert safe_message("Simple error message") == "Simple error message"

    def test_message_field(self) -> None:
        assert safe_message({"message": "Object error message"}) == "Object error message"

    def test_exception_text(self) -> None:
        assert safe_message(RuntimeError("Something went wrong")) == "Something went wrong"

    def test_message_attribute_beats_exception_text(self) -> None:
        exc = RuntimeError("args text")
        exc.message = "attribute text"  # type: ignore[attr-defined]
        assert safe_message(exc) == "attribute text"

    def test_fallbacks(self) -> None:
        fallback = "An unknown error occurred"
        assert safe_message(None) == fallback
        assert safe_message("") == fallback
        assert safe_message({"message": ""}) == fallback
        assert safe_message({"message": 12}) == fallback
        assert safe_message(RuntimeError()) == fallback
        assert safe_message(42) == fallback

    def test_broken_str_falls_back(self) -> None:
        class Unprintable(Exception):
            def __str__(self) -> str:
                raise RuntimeError("no")

        assert safe_message(Unprintable()) == "An unknown error occurred"


class TestResponseBody:
    def test_data_field(self) -> None:
        assert response_body({"data": {"message": "x"}}) == {"message": "x"}

    def test_httpx_json_body(self, httpx_request: httpx.Request) -> None:
        response = httpx.Response(400, json={"error": "Bad"}, request=httpx_request)
        assert response_body(response) == {"error": "Bad"}

    def test_httpx_non_json_body(self, httpx_request: httpx.Request) -> None:
        response = httpx.Response(502, text="<html>bad gateway</html>", request=httpx_request)
        assert response_body(response) is None

    def test_httpx_json_list_body_ignored(self, httpx_request: httpx.Request) -> None:
        response = httpx.Response(400, json=["a"], request=httpx_request)
        assert response_body(response) is None


class TestFirstEntry:
    def test_first_pair(self) -> None:
        assert first_entry({"email": "Invalid", "password": "Short"}) == ("email", "Invalid")

    def test_empty_or_not_mapping(self) -> None:
        assert first_entry({}) is None
        assert first_entry(["x"]) is None
        assert first_entry(None) is None
