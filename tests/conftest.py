from collections.abc import Callable

import httpx
import pytest

API_URL = "https://api.example.com/users"


@pytest.fixture()
def httpx_request() -> httpx.Request:
    """A request object for building httpx errors without any network access."""
    return httpx.Request("POST", API_URL)


@pytest.fixture()
def make_status_error(
    httpx_request: httpx.Request,
) -> Callable[..., httpx.HTTPStatusError]:
    """Build an httpx.HTTPStatusError for a given status and JSON or text body."""

    def _make(
        status_code: int,
        json: object | None = None,
        text: str | None = None,
    ) -> httpx.HTTPStatusError:
        if json is not None:
            response = httpx.Response(status_code, json=json, request=httpx_request)
        else:
            response = httpx.Response(status_code, text=text or "", request=httpx_request)
        return httpx.HTTPStatusError(
            f"HTTP {status_code} for {API_URL}",
            request=httpx_request,
            response=response,
        )

    return _make
