"""Testing utilities for code that uses the SuperHub client.

Requests are served by ``httpx.MockTransport``, so no network is touched.

Example:
    ```python
    from superhub.testing import create_error_response, create_mock_client


    def test_missing_server_is_reported():
        client = create_mock_client(lambda request: create_error_response(404, "Not Found", "no such server"))
        with pytest.raises(RequestError):
            client.get_server(5)
    ```
"""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import httpx

from superhub.auth.credentials import Credentials
from superhub.client import SuperhubClient
from superhub.models._fields import format_datetime

MOCK_BASE_URL = "http://127.0.0.1:8080/v1"

Handler = Callable[[httpx.Request], httpx.Response]


def create_mock_client(
    handler: Handler,
    credentials: Credentials | None = None,
    base_url: str = MOCK_BASE_URL,
) -> SuperhubClient:
    """SuperhubClient whose requests are answered by ``handler``."""
    return SuperhubClient(
        credentials=credentials,
        base_url=base_url,
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


def create_json_response(status_code: int, data: Any) -> httpx.Response:
    """Response with a JSON body and ``Content-Type: application/json``."""
    return httpx.Response(status_code, json=data)


def create_error_response(
    status_code: int,
    error: str,
    message: str,
    path: str = "/",
    timestamp: datetime | None = None,
) -> httpx.Response:
    """Response carrying the API's structured error body."""
    timestamp = timestamp or datetime.now(UTC)
    return create_json_response(
        status_code,
        {
            "error": error,
            "message": message,
            "path": path,
            "status": status_code,
            "timestamp": format_datetime(timestamp),
        },
    )


__all__ = [
    "MOCK_BASE_URL",
    "create_error_response",
    "create_json_response",
    "create_mock_client",
]
