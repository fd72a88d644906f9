"""Exceptions raised by the SuperHub client.

Every failure of a call surfaces as exactly one of these; none is logged
and swallowed along the way.
"""

from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from superhub.errors.models import ErrorResponse


class SuperhubError(Exception):
    """Base exception for all client errors."""

    pass


class MalformedURLError(SuperhubError):
    """The configured base URL cannot be parsed."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class TransportError(SuperhubError):
    """The request could not be dispatched (connection, DNS, TLS, timeout).

    The underlying httpx exception is available as ``__cause__``. The client
    never retries; callers may do so at their discretion.
    """

    def __init__(self, message: str, request: "httpx.Request | None" = None):
        super().__init__(message)
        self.request = request


class APIError(SuperhubError):
    """The API answered with an unsuccessful status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class ClientError(APIError):
    """4xx response whose body is not a structured error."""

    pass


class RequestError(ClientError):
    """4xx response carrying the API's structured error body."""

    def __init__(self, error_response: "ErrorResponse", **kwargs):
        super().__init__(str(error_response), **kwargs)
        self.error_response = error_response

    @property
    def error_name(self) -> str:
        return self.error_response.error

    @property
    def message(self) -> str:
        return self.error_response.message

    @property
    def path(self) -> str:
        return self.error_response.path

    @property
    def status(self) -> int:
        return self.error_response.status

    @property
    def timestamp(self) -> datetime | None:
        return self.error_response.timestamp


class ServerFault(APIError):
    """5xx response. Treated as opaque; the body is never decoded."""

    pass


class UnsupportedContentTypeError(SuperhubError):
    """The response declared a body type the client cannot decode."""

    def __init__(self, content_type: str):
        super().__init__(f"unsupported content type: {content_type!r}")
        self.content_type = content_type


class DecodeError(SuperhubError):
    """The response body does not match the expected shape.

    The original parsing failure is available as ``__cause__``.
    """

    pass
