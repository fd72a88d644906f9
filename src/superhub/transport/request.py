"""Generic request/response pipeline for SuperHub endpoints.

Each call is a single round trip:

1. resolve the endpoint URL against the client's base URL
2. serialize the optional body as JSON
3. authorize the request with the client's credentials
4. dispatch it over the client's httpx transport
5. classify the response by status and decode the body

Decoding is driven by a *decoder*, a callable turning the parsed JSON value
into the expected result (usually a model's ``from_dict``):

```python
from superhub.models import Server
from superhub.transport import HTTPMethod, invoke_endpoint, list_of

servers = invoke_endpoint(client, HTTPMethod.GET, "/servers", list_of(Server.from_dict))
```
"""

import json
import logging
from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from superhub._http import JSON_MEDIA_TYPE, media_type, status_line
from superhub.errors.exceptions import DecodeError, TransportError, UnsupportedContentTypeError
from superhub.errors.handler import raise_for_status

if TYPE_CHECKING:
    from superhub.client import BaseClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

Decoder = Callable[[Any], T]
QueryParams = Mapping[str, str | int | float | bool]


class HTTPMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


def list_of(decoder: Decoder[T]) -> Decoder[list[T]]:
    """Build a decoder for a JSON array whose items ``decoder`` understands."""

    def decode_list(data: Any) -> list[T]:
        if not isinstance(data, list):
            raise TypeError(f"expected JSON array, got {type(data).__name__}")
        return [decoder(item) for item in data]

    return decode_list


def _ignore(data: Any) -> None:
    return None


def serialize_body(body: Any) -> bytes:
    """Serialize a request body to JSON.

    Models are converted through their ``to_dict``; anything else must be
    JSON-serializable as is.
    """
    if hasattr(body, "to_dict"):
        body = body.to_dict()
    return json.dumps(body, separators=(",", ":")).encode("utf-8")


def _encode_params(params: QueryParams | None) -> dict[str, str] | None:
    if params is None:
        return None
    # The API expects lowercase booleans
    return {key: str(value).lower() if isinstance(value, bool) else str(value) for key, value in params.items()}


def build_request(
    client: "BaseClient",
    method: HTTPMethod | str,
    path: str,
    body: Any = None,
    params: QueryParams | None = None,
) -> httpx.Request:
    """Build the outbound request for ``path``.

    The request is built by the client's httpx.Client so that its default
    headers and timeout apply.

    Raises:
        MalformedURLError: If the client's base URL is unusable.
    """
    url = client.resolve(path)

    headers = {}
    content = None
    if body is not None:
        content = serialize_body(body)
        headers["Content-Type"] = JSON_MEDIA_TYPE

    return client.http_client.build_request(
        str(method),
        url,
        params=_encode_params(params),
        headers=headers,
        content=content,
    )


def invoke_endpoint(
    client: "BaseClient",
    method: HTTPMethod | str,
    path: str,
    decoder: Decoder[T],
    body: Any = None,
    params: QueryParams | None = None,
) -> T | None:
    """Call an endpoint and decode its response with ``decoder``.

    Args:
        client: Client supplying base URL, credentials and transport.
        method: HTTP verb.
        path: Endpoint path relative to the base URL.
        decoder: Turns the parsed JSON body into the result.
        body: Optional request body, serialized as JSON.
        params: Optional query parameters.

    Returns:
        The decoded value, or None if the response declared no content type.

    Raises:
        MalformedURLError: The base URL cannot be parsed.
        TransportError: The request could not be dispatched.
        RequestError: 4xx with a structured error body.
        ClientError: 4xx without a structured error body.
        ServerFault: 5xx.
        UnsupportedContentTypeError: The body is not JSON.
        DecodeError: The body does not match the expected shape.
    """
    request = build_request(client, method, path, body=body, params=params)
    return process_request(client, request, decoder)


def invoke_void_endpoint(
    client: "BaseClient",
    method: HTTPMethod | str,
    path: str,
    body: Any = None,
    params: QueryParams | None = None,
) -> None:
    """Call an endpoint whose response carries no meaningful payload.

    Raises the same exceptions as :func:`invoke_endpoint`.
    """
    invoke_endpoint(client, method, path, _ignore, body=body, params=params)


def process_request(client: "BaseClient", request: httpx.Request, decoder: Decoder[T]) -> T | None:
    """Authorize, dispatch and decode an already built request."""
    client.credentials.authorize_request(request)

    logger.debug(f"Dispatching {request.method} {request.url}")
    try:
        response = client.http_client.send(request)
    except httpx.TransportError as e:
        raise TransportError(f"dispatching request {request.method} {request.url}: {e}", request=request) from e

    logger.debug(f"{request.method} {request.url} returned {status_line(response)}")
    return decode_response(response, decoder)


def decode_response(response: httpx.Response, decoder: Decoder[T]) -> T | None:
    """Classify ``response`` by status and decode its body.

    Raises:
        RequestError, ClientError, ServerFault: For 4xx and 5xx responses.
        UnsupportedContentTypeError, DecodeError: If the body cannot be decoded.
    """
    raise_for_status(response)

    if not media_type(response):
        return None

    data = parse_response_body(response)

    try:
        return decoder(data)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise DecodeError(f"decoding response body: {e!r}") from e


def parse_response_body(response: httpx.Response) -> Any:
    """Parse the body according to its declared content type.

    Returns:
        The parsed JSON value, or None when no content type is declared.

    Raises:
        UnsupportedContentTypeError: If the content type is not JSON.
        DecodeError: If the body is not valid JSON.
    """
    declared = media_type(response)

    if declared == "":
        return None

    if declared != JSON_MEDIA_TYPE:
        raise UnsupportedContentTypeError(response.headers.get("content-type", declared))

    try:
        return json.loads(response.content)
    except ValueError as e:
        raise DecodeError(f"parsing response body: {e}") from e
