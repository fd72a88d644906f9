"""Request/response pipeline shared by every SuperHub endpoint.

Example:
    ```python
    from superhub.transport import HTTPMethod, invoke_void_endpoint

    invoke_void_endpoint(client, HTTPMethod.POST, "/servers/5/blocking")
    ```
"""

from superhub.transport.request import (
    HTTPMethod,
    build_request,
    decode_response,
    invoke_endpoint,
    invoke_void_endpoint,
    list_of,
    parse_response_body,
    process_request,
)

__all__ = [
    "HTTPMethod",
    "build_request",
    "decode_response",
    "invoke_endpoint",
    "invoke_void_endpoint",
    "list_of",
    "parse_response_body",
    "process_request",
]
