"""Classification of HTTP responses by status code."""

import httpx

from superhub._http import status_line
from superhub.errors.exceptions import ClientError, RequestError, ServerFault
from superhub.errors.models import ErrorResponse


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching exception for an unsuccessful response.

    - below 400: returns, the caller decodes the body
    - 400-499: RequestError when the body is a structured error,
      ClientError with the raw status line otherwise
    - 500 and above: ServerFault, the body is never inspected

    Args:
        response: HTTP response object

    Raises:
        RequestError, ClientError or ServerFault
    """
    status_code = response.status_code

    if status_code < 400:
        return

    if status_code >= 500:
        raise ServerFault(
            f"internal server error: {status_line(response)}",
            status_code=status_code,
            response=response,
        )

    error_response = ErrorResponse.from_response(response)
    if error_response is None:
        raise ClientError(
            f"unsuccessful HTTP status: {status_line(response)}",
            status_code=status_code,
            response=response,
        )

    raise RequestError(error_response, status_code=status_code, response=response)
