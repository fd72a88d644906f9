"""Error taxonomy and response classification for the SuperHub client."""

from superhub.errors.exceptions import (
    APIError,
    ClientError,
    DecodeError,
    MalformedURLError,
    RequestError,
    ServerFault,
    SuperhubError,
    TransportError,
    UnsupportedContentTypeError,
)
from superhub.errors.handler import raise_for_status
from superhub.errors.models import ErrorResponse

__all__ = [
    "APIError",
    "ClientError",
    "DecodeError",
    "ErrorResponse",
    "MalformedURLError",
    "RequestError",
    "ServerFault",
    "SuperhubError",
    "TransportError",
    "UnsupportedContentTypeError",
    "raise_for_status",
]
