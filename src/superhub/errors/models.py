"""Structured error body returned by the API on 4xx responses."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

import httpx

from superhub._http import JSON_MEDIA_TYPE, media_type
from superhub.models._fields import parse_optional_datetime


@dataclass(frozen=True)
class ErrorResponse:
    """Error body: ``{error, message, path, status, timestamp}``."""

    error: str = ""  # machine-readable error name, e.g. "Not Found"
    message: str = ""
    path: str = ""  # request path the error occurred on
    status: int = 0
    timestamp: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ErrorResponse":
        return cls(
            error=str(data.get("error") or ""),
            message=str(data.get("message") or ""),
            path=str(data.get("path") or ""),
            status=int(data.get("status") or 0),
            timestamp=parse_optional_datetime(data.get("timestamp")),
        )

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorResponse | None":
        """Parse the error body of ``response``.

        Returns:
            ErrorResponse, or None if the body is not a JSON object of the
            expected shape.
        """
        if media_type(response) != JSON_MEDIA_TYPE:
            return None

        try:
            data = response.json()
        except ValueError:
            return None

        if not isinstance(data, dict):
            return None

        try:
            return cls.from_dict(data)
        except (TypeError, ValueError):
            return None

    def __str__(self) -> str:
        return f"request error: {self.status} ({self.error}) on path {self.path}: {self.message}"
