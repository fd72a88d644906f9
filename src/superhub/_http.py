"""Small helpers for inspecting httpx responses."""

import httpx

JSON_MEDIA_TYPE = "application/json"


def media_type(response: httpx.Response) -> str:
    """Declared media type of ``response``, lowercased, without parameters.

    Returns an empty string when no Content-Type header is present.
    """
    content_type = response.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower()


def status_line(response: httpx.Response) -> str:
    """Status code and reason phrase, e.g. ``"404 Not Found"``."""
    return f"{response.status_code} {response.reason_phrase}".strip()
