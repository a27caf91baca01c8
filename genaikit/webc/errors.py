"""Errors raised by the web client."""

from __future__ import annotations

from http import HTTPStatus


def _status_text(status: int) -> str:
    try:
        reason = HTTPStatus(status).phrase
    except ValueError:
        reason = "<unknown status code>"
    return f"{status} {reason}"


class WebcError(Exception):
    """Base class of web client errors."""


class ResponseFailedNotJson(WebcError):
    """The response content type is not JSON."""

    def __init__(self, content_type: str) -> None:
        self.content_type = content_type
        super().__init__(f"Response content type '{content_type}' is not JSON as expected.")


class ResponseFailedStatus(WebcError):
    """The response has a non-success status code."""

    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self.body = body
        super().__init__(
            f"Request failed with status code '{_status_text(status)}'. Response body:\n{body}"
        )