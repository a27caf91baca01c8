"""A small JSON web client over httpx."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import httpx

from genaikit.webc.errors import ResponseFailedNotJson, ResponseFailedStatus, WebcError

Headers = Sequence[tuple[str, str]]


@dataclass(frozen=True)
class WebResponse:
    """A successful, non-streamed response with a JSON body."""

    status: int
    body: Any

    @classmethod
    async def from_httpx_response(cls, response: httpx.Response) -> WebResponse:
        """Check the status and content type, then decode the JSON body.

        Raises :class:`ResponseFailedStatus` for a non-success status and
        :class:`ResponseFailedNotJson` when the content type is not JSON.
        """
        status = response.status_code
        raw = await response.aread()
        if not response.is_success:
            raise ResponseFailedStatus(status, raw.decode("utf-8", errors="replace"))

        content_type = response.headers.get("content-type", "")
        if not content_type.startswith("application/json"):
            raise ResponseFailedNotJson(content_type)
        try:
            body = json.loads(raw)
        except ValueError as err:
            raise WebcError(f"HTTP error: invalid JSON body: {err}") from err
        return cls(status, body)


class WebClient:
    """Sends GET and JSON POST requests and decodes JSON responses.

    A client created without an ``httpx.AsyncClient`` owns the one it makes
    and closes it in :meth:`aclose`.
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()

    @property
    def httpx_client(self) -> httpx.AsyncClient:
        """The underlying httpx client."""
        return self._client

    def __repr__(self) -> str:
        return "WebClient()"

    async def do_get(self, url: str, headers: Headers) -> WebResponse:
        """Send a GET request and return the decoded JSON response."""
        request = self._client.build_request("GET", url, headers=list(headers))
        return await self._send(request)

    async def do_post(self, url: str, headers: Headers, content: Any) -> WebResponse:
        """POST ``content`` as JSON and return the decoded JSON response."""
        request = self.build_post_request(url, headers, content)
        return await self._send(request)

    def build_post_request(self, url: str, headers: Headers, content: Any) -> httpx.Request:
        """Build, without sending, a POST request with ``content`` as JSON body."""
        return self._client.build_request("POST", url, headers=list(headers), json=content)

    async def _send(self, request: httpx.Request) -> WebResponse:
        try:
            response = await self._client.send(request)
        except httpx.HTTPError as err:
            raise WebcError(f"HTTP error: {err}") from err
        return await WebResponse.from_httpx_response(response)

    async def aclose(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> WebClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()