"""A stream of string messages split from a streamed HTTP body.

For services that do not use ``text/event-stream``: the body is cut into
messages either by a delimiter or as the items of a pretty-printed JSON array.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from enum import Enum

import httpx

from genaikit.webc.errors import WebcError
from genaikit.webc.web_client import WebClient

_log = logging.getLogger(__name__)


class StreamMode(Enum):
    """How the body is split into messages."""

    DELIMITER = "delimiter"
    PRETTY_JSON_ARRAY = "pretty_json_array"


@dataclass
class BuffResponse:
    """The messages found in one chunk, and the unfinished tail if any."""

    first_message: str | None = None
    next_messages: list[str] = field(default_factory=list)
    candidate_message: str | None = None

    def messages(self) -> list[str]:
        """The complete messages, in order."""
        if self.first_message is None:
            return list(self.next_messages)
        return [self.first_message, *self.next_messages]


def process_delimited(buff: str, partial: str | None, delimiter: str) -> BuffResponse:
    """Split ``buff`` by ``delimiter``, prefixing the first piece with ``partial``.

    The last piece becomes the candidate (the partial message for the next
    chunk). Empty messages are skipped.
    """
    result = BuffResponse()
    prefix = partial or ""
    candidate: str | None = None
    for part in buff.split(delimiter):
        if candidate is not None:
            message, candidate = candidate, None
            if message:
                if result.first_message is None:
                    result.first_message = message
                else:
                    result.next_messages.append(message)
        else:
            candidate = prefix + part
            prefix = ""
    result.candidate_message = candidate
    return result


def process_pretty_json_array(buff: str) -> BuffResponse:
    """Split a chunk of a pretty-printed JSON array into messages.

    A leading ``[`` and a trailing ``]`` become messages of their own, the
    object in between becomes one message, and separating commas are dropped.
    Each chunk is assumed to hold whole array items.
    """
    text = buff.strip()
    messages: list[str] = []

    if text.startswith("["):
        messages.append("[")
        rest = text[1:].strip()
    else:
        rest = text

    rest = rest.removeprefix(",").removesuffix(",")

    array_end = rest.endswith("]")
    if array_end:
        rest = rest[:-1].strip()

    if rest:
        messages.append(rest)
    if array_end:
        messages.append("]")

    if not messages:
        return BuffResponse()
    return BuffResponse(first_message=messages[0], next_messages=messages[1:])


class WebStream:
    """Async iterator of the messages of a streamed response.

    The request is sent when iteration starts, and only once: iterating a
    second time yields nothing.
    """

    def __init__(
        self,
        client: WebClient | httpx.AsyncClient,
        request: httpx.Request,
        mode: StreamMode,
        delimiter: str | None = None,
    ) -> None:
        if mode is StreamMode.DELIMITER and not delimiter:
            raise ValueError("delimiter mode needs a non-empty delimiter")
        self._client = client.httpx_client if isinstance(client, WebClient) else client
        self._request: httpx.Request | None = request
        self._mode = mode
        self._delimiter = delimiter
        self._events: AsyncIterator[str] | None = None

    @classmethod
    def with_delimiter(
        cls, client: WebClient | httpx.AsyncClient, request: httpx.Request, delimiter: str
    ) -> WebStream:
        """Split the body into messages at each ``delimiter``."""
        return cls(client, request, StreamMode.DELIMITER, delimiter)

    @classmethod
    def with_pretty_json_array(
        cls, client: WebClient | httpx.AsyncClient, request: httpx.Request
    ) -> WebStream:
        """Split the body, a pretty-printed JSON array, into its items."""
        return cls(client, request, StreamMode.PRETTY_JSON_ARRAY)

    @property
    def mode(self) -> StreamMode:
        return self._mode

    def __aiter__(self) -> AsyncIterator[str]:
        if self._events is None:
            self._events = self._run()
        return self._events

    async def aclose(self) -> None:
        """Stop the stream and release the response."""
        if self._events is not None:
            await self._events.aclose()  # type: ignore[attr-defined]

    def _split(self, text: str, partial: str | None) -> BuffResponse:
        if self._mode is StreamMode.DELIMITER:
            return process_delimited(text, partial, self._delimiter)  # type: ignore[arg-type]
        return process_pretty_json_array(text)

    async def _run(self) -> AsyncIterator[str]:
        request, self._request = self._request, None
        if request is None:
            return
        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as err:
            raise WebcError(f"HTTP error: {err}") from err

        try:
            partial: str | None = None
            async for data in response.aiter_bytes():
                try:
                    text = data.decode("utf-8")
                except UnicodeDecodeError as err:
                    raise WebcError(f"invalid UTF-8 in stream: {err}") from err

                buff = self._split(text, partial)
                if self._mode is StreamMode.DELIMITER:
                    partial = None

                if buff.candidate_message is not None:
                    if partial is not None:
                        _log.warning("partial message is not none")
                    partial = buff.candidate_message

                for message in buff.messages():
                    yield message

            if partial:
                yield partial
        except httpx.HTTPError as err:
            raise WebcError(f"HTTP error: {err}") from err
        finally:
            await response.aclose()