"""Events of a streamed chat response and the stream that yields them."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator
from dataclasses import dataclass
from typing import Union

from genaikit.chat.message_content import MessageContent
from genaikit.chat.usage import Usage


@dataclass(frozen=True)
class StreamStart:
    """The first event of a stream."""


@dataclass(frozen=True)
class StreamChunk:
    """A piece of the response text."""

    content: str


@dataclass(frozen=True)
class ReasoningChunk:
    """A piece of the reasoning text."""

    content: str


@dataclass(frozen=True)
class StreamEnd:
    """The last event, with whatever the chat options asked to capture."""

    captured_usage: Usage | None = None
    captured_content: MessageContent | None = None
    captured_reasoning_content: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.captured_content, str):
            object.__setattr__(
                self, "captured_content", MessageContent.from_text(self.captured_content)
            )


ChatStreamEvent = Union[StreamStart, StreamChunk, ReasoningChunk, StreamEnd]
_EVENT_TYPES = (StreamStart, StreamChunk, ReasoningChunk, StreamEnd)


class ChatStream:
    """Async iterator over the events of a chat stream.

    Errors from the underlying source are raised while iterating.
    """

    def __init__(self, events: AsyncIterable[ChatStreamEvent]) -> None:
        self._events: AsyncIterator[ChatStreamEvent] = events.__aiter__()

    def __aiter__(self) -> ChatStream:
        return self

    async def __anext__(self) -> ChatStreamEvent:
        event = await self._events.__anext__()
        if not isinstance(event, _EVENT_TYPES):
            raise TypeError(f"not a chat stream event: {type(event).__name__}")
        return event

    async def aclose(self) -> None:
        """Close the underlying source if it can be closed."""
        close = getattr(self._events, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> ChatStream:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()