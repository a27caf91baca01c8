"""Printing of a chat stream, for quick testing and debugging."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from genaikit.chat.chat_response import ChatStreamResponse
from genaikit.chat.chat_stream import ReasoningChunk, StreamChunk, StreamEnd, StreamStart


@dataclass(frozen=True)
class PrintChatStreamOptions:
    """Options of :func:`print_chat_stream`."""

    print_events: bool | None = None

    @classmethod
    def from_print_events(cls, print_events: bool) -> PrintChatStreamOptions:
        """Options with ``print_events`` set."""
        return cls(print_events=print_events)


async def print_chat_stream(
    chat_res: ChatStreamResponse,
    options: PrintChatStreamOptions | None = None,
    out: TextIO | None = None,
) -> str:
    """Print the chunks of a chat stream as they come and return them joined.

    Reasoning chunks are printed and captured too. The stream stops quietly
    at the first error it raises. ``out`` defaults to standard output.
    """
    out = sys.stdout if out is None else out
    print_events = bool(options and options.print_events)
    captured: list[str] = []
    first_chunk = True
    first_reasoning_chunk = True

    try:
        stream = chat_res.stream.__aiter__()
        while True:
            try:
                event = await stream.__anext__()
            except StopAsyncIteration:
                break
            except Exception:  # a failing stream ends the printing, as documented
                break

            info: str | None = None
            content: str | None = None
            if isinstance(event, StreamStart):
                if print_events:
                    info = "\n-- ChatStreamEvent::Start\n"
            elif isinstance(event, StreamChunk):
                content = event.content
                if print_events and first_chunk:
                    first_chunk = False
                    info = "\n-- ChatStreamEvent::Chunk (concatenated):\n"
            elif isinstance(event, ReasoningChunk):
                content = event.content
                if print_events and first_reasoning_chunk:
                    first_reasoning_chunk = False
                    info = "\n-- ChatStreamEvent::ReasoningChunk (concatenated):\n"
            elif isinstance(event, StreamEnd):
                if print_events:
                    info = f"\n\n-- ChatStreamEvent::End {event!r}\n"

            if info is not None:
                out.write(info)
            if content is not None:
                captured.append(content)
                out.write(content)
            out.flush()

        out.write("\n")
        return "".join(captured)
    finally:
        out.flush()