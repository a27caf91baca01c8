"""Chat requests."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from typing import Any

from genaikit.chat.chat_message import ChatMessage, ChatRole
from genaikit.chat.message_content import MessageContentKind
from genaikit.chat.tool import Tool


@dataclass(frozen=True)
class ChatRequest:
    """A chat request: an optional system content, messages and tools.

    Setters return a new request and leave this one unchanged.
    """

    messages: tuple[ChatMessage, ...] = field(default_factory=tuple)
    system: str | None = None
    tools: tuple[Tool, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", tuple(self.messages))
        if self.tools is not None:
            object.__setattr__(self, "tools", tuple(self.tools))

    @classmethod
    def from_system(cls, content: str) -> ChatRequest:
        return cls(system=content)

    @classmethod
    def from_user(cls, content: str) -> ChatRequest:
        return cls(messages=(ChatMessage.user(content),))

    @classmethod
    def from_messages(cls, messages: Iterable[ChatMessage]) -> ChatRequest:
        return cls(messages=tuple(messages))

    def with_system(self, system: str) -> ChatRequest:
        return replace(self, system=system)

    def append_message(self, message: Any) -> ChatRequest:
        """Append a message, a list of tool calls or a tool response."""
        return replace(self, messages=(*self.messages, ChatMessage.coerce(message)))

    def append_messages(self, messages: Iterable[ChatMessage]) -> ChatRequest:
        return replace(self, messages=(*self.messages, *map(ChatMessage.coerce, messages)))

    def with_tools(self, tools: Iterable[Tool]) -> ChatRequest:
        return replace(self, tools=tuple(tools))

    def append_tool(self, tool: Tool) -> ChatRequest:
        if not isinstance(tool, Tool):
            raise TypeError("tool must be a Tool")
        return replace(self, tools=(*(self.tools or ()), tool))

    def iter_systems(self) -> Iterator[str]:
        """Yield the system content, then the text of each system message."""
        if self.system is not None:
            yield self.system
        for message in self.messages:
            if (
                message.role is ChatRole.SYSTEM
                and message.content.kind is MessageContentKind.TEXT
            ):
                yield message.content.value  # type: ignore[misc]

    def combine_systems(self) -> str | None:
        """Join all system content, separated by an empty line; None if there is none.

        After content ending with a newline only one more newline is added;
        nothing is added after empty content.
        """
        combined: str | None = None
        for system in self.iter_systems():
            if combined is None:
                combined = ""
            if combined.endswith("\n"):
                combined += "\n"
            elif combined:
                combined += "\n\n"
            combined += system
        return combined