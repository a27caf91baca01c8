"""Chat messages and their roles and options."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from genaikit.chat.message_content import MessageContent
from genaikit.chat.tool import ToolCall, ToolResponse


class ChatRole(Enum):
    """The role of a chat message."""

    SYSTEM = "System"
    USER = "User"
    ASSISTANT = "Assistant"
    TOOL = "Tool"

    def __str__(self) -> str:
        return self.value


class CacheControl(Enum):
    """Cache control of a message (used by providers that support it)."""

    EPHEMERAL = "Ephemeral"


@dataclass(frozen=True)
class MessageOptions:
    """Options attached to a single message."""

    cache_control: CacheControl | None = None


@dataclass(frozen=True)
class ChatMessage:
    """A chat message of any role."""

    role: ChatRole
    content: MessageContent
    options: MessageOptions | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.content, MessageContent):
            object.__setattr__(self, "content", MessageContent.coerce(self.content))

    @classmethod
    def system(cls, content: Any) -> ChatMessage:
        return cls(ChatRole.SYSTEM, MessageContent.coerce(content))

    @classmethod
    def user(cls, content: Any) -> ChatMessage:
        return cls(ChatRole.USER, MessageContent.coerce(content))

    @classmethod
    def assistant(cls, content: Any) -> ChatMessage:
        return cls(ChatRole.ASSISTANT, MessageContent.coerce(content))

    @classmethod
    def from_tool_calls(cls, tool_calls: Iterable[ToolCall]) -> ChatMessage:
        """An assistant message holding the tool calls the model made."""
        return cls(ChatRole.ASSISTANT, MessageContent.from_tool_calls(tool_calls))

    @classmethod
    def from_tool_response(cls, tool_response: ToolResponse) -> ChatMessage:
        """A tool message holding one tool response."""
        return cls(ChatRole.TOOL, MessageContent.from_tool_responses([tool_response]))

    @classmethod
    def coerce(cls, value: Any) -> ChatMessage:
        """Accept a message, a list of tool calls or a tool response."""
        if isinstance(value, ChatMessage):
            return value
        if isinstance(value, ToolResponse):
            return cls.from_tool_response(value)
        if isinstance(value, (list, tuple)) and all(isinstance(v, ToolCall) for v in value):
            return cls.from_tool_calls(value)
        raise TypeError(f"cannot make a chat message from {type(value).__name__}")

    def with_options(self, options: MessageOptions | CacheControl) -> ChatMessage:
        """Return a copy with ``options`` (a cache control is wrapped in options)."""
        if isinstance(options, CacheControl):
            options = MessageOptions(cache_control=options)
        if not isinstance(options, MessageOptions):
            raise TypeError("options must be MessageOptions or CacheControl")
        return replace(self, options=options)