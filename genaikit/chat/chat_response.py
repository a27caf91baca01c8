"""The response of a chat call, plain or streamed."""

from __future__ import annotations

from dataclasses import dataclass, field

from genaikit.chat.chat_stream import ChatStream
from genaikit.chat.message_content import MessageContent, MessageContentKind
from genaikit.chat.tool import ToolCall
from genaikit.chat.usage import Usage
from genaikit.model_iden import ModelIden


@dataclass(frozen=True)
class ChatResponse:
    """A chat response.

    ``model_iden`` is the model used for the request (after any mapping);
    ``provider_model_iden`` is the model the provider reports, which may differ.
    """

    model_iden: ModelIden
    provider_model_iden: ModelIden
    content: MessageContent | None = None
    reasoning_content: str | None = None
    usage: Usage = field(default_factory=Usage)

    def content_text(self) -> str | None:
        """The text content, or None if the content is missing or not text."""
        if self.content is None:
            return None
        return self.content.text_as_str()

    def tool_calls(self) -> list[ToolCall] | None:
        """The tool calls, or None if the content holds none."""
        if self.content is None or self.content.kind is not MessageContentKind.TOOL_CALLS:
            return None
        return list(self.content.value)  # type: ignore[arg-type]


@dataclass(frozen=True)
class ChatStreamResponse:
    """A streamed chat response: the event stream and the model used."""

    stream: ChatStream
    model_iden: ModelIden