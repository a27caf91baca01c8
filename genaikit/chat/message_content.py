"""The content of a chat message: text, parts, tool calls or tool responses."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from genaikit.chat.tool import ToolCall, ToolResponse


class ImageSourceKind(Enum):
    """Where the data of an image comes from."""

    URL = "url"
    BASE64 = "base64"


@dataclass(frozen=True)
class ImageSource:
    """An image given by URL (few services accept this) or as base64 text."""

    kind: ImageSourceKind
    value: str

    @classmethod
    def from_url(cls, url: str) -> ImageSource:
        return cls(ImageSourceKind.URL, url)

    @classmethod
    def from_base64(cls, content: str) -> ImageSource:
        return cls(ImageSourceKind.BASE64, content)


@dataclass(frozen=True)
class ContentPart:
    """One part of a multi-part message: either text or an image."""

    text: str | None = None
    content_type: str | None = None
    source: ImageSource | None = None

    def __post_init__(self) -> None:
        is_text = self.text is not None
        is_image = self.source is not None
        if is_text == is_image:
            raise ValueError("a content part holds either text or an image")
        if is_image and self.content_type is None:
            raise ValueError("an image part needs a content type")

    @property
    def is_text(self) -> bool:
        return self.source is None

    @classmethod
    def from_text(cls, text: str) -> ContentPart:
        return cls(text=text)

    @classmethod
    def from_image_base64(cls, content_type: str, content: str) -> ContentPart:
        return cls(content_type=content_type, source=ImageSource.from_base64(content))

    @classmethod
    def from_image_url(cls, content_type: str, url: str) -> ContentPart:
        return cls(content_type=content_type, source=ImageSource.from_url(url))


class MessageContentKind(Enum):
    """The variant of a :class:`MessageContent`."""

    TEXT = "text"
    PARTS = "parts"
    TOOL_CALLS = "tool_calls"
    TOOL_RESPONSES = "tool_responses"


ContentValue = Union[str, tuple]


@dataclass(frozen=True)
class MessageContent:
    """Message content. ``value`` is a string for text, otherwise a tuple of items."""

    kind: MessageContentKind
    value: ContentValue

    @classmethod
    def from_text(cls, content: str) -> MessageContent:
        return cls(MessageContentKind.TEXT, str(content))

    @classmethod
    def from_parts(cls, parts: Iterable[ContentPart | str]) -> MessageContent:
        items = tuple(ContentPart.from_text(p) if isinstance(p, str) else p for p in parts)
        if not all(isinstance(p, ContentPart) for p in items):
            raise TypeError("parts must be ContentPart or str items")
        return cls(MessageContentKind.PARTS, items)

    @classmethod
    def from_tool_calls(cls, tool_calls: Iterable[ToolCall]) -> MessageContent:
        items = tuple(tool_calls)
        if not all(isinstance(c, ToolCall) for c in items):
            raise TypeError("tool_calls must be ToolCall items")
        return cls(MessageContentKind.TOOL_CALLS, items)

    @classmethod
    def from_tool_responses(cls, tool_responses: Iterable[ToolResponse]) -> MessageContent:
        items = tuple(tool_responses)
        if not all(isinstance(r, ToolResponse) for r in items):
            raise TypeError("tool_responses must be ToolResponse items")
        return cls(MessageContentKind.TOOL_RESPONSES, items)

    @classmethod
    def coerce(cls, value: Any) -> MessageContent:
        """Build content from text, a tool response, or a list of parts, calls or responses."""
        if isinstance(value, MessageContent):
            return value
        if isinstance(value, str):
            return cls.from_text(value)
        if isinstance(value, ToolResponse):
            return cls.from_tool_responses([value])
        if isinstance(value, ContentPart):
            return cls.from_parts([value])
        if isinstance(value, (list, tuple)):
            items = list(value)
            if all(isinstance(i, ToolCall) for i in items) and items:
                return cls.from_tool_calls(items)
            if all(isinstance(i, ToolResponse) for i in items) and items:
                return cls.from_tool_responses(items)
            if all(isinstance(i, (ContentPart, str)) for i in items):
                return cls.from_parts(items)
        raise TypeError(f"cannot make message content from {type(value).__name__}")

    def text_as_str(self) -> str | None:
        """Return the text if this is text content, otherwise None (parts are not joined)."""
        if self.kind is MessageContentKind.TEXT:
            return self.value  # type: ignore[return-value]
        return None

    def is_empty(self) -> bool:
        """Whether the text, or the list of items, is empty."""
        return len(self.value) == 0