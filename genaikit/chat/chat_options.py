"""Options of a chat request, and their cascade from request to client."""

from __future__ import annotations

import re
import warnings
from dataclasses import dataclass, replace
from typing import Any

from genaikit.chat.response_format import ChatResponseFormat, JsonMode, JsonSpec
from genaikit.errors import ReasoningParsingError

_U32_MAX = 2**32 - 1
_KEYWORDS = ("low", "medium", "high")
_BUDGET = "budget"
_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class ReasoningEffort:
    """Reasoning effort: one of the keywords low, medium, high, or a token budget.

    Use ``ReasoningEffort.LOW``, ``MEDIUM``, ``HIGH`` or ``ReasoningEffort.budget(n)``.
    """

    name: str
    tokens: int | None = None

    def __post_init__(self) -> None:
        if self.name in _KEYWORDS:
            if self.tokens is not None:
                raise ValueError("keyword efforts carry no token budget")
        elif self.name == _BUDGET:
            tokens = self.tokens
            if isinstance(tokens, bool) or not isinstance(tokens, int):
                raise ValueError("a budget needs an integer token count")
            if not 0 <= tokens <= _U32_MAX:
                raise ValueError(f"budget out of range: {tokens}")
        else:
            raise ValueError(f"unknown reasoning effort: {self.name!r}")

    @classmethod
    def budget(cls, tokens: int) -> ReasoningEffort:
        """A budget of ``tokens`` reasoning tokens."""
        return cls(_BUDGET, tokens)

    def variant_name(self) -> str:
        """The lower-case variant name; ``"budget"`` whatever the number."""
        return self.name

    def as_keyword(self) -> str | None:
        """The keyword, or None for a budget."""
        return None if self.name == _BUDGET else self.name

    @classmethod
    def from_keyword(cls, name: str) -> ReasoningEffort | None:
        """The effort for a keyword, or None; never makes a budget."""
        return cls(name) if name in _KEYWORDS else None

    @classmethod
    def from_model_name(cls, model_name: str) -> tuple[ReasoningEffort | None, str]:
        """Split a trailing ``-low``/``-medium``/``-high`` off a model name.

        Returns the effort and the trimmed name, or None and the name unchanged.
        """
        prefix, sep, last = model_name.rpartition("-")
        if sep:
            effort = cls.from_keyword(last)
            if effort is not None:
                return effort, prefix
        return None, model_name

    @classmethod
    def parse(cls, text: str) -> ReasoningEffort:
        """Parse a keyword or an unsigned 32-bit token budget."""
        effort = cls.from_keyword(text)
        if effort is not None:
            return effort
        if _UNSIGNED.fullmatch(text):
            value = int(text)
            if value <= _U32_MAX:
                return cls.budget(value)
        raise ReasoningParsingError(text)

    def __str__(self) -> str:
        return str(self.tokens) if self.name == _BUDGET else self.name


ReasoningEffort.LOW = ReasoningEffort("low")  # type: ignore[attr-defined]
ReasoningEffort.MEDIUM = ReasoningEffort("medium")  # type: ignore[attr-defined]
ReasoningEffort.HIGH = ReasoningEffort("high")  # type: ignore[attr-defined]


@dataclass(frozen=True)
class ChatOptions:
    """Options for a chat call; setters return a new instance.

    The ``capture_*`` flags apply to streaming only and fill the stream end event.
    """

    temperature: float | None = None
    max_tokens: int | None = None
    top_p: float | None = None
    stop_sequences: tuple[str, ...] = ()
    capture_usage: bool | None = None
    capture_content: bool | None = None
    capture_reasoning_content: bool | None = None
    response_format: ChatResponseFormat | None = None
    normalize_reasoning_content: bool | None = None
    reasoning_effort: ReasoningEffort | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "stop_sequences", tuple(self.stop_sequences))

    def with_temperature(self, value: float) -> ChatOptions:
        return replace(self, temperature=value)

    def with_max_tokens(self, value: int) -> ChatOptions:
        return replace(self, max_tokens=value)

    def with_top_p(self, value: float) -> ChatOptions:
        return replace(self, top_p=value)

    def with_capture_usage(self, value: bool) -> ChatOptions:
        return replace(self, capture_usage=value)

    def with_capture_content(self, value: bool) -> ChatOptions:
        return replace(self, capture_content=value)

    def with_capture_reasoning_content(self, value: bool) -> ChatOptions:
        return replace(self, capture_reasoning_content=value)

    def with_stop_sequences(self, values: Any) -> ChatOptions:
        return replace(self, stop_sequences=tuple(values))

    def with_normalize_reasoning_content(self, value: bool) -> ChatOptions:
        return replace(self, normalize_reasoning_content=value)

    def with_response_format(self, response_format: ChatResponseFormat) -> ChatOptions:
        if not isinstance(response_format, (JsonMode, JsonSpec)):
            raise TypeError("response_format must be JsonMode or JsonSpec")
        return replace(self, response_format=response_format)

    def with_reasoning_effort(self, value: ReasoningEffort) -> ChatOptions:
        return replace(self, reasoning_effort=value)

    def with_json_mode(self, value: bool) -> ChatOptions:
        """Deprecated: use ``with_response_format(JsonMode())``."""
        warnings.warn(
            "with_json_mode is deprecated; use with_response_format(JsonMode())",
            DeprecationWarning,
            stacklevel=2,
        )
        if value:
            return replace(self, response_format=JsonMode())
        return self


@dataclass(frozen=True)
class ChatOptionsSet:
    """Resolves each option from the call options first, then the client defaults."""

    client: ChatOptions | None = None
    chat: ChatOptions | None = None

    def with_client_options(self, options: ChatOptions | None) -> ChatOptionsSet:
        return replace(self, client=options)

    def with_chat_options(self, options: ChatOptions | None) -> ChatOptionsSet:
        return replace(self, chat=options)

    def _pick(self, name: str) -> Any:
        for options in (self.chat, self.client):
            if options is not None:
                value = getattr(options, name)
                if value is not None:
                    return value
        return None

    @property
    def temperature(self) -> float | None:
        return self._pick("temperature")

    @property
    def max_tokens(self) -> int | None:
        return self._pick("max_tokens")

    @property
    def top_p(self) -> float | None:
        return self._pick("top_p")

    @property
    def stop_sequences(self) -> tuple[str, ...]:
        """The call's stop sequences when call options exist, even if empty."""
        for options in (self.chat, self.client):
            if options is not None:
                return options.stop_sequences
        return ()

    @property
    def capture_usage(self) -> bool | None:
        return self._pick("capture_usage")

    @property
    def capture_content(self) -> bool | None:
        return self._pick("capture_content")

    @property
    def capture_reasoning_content(self) -> bool | None:
        return self._pick("capture_reasoning_content")

    @property
    def response_format(self) -> ChatResponseFormat | None:
        return self._pick("response_format")

    @property
    def normalize_reasoning_content(self) -> bool | None:
        return self._pick("normalize_reasoning_content")

    @property
    def reasoning_effort(self) -> ReasoningEffort | None:
        return self._pick("reasoning_effort")

    @property
    def json_mode(self) -> bool | None:
        """Deprecated: True for JSON mode, False for another format, None if unset."""
        warnings.warn(
            "json_mode is deprecated; use response_format",
            DeprecationWarning,
            stacklevel=2,
        )
        response_format = self.response_format
        if response_format is None:
            return None
        return isinstance(response_format, JsonMode)