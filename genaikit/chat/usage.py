"""Normalised token usage of a chat call."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, TypeVar

T = TypeVar("T")


def zero_as_none(value: T | None) -> T | None:
    """Return None for None or for the default value of the type (such as 0)."""
    if value is None:
        return None
    if value == type(value)():
        return None
    return value


def _optional_int(data: Mapping[str, Any], name: str) -> int | None:
    value = data.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{name}' must be an integer, got {value!r}")
    return value


def _without_none(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def _all_none(record: Any) -> bool:
    return all(getattr(record, f.name) is None for f in fields(record))


def _zeroless_fields(cls: type, data: Mapping[str, Any]) -> dict[str, int | None]:
    return {f.name: zero_as_none(_optional_int(data, f.name)) for f in fields(cls)}


def _set_fields(record: Any) -> dict[str, int]:
    return _without_none({f.name: getattr(record, f.name) for f in fields(record)})


@dataclass
class PromptTokensDetails:
    """Composition of the prompt tokens."""

    cache_creation_tokens: int | None = None
    cached_tokens: int | None = None
    audio_tokens: int | None = None

    def is_empty(self) -> bool:
        """Whether every field is None."""
        return _all_none(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PromptTokensDetails:
        """Build from a mapping; zero values are read as None."""
        return cls(**_zeroless_fields(cls, data))

    def to_dict(self) -> dict[str, int]:
        """Return the fields that are set."""
        return _set_fields(self)


@dataclass
class CompletionTokensDetails:
    """Composition of the completion tokens."""

    accepted_prediction_tokens: int | None = None
    rejected_prediction_tokens: int | None = None
    reasoning_tokens: int | None = None
    audio_tokens: int | None = None

    def is_empty(self) -> bool:
        """Whether every field is None."""
        return _all_none(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CompletionTokensDetails:
        """Build from a mapping; zero values are read as None."""
        return cls(**_zeroless_fields(cls, data))

    def to_dict(self) -> dict[str, int]:
        """Return the fields that are set."""
        return _set_fields(self)


@dataclass
class Usage:
    """Input and output token counts, normalised to the OpenAI way of counting.

    ``completion_tokens`` is the total of the output tokens, reasoning included;
    ``completion_tokens_details.reasoning_tokens`` gives the reasoning share.
    """

    prompt_tokens: int | None = None
    prompt_tokens_details: PromptTokensDetails | None = None
    completion_tokens: int | None = None
    completion_tokens_details: CompletionTokensDetails | None = None
    total_tokens: int | None = None

    def compact_details(self) -> None:
        """Drop the details records that hold no value."""
        if self.prompt_tokens_details is not None and self.prompt_tokens_details.is_empty():
            self.prompt_tokens_details = None
        if (
            self.completion_tokens_details is not None
            and self.completion_tokens_details.is_empty()
        ):
            self.completion_tokens_details = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Usage:
        """Build from a mapping such as a decoded JSON object."""
        prompt_details = data.get("prompt_tokens_details")
        completion_details = data.get("completion_tokens_details")
        return cls(
            prompt_tokens=_optional_int(data, "prompt_tokens"),
            prompt_tokens_details=(
                None if prompt_details is None else PromptTokensDetails.from_dict(prompt_details)
            ),
            completion_tokens=_optional_int(data, "completion_tokens"),
            completion_tokens_details=(
                None
                if completion_details is None
                else CompletionTokensDetails.from_dict(completion_details)
            ),
            total_tokens=_optional_int(data, "total_tokens"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the fields that are set, details as nested mappings."""
        return _without_none(
            {
                "prompt_tokens": self.prompt_tokens,
                "prompt_tokens_details": (
                    None
                    if self.prompt_tokens_details is None
                    else self.prompt_tokens_details.to_dict()
                ),
                "completion_tokens": self.completion_tokens,
                "completion_tokens_details": (
                    None
                    if self.completion_tokens_details is None
                    else self.completion_tokens_details.to_dict()
                ),
                "total_tokens": self.total_tokens,
            }
        )