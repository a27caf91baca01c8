"""Response formats for structured output."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Union


@dataclass(frozen=True)
class JsonMode:
    """Ask for well-formed JSON.

    The prompt or system content should also ask for JSON for most providers.
    """


@dataclass(frozen=True)
class JsonSpec:
    """A named JSON schema the response must follow."""

    name: str
    schema: Any
    description: str | None = None

    def with_description(self, description: str) -> JsonSpec:
        """Return a copy with ``description`` set."""
        return replace(self, description=description)


ChatResponseFormat = Union[JsonMode, JsonSpec]