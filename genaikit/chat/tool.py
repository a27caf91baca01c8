"""Tool definitions, tool calls from the model and tool responses."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class Tool:
    """A tool (typically a function) the model may call.

    ``schema`` is the JSON schema of the parameters, as a JSON-compatible value.
    """

    name: str
    description: str | None = None
    schema: Any = None

    def with_description(self, description: str) -> Tool:
        """Return a copy with ``description`` set."""
        return replace(self, description=description)

    def with_schema(self, schema: Any) -> Tool:
        """Return a copy with the parameters ``schema`` set."""
        return replace(self, schema=schema)


@dataclass(frozen=True)
class ToolCall:
    """A function call requested by the model."""

    call_id: str
    fn_name: str
    fn_arguments: Any


@dataclass(frozen=True)
class ToolResponse:
    """The result of a tool call, sent back to the model."""

    call_id: str
    content: str