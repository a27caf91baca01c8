"""Model names and model identifiers (adapter kind plus model name)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


class ModelName(str):
    """The name of a model, as given to or returned by a provider."""

    __slots__ = ()


@dataclass(frozen=True)
class ModelIden:
    """The association of an adapter kind with a model name."""

    adapter_kind: Any
    model_name: ModelName

    def __post_init__(self) -> None:
        if not isinstance(self.model_name, ModelName):
            object.__setattr__(self, "model_name", ModelName(self.model_name))

    def __str__(self) -> str:
        return f"{self.model_name} (adapter: {self.adapter_kind})"

    def from_name(self, new_name: str) -> ModelIden:
        """Return an identifier with ``new_name``, or this one if the name is unchanged."""
        if self.model_name == new_name:
            return self
        return replace(self, model_name=ModelName(new_name))

    def from_optional_name(self, new_name: str | None) -> ModelIden:
        """Like :meth:`from_name`, but keep this identifier when ``new_name`` is None."""
        if new_name is None:
            return self
        return self.from_name(new_name)