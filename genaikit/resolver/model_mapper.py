"""Mapping of a resolved model identifier to another one."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from genaikit.model_iden import ModelIden


@dataclass(frozen=True)
class ModelMapper:
    """Holds a function mapping one :class:`ModelIden` to another.

    The function reports failure by raising a
    :class:`~genaikit.resolver.errors.ResolverError`.
    """

    mapper_fn: Callable[[ModelIden], ModelIden]

    def __post_init__(self) -> None:
        if not callable(self.mapper_fn):
            raise TypeError("mapper_fn must be callable")

    def __repr__(self) -> str:
        return "ModelMapper(MapperFn)"

    @classmethod
    def from_mapper_fn(cls, mapper_fn: Callable[[ModelIden], ModelIden]) -> ModelMapper:
        """Create a mapper from a function."""
        return cls(mapper_fn)

    def map_model(self, model_iden: ModelIden) -> ModelIden:
        """Return the mapped identifier for ``model_iden``."""
        return self.mapper_fn(model_iden)