"""Resolution of the authentication data for a model."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Union

from genaikit.model_iden import ModelIden
from genaikit.resolver.auth_data import AuthData

SyncAuthFn = Callable[[ModelIden], Union[AuthData, None]]
AsyncAuthFn = Callable[[ModelIden], Awaitable[Union[AuthData, None]]]


@dataclass(frozen=True)
class AuthResolver:
    """Holds a function returning the :class:`AuthData` for a model.

    The function may return None, in which case the adapter's default
    authentication is used. It reports failure by raising a
    :class:`~genaikit.resolver.errors.ResolverError`.
    """

    resolver_fn: Callable[[ModelIden], object]
    is_async: bool = False

    def __post_init__(self) -> None:
        if not callable(self.resolver_fn):
            raise TypeError("resolver_fn must be callable")

    def __repr__(self) -> str:
        kind = "ResolverAsyncFn" if self.is_async else "ResolverFn"
        return f"AuthResolver({kind})"

    @classmethod
    def from_resolver_fn(cls, resolver_fn: SyncAuthFn) -> AuthResolver:
        """Create a resolver from a plain function."""
        return cls(resolver_fn, is_async=False)

    @classmethod
    def from_resolver_async_fn(cls, resolver_fn: AsyncAuthFn) -> AuthResolver:
        """Create a resolver from a coroutine function."""
        return cls(resolver_fn, is_async=True)

    async def resolve(self, model_iden: ModelIden) -> AuthData | None:
        """Run the resolver function for ``model_iden``."""
        result = self.resolver_fn(model_iden)
        if self.is_async:
            result = await result  # type: ignore[misc]
        return result  # type: ignore[return-value]