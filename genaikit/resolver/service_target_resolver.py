"""Last-step customisation of the service target before a call."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from genaikit.resolver.service_target import ServiceTarget

SyncTargetFn = Callable[[ServiceTarget], ServiceTarget]
AsyncTargetFn = Callable[[ServiceTarget], Awaitable[ServiceTarget]]


@dataclass(frozen=True)
class ServiceTargetResolver:
    """Holds a function returning the final :class:`ServiceTarget`.

    The function receives the target built from the defaults and may return
    it as is or a changed one. It reports failure by raising a
    :class:`~genaikit.resolver.errors.ResolverError`.
    """

    resolver_fn: Callable[[ServiceTarget], object]
    is_async: bool = False

    def __post_init__(self) -> None:
        if not callable(self.resolver_fn):
            raise TypeError("resolver_fn must be callable")

    def __repr__(self) -> str:
        kind = "ResolverAsyncFn" if self.is_async else "ResolverFn"
        return f"ServiceTargetResolver({kind})"

    @classmethod
    def from_resolver_fn(cls, resolver_fn: SyncTargetFn) -> ServiceTargetResolver:
        """Create a resolver from a plain function."""
        return cls(resolver_fn, is_async=False)

    @classmethod
    def from_resolver_async_fn(cls, resolver_fn: AsyncTargetFn) -> ServiceTargetResolver:
        """Create a resolver from a coroutine function."""
        return cls(resolver_fn, is_async=True)

    async def resolve(self, service_target: ServiceTarget) -> ServiceTarget:
        """Run the resolver function on ``service_target``."""
        result = self.resolver_fn(service_target)
        if self.is_async:
            result = await result  # type: ignore[misc]
        return result  # type: ignore[return-value]