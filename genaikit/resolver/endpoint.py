"""Service endpoints."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Endpoint:
    """The base URL of a service."""

    base_url: str

    @classmethod
    def from_static(cls, url: str) -> Endpoint:
        """Create an endpoint from a fixed URL."""
        return cls(url)

    @classmethod
    def from_owned(cls, url: str) -> Endpoint:
        """Create an endpoint from a URL built at run time."""
        return cls(str(url))