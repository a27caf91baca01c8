"""Authentication data: where the key comes from, or the key itself."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from genaikit.resolver.errors import ApiKeyEnvNotFound, ResolverAuthDataNotSingleValue


class AuthData:
    """Base of the authentication data variants."""

    __slots__ = ()

    @classmethod
    def from_env(cls, env_name: str) -> FromEnv:
        """Read the key from the named environment variable."""
        return FromEnv(env_name)

    @classmethod
    def from_single(cls, value: str) -> Key:
        """Use ``value`` as the key."""
        return Key(value)

    @classmethod
    def from_multi(cls, data: dict[str, str]) -> MultiKeys:
        """Hold several named credential values."""
        return MultiKeys(dict(data))

    def single_key_value(self) -> str:
        """Return the single key value, raising if there is none."""
        raise ResolverAuthDataNotSingleValue()


@dataclass(frozen=True, repr=False)
class FromEnv(AuthData):
    """The name of an environment variable holding the key."""

    env_name: str

    def single_key_value(self) -> str:
        try:
            return os.environ[self.env_name]
        except KeyError:
            raise ApiKeyEnvNotFound(self.env_name) from None

    def __repr__(self) -> str:
        return "FromEnv(REDACTED)"


@dataclass(frozen=True, repr=False)
class Key(AuthData):
    """The key value itself."""

    value: str

    def single_key_value(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return "Key(REDACTED)"


@dataclass(frozen=True, repr=False)
class RequestOverride(AuthData):
    """A replacement URL and headers for unusual authentication schemes."""

    url: str
    headers: list[tuple[str, str]] = field(default_factory=list)

    def single_key_value(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "RequestOverride(url=REDACTED, headers=REDACTED)"


@dataclass(frozen=True, repr=False)
class MultiKeys(AuthData):
    """Several named credential values."""

    data: dict[str, str] = field(default_factory=dict)

    def __repr__(self) -> str:
        return "MultiKeys(REDACTED)"