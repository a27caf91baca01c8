"""Errors raised by resolvers."""

from __future__ import annotations

import json


def _quoted(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


class ResolverError(Exception):
    """Base class of resolver errors."""


class ApiKeyEnvNotFound(ResolverError):
    """The environment variable holding the API key is not set."""

    def __init__(self, env_name: str) -> None:
        self.env_name = env_name
        super().__init__(f"ApiKeyEnvNotFound {{ env_name: {_quoted(env_name)} }}")


class ResolverAuthDataNotSingleValue(ResolverError):
    """The authentication data does not hold a single value."""

    def __init__(self) -> None:
        super().__init__("ResolverAuthDataNotSingleValue")


class CustomResolverError(ResolverError):
    """A resolver failed with a custom message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Custom({_quoted(message)})")