"""Errors raised by the library."""

from __future__ import annotations

import json
from typing import Any


class GenaiError(Exception):
    """Base class of all library errors."""


class ChatReqHasNoMessages(GenaiError):
    """The chat request holds no messages."""

    def __init__(self, model_iden: Any) -> None:
        self.model_iden = model_iden
        super().__init__(f"Chat Request has no messages. (for model {model_iden}")


class LastChatMessageIsNotUser(GenaiError):
    """The last chat message does not have the user role."""

    def __init__(self, model_iden: Any, actual_role: Any) -> None:
        self.model_iden = model_iden
        self.actual_role = actual_role
        super().__init__(
            f"Last chat request message is not of Role 'user' "
            f"(Actual role '{actual_role}') for model '{model_iden}'"
        )


class MessageRoleNotSupported(GenaiError):
    """A message role is not supported by the model."""

    def __init__(self, model_iden: Any, role: Any) -> None:
        self.model_iden = model_iden
        self.role = role
        super().__init__(f"Role '{role}' not supported for model '{model_iden}'")


class MessageContentTypeNotSupported(GenaiError):
    """A message content type is not supported by the model."""

    def __init__(self, model_iden: Any, cause: str) -> None:
        self.model_iden = model_iden
        self.cause = cause
        super().__init__(
            f"Content type not supported for model '{model_iden}'.\nCause: {cause}"
        )


class JsonModeWithoutInstruction(GenaiError):
    """JSON mode was requested without any instruction."""

    def __init__(self) -> None:
        super().__init__("JSON mode requested but no instruction/prompt provided.")


class ReasoningParsingError(GenaiError):
    """A reasoning effort value could not be parsed."""

    def __init__(self, actual: str) -> None:
        self.actual = actual
        super().__init__(f"Failed to parse reasoning. Actual: '{actual}'")


class NoChatResponse(GenaiError):
    """The model returned no chat response."""

    def __init__(self, model_iden: Any) -> None:
        self.model_iden = model_iden
        super().__init__(f"No chat response from model '{model_iden}'")


class InvalidJsonResponseElement(GenaiError):
    """An element of a JSON response was invalid."""

    def __init__(self, info: str) -> None:
        self.info = info
        super().__init__(f"Invalid JSON response element: {info}")


class RequiresApiKey(GenaiError):
    """The model requires an API key."""

    def __init__(self, model_iden: Any) -> None:
        self.model_iden = model_iden
        super().__init__(f"Model '{model_iden}' requires an API key.")


class NoAuthResolver(GenaiError):
    """No authentication resolver was found."""

    def __init__(self, model_iden: Any) -> None:
        self.model_iden = model_iden
        super().__init__(f"No authentication resolver found for model '{model_iden}'.")


class NoAuthData(GenaiError):
    """No authentication data is available."""

    def __init__(self, model_iden: Any) -> None:
        self.model_iden = model_iden
        super().__init__(f"No authentication data available for model '{model_iden}'.")


class ModelMapperFailed(GenaiError):
    """The model mapper failed."""

    def __init__(self, model_iden: Any, cause: Exception) -> None:
        self.model_iden = model_iden
        self.cause = cause
        super().__init__(f"Model mapping failed for '{model_iden}'.\nCause: {cause}")


class WebAdapterCall(GenaiError):
    """A web call made on behalf of an adapter failed."""

    def __init__(self, adapter_kind: Any, webc_error: Exception) -> None:
        self.adapter_kind = adapter_kind
        self.webc_error = webc_error
        super().__init__(
            f"Web call failed for adapter '{adapter_kind}'.\nCause: {webc_error}"
        )


class WebModelCall(GenaiError):
    """A web call made for a model failed."""

    def __init__(self, model_iden: Any, webc_error: Exception) -> None:
        self.model_iden = model_iden
        self.webc_error = webc_error
        super().__init__(f"Web call failed for model '{model_iden}'.\nCause: {webc_error}")


class StreamParse(GenaiError):
    """Stream data could not be parsed."""

    def __init__(self, model_iden: Any, serde_error: Exception) -> None:
        self.model_iden = model_iden
        self.serde_error = serde_error
        super().__init__(
            f"Failed to parse stream data for model '{model_iden}'.\nCause: {serde_error}"
        )


class StreamEventError(GenaiError):
    """The stream carried an error event."""

    def __init__(self, model_iden: Any, body: Any) -> None:
        self.model_iden = model_iden
        self.body = body
        rendered = json.dumps(body, separators=(",", ":"), ensure_ascii=False)
        super().__init__(f"Error event in stream for model '{model_iden}'. Body: {rendered}")


class WebStreamError(GenaiError):
    """The web stream failed."""

    def __init__(self, model_iden: Any, cause: str) -> None:
        self.model_iden = model_iden
        self.cause = cause
        super().__init__(f"Web stream error for model '{model_iden}'.\nCause: {cause}")


class ResolverFailed(GenaiError):
    """A resolver raised an error."""

    def __init__(self, model_iden: Any, resolver_error: Exception) -> None:
        self.model_iden = model_iden
        self.resolver_error = resolver_error
        super().__init__(
            f"Resolver error for model '{model_iden}'.\nCause: {resolver_error}"
        )