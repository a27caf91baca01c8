"""Chat requests, messages, options, tools, usage, responses and streamed events."""

__all__ = [
    "chat_message",
    "chat_options",
    "chat_request",
    "chat_response",
    "chat_stream",
    "message_content",
    "printer",
    "response_format",
    "tool",
    "usage",
]