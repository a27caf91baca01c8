"""JSON web calls and streamed bodies split into messages."""

__all__ = ["errors", "web_client", "web_stream"]