"""Provider-neutral building blocks for generative AI chat requests."""

__version__ = "0.3.5"

__all__ = ["chat", "errors", "model_iden", "resolver", "webc"]