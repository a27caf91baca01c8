"""Authentication data, endpoints, service targets and the resolvers that produce them."""

__all__ = [
    "auth_data",
    "auth_resolver",
    "endpoint",
    "errors",
    "model_mapper",
    "service_target",
    "service_target_resolver",
]