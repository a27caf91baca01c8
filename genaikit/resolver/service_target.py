"""The destination and credentials of a service call."""

from __future__ import annotations

from dataclasses import dataclass

from genaikit.model_iden import ModelIden
from genaikit.resolver.auth_data import AuthData
from genaikit.resolver.endpoint import Endpoint


@dataclass(frozen=True)
class ServiceTarget:
    """Where to send a call, how to authenticate, and for which model.

    Use :func:`dataclasses.replace` to derive a changed target.
    """

    endpoint: Endpoint
    auth: AuthData
    model: ModelIden