"""Record schemas for services, bindings and authentication methods."""

from .auth_method_schemas import (
    ApiKeyAuth,
    AuthMethod,
    BaseAuthMethod,
    HeadersAuth,
    parse_auth_method,
)
from .binding_schemas import Binding
from .service_schemas import Service

__all__ = [
    "ApiKeyAuth",
    "AuthMethod",
    "BaseAuthMethod",
    "Binding",
    "HeadersAuth",
    "Service",
    "parse_auth_method",
]
