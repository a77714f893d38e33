"""Domain base - exceptions and ports shared across the provider."""

from coderforge.domain.base.exceptions import (
    ApiStatusError,
    ConfigurationError,
    DomainException,
    InfrastructureError,
    ResponseDecodeError,
    TransportError,
    ValidationError,
)

__all__: list[str] = [
    "ApiStatusError",
    "ConfigurationError",
    "DomainException",
    "InfrastructureError",
    "ResponseDecodeError",
    "TransportError",
    "ValidationError",
]
