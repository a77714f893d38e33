"""Domain ports - interfaces implemented by the infrastructure and provider layers."""

from coderforge.domain.base.ports.logging_port import LoggingPort
from coderforge.domain.base.ports.provider_port import ProviderPort, ResourcePort
from coderforge.domain.base.ports.resource_api_port import ResourceApiPort

__all__: list[str] = ["LoggingPort", "ProviderPort", "ResourceApiPort", "ResourcePort"]
