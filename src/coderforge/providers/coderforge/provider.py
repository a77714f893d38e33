"""CoderForge.org provider root.

Negotiates the provider configuration with the host, builds the single API
client shared by every resource for the lifetime of the configuration, and
registers the resource mappers.
"""

import os
from typing import Any, Callable, Optional

from pydantic import ValidationError as PydanticValidationError

from coderforge._package import PROVIDER_TYPE_NAME, __version__
from coderforge.config.schemas.app_schema import AppConfig
from coderforge.config.schemas.client_schema import ClientConfig
from coderforge.domain.base.exceptions import DomainException
from coderforge.domain.base.ports.logging_port import LoggingPort
from coderforge.domain.base.ports.provider_port import ProviderPort, ResourcePort
from coderforge.domain.plugin.messages import ConfigureRequest, ConfigureResponse, MetadataResponse
from coderforge.domain.plugin.schema import (
    AttributeType,
    Schema,
    list_attribute,
    string_attribute,
)
from coderforge.domain.resource.models import CloudContext
from coderforge.infrastructure.adapters.logging_adapter import LoggingAdapter
from coderforge.infrastructure.http.client import CoderForgeClient
from coderforge.infrastructure.logging.logger import register_secret
from coderforge.providers.coderforge.resources.container import new_container_resource
from coderforge.providers.coderforge.resources.function import new_function_resource

TOKEN_ENV = "CODERFORGE_CLOUD_TOKEN"
HOST_ENV = "CODERFORGE_HOST_URL"


class CoderForgeProvider(ProviderPort):
    """Provider implementation for the CoderForge.org cloud."""

    def __init__(
        self,
        version: str = __version__,
        app_config: Optional[AppConfig] = None,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        """
        Initialize the provider.

        Args:
            version: Provider version reported to the host, "dev" for local
                builds and "test" under acceptance testing
            app_config: Process configuration, defaults used when omitted
            logger: Logging port, defaults to the provider logger
        """
        self.version = version
        self._app_config = app_config or AppConfig()
        self._logger = logger or LoggingAdapter("provider")

    def metadata(self) -> MetadataResponse:
        return MetadataResponse(type_name=PROVIDER_TYPE_NAME, version=self.version)

    def schema(self) -> Schema:
        return Schema(
            description="Interact with the CoderForge.org cloud.",
            attributes={
                "token": string_attribute(
                    optional=True,
                    sensitive=True,
                    description=f"API token. May also be provided via the {TOKEN_ENV} environment variable.",
                ),
                "cloud_space": string_attribute(required=True, description="Cloud space scoping every resource"),
                "locations": list_attribute(AttributeType.STRING, optional=True),
                "stack_id": string_attribute(optional=True),
                "host": string_attribute(
                    optional=True,
                    description=f"API base URL. May also be provided via the {HOST_ENV} environment variable.",
                ),
            },
        )

    def configure(self, request: ConfigureRequest) -> ConfigureResponse:
        """
        Build the API client from the provider configuration.

        The token falls back to the ``CODERFORGE_CLOUD_TOKEN`` environment
        variable. Missing token and cloud space are reported together.
        """
        self._logger.info("Configuring CoderForge.org client")
        response = ConfigureResponse()
        config: dict[str, Any] = request.config or {}

        token = config.get("token")
        if token is None:
            token = os.environ.get(TOKEN_ENV, "")

        if not token:
            response.diagnostics.add_attribute_error(
                ("token",),
                "Missing CoderForge.org API token",
                "The provider cannot create the CoderForge.org API client as there is a missing or empty "
                "value for the CoderForge.org API token. Set the token value in the configuration or use "
                f"the {TOKEN_ENV} environment variable. If either is already set, ensure the value is not empty.",
            )

        cloud_space = config.get("cloud_space")
        if not cloud_space:
            response.diagnostics.add_attribute_error(
                ("cloud_space",),
                "Missing CoderForge.org API cloud_space",
                "The provider cannot create the CoderForge.org API client as there is a missing or empty "
                "value for the CoderForge.org API cloud_space. Set the cloud_space inside the provider.",
            )

        if response.diagnostics.has_error():
            return response

        register_secret(token)

        context = CloudContext(
            stack_id=config.get("stack_id") or "",
            cloud_space=cloud_space,
            locations=tuple(str(location) for location in config.get("locations") or [] if location is not None),
        )

        self._logger.debug("Creating CoderForge.org client")
        try:
            client = CoderForgeClient.from_config(
                context, token, self._client_config(config.get("host")), logger=self._logger
            )
        except (DomainException, PydanticValidationError) as e:
            response.diagnostics.add_error(
                "Unable to Create CoderForge.org API Client",
                "An unexpected error occurred when creating the CoderForge.org API client. "
                "If the error is not clear, please contact the provider developers.\n\n"
                f"CoderForge.org Client Error: {e}",
            )
            return response

        # Shared with every resource and data source through their configure calls
        response.resource_data = client
        response.data_source_data = client

        self._logger.info(
            "Configured CoderForge.org client for cloud space %s at %s", cloud_space, client.host_url
        )
        return response

    def _client_config(self, host: Optional[str]) -> ClientConfig:
        host = host or os.environ.get(HOST_ENV)
        if not host:
            return self._app_config.client
        return ClientConfig.model_validate({**self._app_config.client.model_dump(), "host_url": host})

    def resources(self) -> list[Callable[[], ResourcePort]]:
        return [new_function_resource, new_container_resource]

    def data_sources(self) -> list[Callable[[], object]]:
        return []


def new_provider(version: str = __version__) -> Callable[[], CoderForgeProvider]:
    """Return a factory building the provider, as the host's serve call expects."""

    def factory() -> CoderForgeProvider:
        return CoderForgeProvider(version=version)

    return factory
