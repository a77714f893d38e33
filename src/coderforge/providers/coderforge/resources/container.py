"""Container resource (``<provider>_container``)."""

from typing import Optional

from coderforge.domain.base.ports.logging_port import LoggingPort
from coderforge.domain.plugin.schema import Schema, int64_attribute, string_attribute
from coderforge.domain.resource.models import ResourceKind
from coderforge.providers.coderforge.resources.base import ManagedResource, ResourceKindMapping


class ContainerMapping(ResourceKindMapping):
    """Maps container attributes onto the API's resource item."""

    kind = ResourceKind.CONTAINER
    type_name_suffix = "container"

    @property
    def field_mappings(self) -> dict[str, str]:
        return {
            "name": "name",
            "image_uri": "code.imageUri",
            "runtime": "code.runtime",
            "timeout": "timeout",
            "max_ram_size": "maxRamSize",
        }

    def schema(self) -> Schema:
        return Schema(
            description="Manages a CoderForge.org container.",
            attributes={
                "id": string_attribute(computed=True, description="Server-assigned identifier"),
                "last_updated": string_attribute(computed=True),
                "name": string_attribute(optional=True),
                "image_uri": string_attribute(optional=True),
                "runtime": string_attribute(required=True),
                "timeout": int64_attribute(optional=True, description="Timeout in seconds"),
                "max_ram_size": string_attribute(optional=True),
            },
        )


def new_container_resource(logger: Optional[LoggingPort] = None) -> ManagedResource:
    return ManagedResource(ContainerMapping(), logger)
