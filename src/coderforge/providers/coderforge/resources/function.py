"""Serverless function resource (``<provider>_function``)."""

from typing import Optional

from coderforge.domain.base.ports.logging_port import LoggingPort
from coderforge.domain.plugin.schema import (
    Schema,
    int64_attribute,
    single_nested_attribute,
    string_attribute,
)
from coderforge.domain.resource.models import ResourceKind
from coderforge.providers.coderforge.resources.base import ManagedResource, ResourceKindMapping


class FunctionMapping(ResourceKindMapping):
    """Maps function attributes onto the API's resource item."""

    kind = ResourceKind.FUNCTION
    type_name_suffix = "function"

    @property
    def field_mappings(self) -> dict[str, str]:
        return {
            "function_name": "name",
            "code.package_type": "code.packageType",
            "code.image_uri": "code.imageUri",
            "timeout": "timeout",
            "max_ram_size": "maxRamSize",
        }

    def schema(self) -> Schema:
        return Schema(
            description="Manages a CoderForge.org serverless function.",
            attributes={
                "id": string_attribute(computed=True, description="Server-assigned identifier"),
                "function_name": string_attribute(required=True),
                "last_updated": string_attribute(computed=True),
                "code": single_nested_attribute(
                    required=True,
                    attributes={
                        "package_type": string_attribute(required=True),
                        "image_uri": string_attribute(optional=True),
                    },
                ),
                "timeout": int64_attribute(optional=True, description="Timeout in seconds"),
                "max_ram_size": string_attribute(optional=True),
            },
        )


def new_function_resource(logger: Optional[LoggingPort] = None) -> ManagedResource:
    return ManagedResource(FunctionMapping(), logger)
