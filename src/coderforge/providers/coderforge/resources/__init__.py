"""CoderForge.org resource mappers."""

from coderforge.providers.coderforge.resources.base import ManagedResource, ResourceKindMapping
from coderforge.providers.coderforge.resources.container import ContainerMapping, new_container_resource
from coderforge.providers.coderforge.resources.function import FunctionMapping, new_function_resource

__all__: list[str] = [
    "ContainerMapping",
    "FunctionMapping",
    "ManagedResource",
    "ResourceKindMapping",
    "new_container_resource",
    "new_function_resource",
]
