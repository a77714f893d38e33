"""Port for the remote resource API used by the resource mappers."""

from abc import ABC, abstractmethod

from coderforge.domain.resource.lookup import ResourceLookup
from coderforge.domain.resource.models import CloudContext, ResourceItem


class ResourceApiPort(ABC):
    """CRUD operations against the remote resource API.

    Implementations raise subclasses of ``DomainException`` on failure.
    """

    @property
    @abstractmethod
    def context(self) -> CloudContext:
        """Tenant context attached to every request."""

    @abstractmethod
    def create_resource(self, item: ResourceItem) -> ResourceItem:
        """Create a resource and return the item echoed by the API."""

    @abstractmethod
    def get_resource(self, resource_id: str) -> ResourceLookup:
        """Look up a resource by id."""

    @abstractmethod
    def update_resource(self, item: ResourceItem) -> ResourceItem:
        """Replace a resource and return the item echoed by the API."""

    @abstractmethod
    def delete_resource(self, resource_id: str) -> None:
        """Delete a resource by id."""
