"""Ports implemented by the provider and its resources for the plugin host."""

from abc import ABC, abstractmethod
from typing import Callable

from coderforge.domain.plugin.messages import (
    ConfigureRequest,
    ConfigureResponse,
    CreateRequest,
    CreateResponse,
    DeleteRequest,
    DeleteResponse,
    ImportStateRequest,
    ImportStateResponse,
    MetadataResponse,
    ReadRequest,
    ReadResponse,
    ResourceConfigureRequest,
    ResourceConfigureResponse,
    UpdateRequest,
    UpdateResponse,
)
from coderforge.domain.plugin.schema import Schema


class ResourcePort(ABC):
    """Operations the host drives on a single resource type."""

    @abstractmethod
    def metadata(self, provider_type_name: str) -> MetadataResponse:
        """Return the resource type name."""

    @abstractmethod
    def schema(self) -> Schema:
        """Return the resource attribute schema."""

    @abstractmethod
    def configure(self, request: ResourceConfigureRequest) -> ResourceConfigureResponse:
        """Receive the data produced by the provider's configure call."""

    @abstractmethod
    def create(self, request: CreateRequest) -> CreateResponse:
        """Create the resource from the planned values."""

    @abstractmethod
    def read(self, request: ReadRequest) -> ReadResponse:
        """Refresh the stored state from the remote API."""

    @abstractmethod
    def update(self, request: UpdateRequest) -> UpdateResponse:
        """Apply planned changes to an existing resource."""

    @abstractmethod
    def delete(self, request: DeleteRequest) -> DeleteResponse:
        """Destroy the resource."""

    @abstractmethod
    def import_state(self, request: ImportStateRequest) -> ImportStateResponse:
        """Seed state for an existing remote resource."""


class ProviderPort(ABC):
    """Provider root driven by the host."""

    @abstractmethod
    def metadata(self) -> MetadataResponse:
        """Return the provider type name and version."""

    @abstractmethod
    def schema(self) -> Schema:
        """Return the provider configuration schema."""

    @abstractmethod
    def configure(self, request: ConfigureRequest) -> ConfigureResponse:
        """Validate configuration and build the data shared with resources."""

    @abstractmethod
    def resources(self) -> list[Callable[[], ResourcePort]]:
        """Return factories for the resource types implemented by the provider."""

    @abstractmethod
    def data_sources(self) -> list[Callable[[], object]]:
        """Return factories for the data sources implemented by the provider."""
