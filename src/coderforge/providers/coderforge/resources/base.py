"""Generic resource mapper shared by every CoderForge.org resource kind.

A resource kind only declares its schema and a table mapping state attribute
paths to wire field paths; the CRUD logic lives once in ``ManagedResource``.
"""

import copy
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from coderforge.domain.base.exceptions import DomainException, ValidationError
from coderforge.domain.base.ports.logging_port import LoggingPort
from coderforge.domain.base.ports.provider_port import ResourcePort
from coderforge.domain.base.ports.resource_api_port import ResourceApiPort
from coderforge.domain.plugin.diagnostics import Diagnostics
from coderforge.domain.plugin.messages import (
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
    State,
    UpdateRequest,
    UpdateResponse,
)
from coderforge.domain.plugin.schema import Schema
from coderforge.domain.resource.lookup import NotFound
from coderforge.domain.resource.models import ResourceItem, ResourceKind
from coderforge.infrastructure.adapters.logging_adapter import LoggingAdapter

# RFC 850 date, always rendered in UTC
LAST_UPDATED_FORMAT = "%A, %d-%b-%y %H:%M:%S UTC"


def last_updated_now() -> str:
    return datetime.now(timezone.utc).strftime(LAST_UPDATED_FORMAT)


def _get_path(data: Any, path: str) -> Any:
    node = data
    for part in path.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
    return node


def _set_path(data: dict[str, Any], path: str, value: Any) -> None:
    parts = path.split(".")
    node = data
    for part in parts[:-1]:
        child = node.get(part)
        if not isinstance(child, dict):
            child = {}
            node[part] = child
        node = child
    node[parts[-1]] = value


class ResourceKindMapping(ABC):
    """Field translation between host state and the API for one resource kind."""

    kind: ResourceKind
    type_name_suffix: str

    @property
    @abstractmethod
    def field_mappings(self) -> dict[str, str]:
        """Dotted state attribute path -> dotted wire field path."""

    @abstractmethod
    def schema(self) -> Schema:
        """Attribute schema of the resource."""

    def to_item(self, values: State, resource_id: Optional[str] = None) -> ResourceItem:
        """
        Build the wire item from planned values.

        Raises:
            ValidationError: If the values do not fit the wire model
        """
        wire: dict[str, Any] = {"type": self.kind.value}
        if resource_id:
            wire["id"] = resource_id
        for state_path, wire_path in self.field_mappings.items():
            value = _get_path(values, state_path)
            if value is not None:
                _set_path(wire, wire_path, value)
        try:
            return ResourceItem.model_validate(wire)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid {self.kind.value} attributes: {e}", details={"kind": self.kind.value}
            ) from e

    def to_state(self, item: ResourceItem, base: State, overwrite_missing: bool) -> State:
        """
        Merge an API item into a copy of ``base``.

        Args:
            item: Item returned by the API
            base: Values the result starts from (plan or prior state)
            overwrite_missing: Clear attributes the API did not return instead
                of keeping the base value
        """
        state = copy.deepcopy(base)
        wire = item.model_dump(by_alias=True, mode="json")
        for state_path, wire_path in self.field_mappings.items():
            value = _get_path(wire, wire_path)
            if value is None and not overwrite_missing:
                continue
            _set_path(state, state_path, value)
        return state


class ManagedResource(ResourcePort):
    """
    Resource mapper driven by a ``ResourceKindMapping``.

    Each operation is a single round trip to the API. Failures are reported as
    error diagnostics on the operation; the prior state is never partially
    overwritten.
    """

    def __init__(self, mapping: ResourceKindMapping, logger: Optional[LoggingPort] = None) -> None:
        self._mapping = mapping
        self._logger = logger or LoggingAdapter(f"resources.{mapping.type_name_suffix}")
        self._client: Optional[ResourceApiPort] = None

    def metadata(self, provider_type_name: str) -> MetadataResponse:
        return MetadataResponse(type_name=f"{provider_type_name}_{self._mapping.type_name_suffix}")

    def schema(self) -> Schema:
        return self._mapping.schema()

    def configure(self, request: ResourceConfigureRequest) -> ResourceConfigureResponse:
        """Accept the API client produced by the provider's configure call."""
        response = ResourceConfigureResponse()
        # The host calls this before the provider is configured, too
        if request.provider_data is None:
            return response

        if not isinstance(request.provider_data, ResourceApiPort):
            response.diagnostics.add_error(
                "Unexpected Resource Configure Type",
                f"Expected ResourceApiPort, got: {type(request.provider_data).__name__}. "
                "Please report this issue to the provider developers.",
            )
            return response

        self._client = request.provider_data
        return response

    def _require_client(self, diagnostics: Diagnostics) -> Optional[ResourceApiPort]:
        if self._client is None:
            diagnostics.add_error(
                "Unconfigured resource",
                "The provider has not been configured. Please report this issue to the provider developers.",
            )
        return self._client

    def _validate_plan(self, plan: State, diagnostics: Diagnostics) -> None:
        for path in self.schema().missing_required(plan):
            diagnostics.add_attribute_error(
                path,
                "Missing required attribute",
                f"The attribute '{'.'.join(path)}' is required.",
            )

    @staticmethod
    def _resource_id(state: Optional[State]) -> str:
        return (state or {}).get("id") or ""

    def create(self, request: CreateRequest) -> CreateResponse:
        """Create the resource and return the state built from the API response."""
        response = CreateResponse()
        self._validate_plan(request.plan, response.diagnostics)
        client = self._require_client(response.diagnostics)
        if response.diagnostics.has_error() or client is None:
            return response

        try:
            item = self._mapping.to_item(request.plan)
            created = client.create_resource(item)
        except DomainException as e:
            self._logger.exception("Creating %s resource failed: %s", self._mapping.kind.value, e)
            response.diagnostics.add_error(
                "Error creating resource",
                f"Could not create resource, unexpected error: {e}",
            )
            return response

        state = self._mapping.to_state(created, base=request.plan, overwrite_missing=False)
        state["id"] = created.id
        state["last_updated"] = last_updated_now()
        response.state = state
        return response

    def read(self, request: ReadRequest) -> ReadResponse:
        """Refresh state; a missing remote resource removes it from state."""
        response = ReadResponse(state=request.state)
        resource_id = self._resource_id(request.state)
        client = self._require_client(response.diagnostics)
        if client is None:
            return response
        if not resource_id:
            response.diagnostics.add_error("Error Reading Resource", "The resource state has no id.")
            return response

        try:
            lookup = client.get_resource(resource_id)
        except DomainException as e:
            self._logger.exception("Reading resource %s failed: %s", resource_id, e)
            response.diagnostics.add_error(
                "Error Reading Resource",
                f"Could not read resource ID {resource_id}: {e}",
            )
            return response

        if isinstance(lookup, NotFound):
            self._logger.warning("Resource %s no longer exists, removing it from state", resource_id)
            response.state = None
            return response

        state = self._mapping.to_state(lookup.item, base=request.state, overwrite_missing=True)
        state["id"] = lookup.item.id or resource_id
        response.state = state
        return response

    def update(self, request: UpdateRequest) -> UpdateResponse:
        """Replace the resource and return one post-update view built from the API response."""
        response = UpdateResponse(state=request.state)
        resource_id = self._resource_id(request.state)
        self._validate_plan(request.plan, response.diagnostics)
        client = self._require_client(response.diagnostics)
        if response.diagnostics.has_error() or client is None:
            return response
        if not resource_id:
            response.diagnostics.add_error("Error updating resource", "The resource state has no id.")
            return response

        try:
            item = self._mapping.to_item(request.plan, resource_id=resource_id)
            updated = client.update_resource(item)
        except DomainException as e:
            self._logger.exception("Updating resource %s failed: %s", resource_id, e)
            response.diagnostics.add_error(
                "Error updating resource",
                f"Could not update resource ID {resource_id}, unexpected error: {e}",
            )
            return response

        state = self._mapping.to_state(updated, base=request.plan, overwrite_missing=False)
        state["id"] = updated.id or resource_id
        state["last_updated"] = last_updated_now()
        response.state = state
        return response

    def delete(self, request: DeleteRequest) -> DeleteResponse:
        response = DeleteResponse()
        resource_id = self._resource_id(request.state)
        client = self._require_client(response.diagnostics)
        if client is None:
            return response
        if not resource_id:
            response.diagnostics.add_error("Error deleting resource", "The resource state has no id.")
            return response

        try:
            client.delete_resource(resource_id)
        except DomainException as e:
            self._logger.exception("Deleting resource %s failed: %s", resource_id, e)
            response.diagnostics.add_error(
                "Error deleting resource",
                f"Could not delete resource, unexpected error: {e}",
            )
        return response

    def import_state(self, request: ImportStateRequest) -> ImportStateResponse:
        """Seed state with the id only; the host refreshes the rest with a read."""
        response = ImportStateResponse()
        if not request.id:
            response.diagnostics.add_error("Missing resource id", "An id is required to import a resource.")
            return response
        state: State = {name: None for name in self.schema().attributes}
        state["id"] = request.id
        response.state = state
        return response
