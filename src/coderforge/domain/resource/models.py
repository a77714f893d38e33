"""Wire models for the CoderForge.org terraform resource API.

Every verb exchanges the same ``CloudData`` envelope. Python attributes are
snake_case; the JSON representation uses the camelCase aliases the API expects.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
)


def to_camel(snake_str: str) -> str:
    """Convert snake_case to camelCase for the API boundary."""
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


class WireModel(BaseModel):
    """
    Base class for API payload models with camelCase support.

    Unset optional fields are dropped when encoding, matching the API's
    omitempty behaviour. Models whose fields the API always expects add them
    back as empty values.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump the model using API field names, omitting unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ResourceKind(str, Enum):
    """Resource kinds understood by the API."""

    FUNCTION = "function"
    CONTAINER = "container"


class CloudContext(BaseModel):
    """Tenant context sent with every request. Immutable once configured."""

    model_config = ConfigDict(frozen=True)

    stack_id: str = ""
    cloud_space: str
    locations: tuple[str, ...] = ()


class Code(WireModel):
    """Deployable artefact of a resource."""

    package_type: Optional[str] = None
    image_uri: Optional[str] = None
    runtime: Optional[str] = None

    @field_validator("package_type", mode="before")
    @classmethod
    def blank_as_unset(cls, v: Any) -> Any:
        return None if v == "" else v

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> dict[str, Any]:
        data = handler(self)
        if info.exclude_none:
            data.setdefault("packageType" if info.by_alias else "package_type", "")
        return data


class ResourceItem(WireModel):
    """A single compute resource as seen by the API."""

    id: Optional[str] = None
    # Responses may carry kinds this provider does not manage, or no kind at all
    type: Union[ResourceKind, str] = Field("", union_mode="left_to_right")
    name: Optional[str] = None
    code: Optional[Code] = None
    timeout: Optional[int] = None
    # Networking fields, used by resource kinds not exposed by this provider
    protocol: Optional[str] = None
    domain: Optional[str] = None
    port: Optional[int] = None
    active: Optional[bool] = None
    load_balance_percentage: Optional[int] = None
    max_ram_size: Optional[str] = None

    @field_validator("max_ram_size", mode="before")
    @classmethod
    def blank_as_unset(cls, v: Any) -> Any:
        return None if v == "" else v

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> dict[str, Any]:
        """Send ``code`` and ``maxRamSize`` on every item, empty when unset."""
        data = handler(self)
        if info.exclude_none:
            data.setdefault("maxRamSize" if info.by_alias else "max_ram_size", "")
            if "code" not in data:
                data["code"] = Code().model_dump(by_alias=info.by_alias, exclude_none=True)
        return data

    @property
    def kind_name(self) -> str:
        return self.type.value if isinstance(self.type, ResourceKind) else self.type


class DataItem(WireModel):
    """Key/value pair carried alongside resource items."""

    id: Optional[str] = None
    key: str
    value: Optional[str] = None


class CloudData(WireModel):
    """Request and response envelope for every API call."""

    stack_id: str = ""
    cloud_space: str = ""
    locations: list[str] = Field(default_factory=list)
    resource_items: list[ResourceItem] = Field(default_factory=list)
    data_items: list[DataItem] = Field(default_factory=list)

    @field_validator("locations", "resource_items", "data_items", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        """The API encodes empty lists as ``null``."""
        return [] if v is None else v

    @field_validator("stack_id", "cloud_space", mode="before")
    @classmethod
    def null_as_blank(cls, v: Any) -> Any:
        return "" if v is None else v

    @classmethod
    def for_context(
        cls, context: CloudContext, items: Optional[list[ResourceItem]] = None
    ) -> "CloudData":
        """Build an envelope carrying the tenant context and optional items."""
        return cls(
            stack_id=context.stack_id,
            cloud_space=context.cloud_space,
            locations=list(context.locations),
            resource_items=list(items or []),
        )

    def first_item(self) -> Optional[ResourceItem]:
        """Return the first resource item, or None when the envelope is empty."""
        return self.resource_items[0] if self.resource_items else None
