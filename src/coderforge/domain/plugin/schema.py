"""Schema declarations negotiated with the plugin host.

Providers and resources describe their attributes with these objects; the host
uses them to validate configuration and compute plans.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class AttributeType(str, Enum):
    STRING = "string"
    INT64 = "int64"
    BOOL = "bool"
    LIST = "list"
    SINGLE_NESTED = "single_nested"


@dataclass(frozen=True)
class Attribute:
    """A single schema attribute."""

    type: AttributeType
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    description: str = ""
    element_type: Optional[AttributeType] = None
    attributes: dict[str, "Attribute"] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type.value}
        for flag in ("required", "optional", "computed", "sensitive"):
            if getattr(self, flag):
                data[flag] = True
        if self.description:
            data["description"] = self.description
        if self.element_type is not None:
            data["element_type"] = self.element_type.value
        if self.attributes:
            data["attributes"] = {name: attr.to_dict() for name, attr in self.attributes.items()}
        return data


def string_attribute(**kwargs: Any) -> Attribute:
    return Attribute(AttributeType.STRING, **kwargs)


def int64_attribute(**kwargs: Any) -> Attribute:
    return Attribute(AttributeType.INT64, **kwargs)


def list_attribute(element_type: AttributeType, **kwargs: Any) -> Attribute:
    return Attribute(AttributeType.LIST, element_type=element_type, **kwargs)


def single_nested_attribute(attributes: dict[str, Attribute], **kwargs: Any) -> Attribute:
    return Attribute(AttributeType.SINGLE_NESTED, attributes=attributes, **kwargs)


@dataclass(frozen=True)
class Schema:
    """Attribute schema of a provider or resource."""

    attributes: dict[str, Attribute]
    description: str = ""
    version: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "description": self.description,
            "attributes": {name: attr.to_dict() for name, attr in self.attributes.items()},
        }

    def missing_required(self, values: Optional[dict[str, Any]]) -> list[tuple[str, ...]]:
        """
        Return the paths of required attributes that have no value.

        Nested attributes are only checked when their parent object is present.
        """
        return _missing(self.attributes, values or {}, ())


def _missing(
    attributes: dict[str, Attribute], values: dict[str, Any], prefix: tuple[str, ...]
) -> list[tuple[str, ...]]:
    missing = []
    for name, attr in attributes.items():
        value = values.get(name)
        path = prefix + (name,)
        if value is None:
            if attr.required:
                missing.append(path)
            continue
        if attr.type is AttributeType.SINGLE_NESTED and isinstance(value, dict):
            missing.extend(_missing(attr.attributes, value, path))
    return missing
