"""Resource wire models and lookup results."""

from coderforge.domain.resource.lookup import Found, NotFound, ResourceLookup
from coderforge.domain.resource.models import (
    CloudContext,
    CloudData,
    Code,
    DataItem,
    ResourceItem,
    ResourceKind,
)

__all__: list[str] = [
    "CloudContext",
    "CloudData",
    "Code",
    "DataItem",
    "Found",
    "NotFound",
    "ResourceItem",
    "ResourceKind",
    "ResourceLookup",
]
