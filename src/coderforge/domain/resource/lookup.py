"""Tagged result of looking up a resource by id."""

from dataclasses import dataclass
from typing import Union

from coderforge.domain.resource.models import ResourceItem


@dataclass(frozen=True)
class Found:
    """The API returned the resource."""

    item: ResourceItem


@dataclass(frozen=True)
class NotFound:
    """The API holds no resource with this id."""

    resource_id: str


ResourceLookup = Union[Found, NotFound]
