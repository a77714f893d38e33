"""Request and response objects exchanged with the plugin host.

Attribute values travel as plain dictionaries keyed by schema attribute name;
nested attributes are nested dictionaries and unset values are ``None``.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from coderforge.domain.plugin.diagnostics import Diagnostics

State = dict[str, Any]


@dataclass
class MetadataResponse:
    type_name: str
    version: str = ""


@dataclass
class ConfigureRequest:
    config: State = field(default_factory=dict)


@dataclass
class ConfigureResponse:
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    resource_data: Any = None
    data_source_data: Any = None


@dataclass
class ResourceConfigureRequest:
    # None until the host has configured the provider
    provider_data: Any = None


@dataclass
class ResourceConfigureResponse:
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass
class CreateRequest:
    plan: State


@dataclass
class CreateResponse:
    state: Optional[State] = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass
class ReadRequest:
    state: State


@dataclass
class ReadResponse:
    # None tells the host the resource no longer exists
    state: Optional[State] = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass
class UpdateRequest:
    plan: State
    state: State


@dataclass
class UpdateResponse:
    state: Optional[State] = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass
class DeleteRequest:
    state: State


@dataclass
class DeleteResponse:
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass
class ImportStateRequest:
    id: str


@dataclass
class ImportStateResponse:
    state: Optional[State] = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
