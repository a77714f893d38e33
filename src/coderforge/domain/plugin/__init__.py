"""Plugin host contract - schemas, diagnostics and operation messages."""

from coderforge.domain.plugin.diagnostics import Diagnostic, Diagnostics, DiagnosticSeverity
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
    State,
    UpdateRequest,
    UpdateResponse,
)
from coderforge.domain.plugin.schema import Attribute, AttributeType, Schema

__all__: list[str] = [
    "Attribute",
    "AttributeType",
    "ConfigureRequest",
    "ConfigureResponse",
    "CreateRequest",
    "CreateResponse",
    "DeleteRequest",
    "DeleteResponse",
    "Diagnostic",
    "DiagnosticSeverity",
    "Diagnostics",
    "ImportStateRequest",
    "ImportStateResponse",
    "MetadataResponse",
    "ReadRequest",
    "ReadResponse",
    "ResourceConfigureRequest",
    "ResourceConfigureResponse",
    "Schema",
    "State",
    "UpdateRequest",
    "UpdateResponse",
]
