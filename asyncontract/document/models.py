# asyncontract/document/models.py
"""
Pydantic models for the AsyncAPI 3.0 subset the toolchain reads and writes.

Field names follow Python conventions; aliases carry the wire names
("$ref", "contentType", "schemaFormat", "schema"). Always dump with
by_alias=True (see AsyncApiDocument.to_dict).

Unknown keys are kept (extra="allow") so documents written by other tools
survive a read/write cycle.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ASYNCAPI_VERSION = "3.0.0"
JSON_CONTENT_TYPE = "application/json"
JSON_SCHEMA_FORMAT = "application/schema+json;version=draft-07"


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class Reference(_WireModel):
    ref: str = Field(alias="$ref")


class Info(_WireModel):
    title: str
    version: str
    description: Optional[str] = None


class Channel(_WireModel):
    address: Optional[str] = None
    messages: Dict[str, Reference] = Field(default_factory=dict)


class Message(_WireModel):
    name: Optional[str] = None
    content_type: Optional[str] = Field(default=None, alias="contentType")
    payload: Optional[Reference] = None


class SchemaEntry(_WireModel):
    """Multi-format schema: a JSON Schema plus the dialect it is written in."""

    schema_format: Optional[str] = Field(default=None, alias="schemaFormat")
    schema_: Dict[str, Any] = Field(default_factory=dict, alias="schema")


class OperationAction(str, Enum):
    SEND = "send"
    RECEIVE = "receive"


class Operation(_WireModel):
    action: OperationAction
    channel: Reference


class Components(_WireModel):
    messages: Dict[str, Message] = Field(default_factory=dict)
    schemas: Dict[str, SchemaEntry] = Field(default_factory=dict)

    @field_validator("schemas", mode="before")
    @classmethod
    def wrap_plain_schemas(cls, v: Any) -> Any:
        """Accept plain JSON Schemas next to multi-format entries."""
        if not isinstance(v, dict):
            return v
        return {
            name: entry if not isinstance(entry, dict) or "schema" in entry else {"schema": entry}
            for name, entry in v.items()
        }


class AsyncApiDocument(_WireModel):
    asyncapi: str = ASYNCAPI_VERSION
    info: Info
    channels: Dict[str, Channel] = Field(default_factory=dict)
    operations: Dict[str, Operation] = Field(default_factory=dict)
    components: Components = Field(default_factory=Components)

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation with stable key order."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = [
    "ASYNCAPI_VERSION",
    "JSON_CONTENT_TYPE",
    "JSON_SCHEMA_FORMAT",
    "Reference",
    "Info",
    "Channel",
    "Message",
    "SchemaEntry",
    "OperationAction",
    "Operation",
    "Components",
    "AsyncApiDocument",
]
