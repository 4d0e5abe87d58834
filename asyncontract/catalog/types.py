# asyncontract/catalog/types.py
"""
Language-neutral type descriptors.

A TypeDescriptor is everything the pipeline needs to know about a producer
type: where it lives, what kind of type it is, what it derives from and which
fields it carries. Field types are TypeRefs, a small tagged union that the
schema walker unwraps.

Descriptors are pydantic models so catalogs can be written to and read from
YAML/JSON catalog files without any runtime introspection.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PrimitiveKind(str, Enum):
    """Leaf value kinds. These never get their own schema node."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    DATE = "date"
    TIME = "time"
    DURATION = "duration"
    UUID = "uuid"
    BYTES = "bytes"
    ANY = "any"


class TypeKind(str, Enum):
    CLASS = "class"
    ABSTRACT = "abstract"
    INTERFACE = "interface"
    ENUM = "enum"


# =============================================================================
# Type References
# =============================================================================


class PrimitiveRef(BaseModel):
    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveKind

    model_config = ConfigDict(frozen=True)


class NamedRef(BaseModel):
    """Reference to another descriptor by identity."""

    kind: Literal["named"] = "named"
    identity: str

    model_config = ConfigDict(frozen=True)


class OptionalRef(BaseModel):
    kind: Literal["optional"] = "optional"
    inner: TypeRef

    model_config = ConfigDict(frozen=True)


class ArrayRef(BaseModel):
    kind: Literal["array"] = "array"
    items: TypeRef

    model_config = ConfigDict(frozen=True)


class MapRef(BaseModel):
    """String-keyed map; only the value type matters for schemas."""

    kind: Literal["map"] = "map"
    values: TypeRef

    model_config = ConfigDict(frozen=True)


TypeRef = Annotated[
    Union[PrimitiveRef, NamedRef, OptionalRef, ArrayRef, MapRef],
    Field(discriminator="kind"),
]

OptionalRef.model_rebuild()
ArrayRef.model_rebuild()
MapRef.model_rebuild()


# =============================================================================
# Descriptors
# =============================================================================


def qualified_name(namespace: str, name: str) -> str:
    """Join namespace and simple name; bare name when namespace is empty."""
    return f"{namespace}.{name}" if namespace else name


class FieldDescriptor(BaseModel):
    name: str
    type: TypeRef
    required: bool = True
    description: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class TypeDescriptor(BaseModel):
    """
    One producer type.

    Examples:
        >>> TypeDescriptor(
        ...     name="OrderCreated",
        ...     namespace="shop.events",
        ...     fields=[FieldDescriptor(name="order_id", type=PrimitiveRef(primitive="uuid"))],
        ... ).identity
        'shop.events.OrderCreated'
    """

    name: str
    namespace: str = ""
    kind: TypeKind = TypeKind.CLASS
    public: bool = True
    bases: List[str] = Field(default_factory=list)
    fields: List[FieldDescriptor] = Field(default_factory=list)
    enum_values: List[Union[str, int]] = Field(default_factory=list)
    description: Optional[str] = None
    scanned: bool = True

    model_config = ConfigDict(frozen=True)

    @property
    def identity(self) -> str:
        return qualified_name(self.namespace, self.name)

    @property
    def is_concrete(self) -> bool:
        return self.kind is TypeKind.CLASS

    @property
    def is_interface(self) -> bool:
        return self.kind is TypeKind.INTERFACE

    @property
    def is_abstract(self) -> bool:
        return self.kind is TypeKind.ABSTRACT


__all__ = [
    "PrimitiveKind",
    "TypeKind",
    "PrimitiveRef",
    "NamedRef",
    "OptionalRef",
    "ArrayRef",
    "MapRef",
    "TypeRef",
    "FieldDescriptor",
    "TypeDescriptor",
    "qualified_name",
]
