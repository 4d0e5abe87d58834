# asyncontract/schema/nodes.py
"""
SchemaNode: the structural description of one type.

A single tagged variant with an ordered extension side channel:

    ObjectSchema | ArraySchema | ReferenceSchema | PrimitiveSchema | EnumSchema

Nodes are produced by the schema walker, rendered to plain JSON Schema
(draft-07) for the document, and parsed back from the document on the
consumer side. Extensions ("x-" keys) survive the round trip in order.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, List, Optional, Union

# Identity extensions carried on every top-level schema
ORIGIN_NAMESPACE = "x-origin-namespace"
ORIGIN_IDENTITY = "x-origin-identity"

SCHEMA_REF_PREFIX = "#/components/schemas/"


# =============================================================================
# Variants
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class SchemaNode:
    nullable: bool = False
    description: Optional[str] = None
    extensions: Dict[str, Any] = field(default_factory=dict)

    @property
    def origin_namespace(self) -> str:
        return self.extensions.get(ORIGIN_NAMESPACE) or ""

    @property
    def origin_identity(self) -> Optional[str]:
        return self.extensions.get(ORIGIN_IDENTITY)


@dataclass(frozen=True, kw_only=True)
class ObjectSchema(SchemaNode):
    title: Optional[str] = None
    properties: Dict[str, SchemaNode] = field(default_factory=dict)
    required: List[str] = field(default_factory=list)
    additional_properties: Union[bool, SchemaNode, None] = None


@dataclass(frozen=True, kw_only=True)
class ArraySchema(SchemaNode):
    items: SchemaNode


@dataclass(frozen=True, kw_only=True)
class ReferenceSchema(SchemaNode):
    """Reference to another schema by its registry (simple) name."""

    target: str


@dataclass(frozen=True, kw_only=True)
class PrimitiveSchema(SchemaNode):
    """Leaf value. type=None is the unconstrained ("any") schema."""

    type: Optional[str] = None
    format: Optional[str] = None


@dataclass(frozen=True, kw_only=True)
class EnumSchema(SchemaNode):
    title: Optional[str] = None
    values: List[Union[str, int]] = field(default_factory=list)


def any_schema(nullable: bool = False) -> PrimitiveSchema:
    return PrimitiveSchema(nullable=nullable)


def iter_references(node: SchemaNode) -> Iterator[str]:
    """Registry names a node refers to, depth first; repeats are not filtered."""
    if isinstance(node, ReferenceSchema):
        yield node.target
    elif isinstance(node, ObjectSchema):
        for prop in node.properties.values():
            yield from iter_references(prop)
        if isinstance(node.additional_properties, SchemaNode):
            yield from iter_references(node.additional_properties)
    elif isinstance(node, ArraySchema):
        yield from iter_references(node.items)


# =============================================================================
# JSON Schema rendering
# =============================================================================


def _nullable_type(type_name: str, nullable: bool) -> Union[str, List[str]]:
    return [type_name, "null"] if nullable else type_name


def to_json_schema(node: SchemaNode) -> Dict[str, Any]:
    """Render a node as a plain JSON Schema mapping (key order is stable)."""
    out: Dict[str, Any]

    if isinstance(node, ReferenceSchema):
        ref = {"$ref": f"{SCHEMA_REF_PREFIX}{node.target}"}
        out = {"anyOf": [ref, {"type": "null"}]} if node.nullable else ref

    elif isinstance(node, ObjectSchema):
        out = {"type": _nullable_type("object", node.nullable)}
        if node.title:
            out["title"] = node.title
        if node.properties or node.title:
            out["properties"] = {name: to_json_schema(prop) for name, prop in node.properties.items()}
        if node.required:
            out["required"] = list(node.required)
        if isinstance(node.additional_properties, SchemaNode):
            out["additionalProperties"] = to_json_schema(node.additional_properties)
        elif node.additional_properties is not None:
            out["additionalProperties"] = node.additional_properties

    elif isinstance(node, ArraySchema):
        out = {"type": _nullable_type("array", node.nullable), "items": to_json_schema(node.items)}

    elif isinstance(node, EnumSchema):
        value_type = "integer" if node.values and all(isinstance(v, int) for v in node.values) else "string"
        out = {"type": _nullable_type(value_type, node.nullable)}
        if node.title:
            out["title"] = node.title
        out["enum"] = list(node.values)

    elif isinstance(node, PrimitiveSchema):
        out = {}
        if node.type is not None:
            out["type"] = _nullable_type(node.type, node.nullable)
        if node.format:
            out["format"] = node.format

    else:
        raise TypeError(f"Unsupported schema node: {type(node).__name__}")

    if node.description and not isinstance(node, ReferenceSchema):
        out["description"] = node.description
    out.update(node.extensions)
    return out


# =============================================================================
# JSON Schema parsing
# =============================================================================


def schema_from_json(data: Any) -> SchemaNode:
    """
    Parse a JSON Schema mapping back into a node.

    Constructs with no counterpart (allOf, patterns, ...) parse as the
    unconstrained schema; extension keys are always kept.
    """
    if not isinstance(data, dict):
        return any_schema()

    extensions = {k: v for k, v in data.items() if isinstance(k, str) and k.startswith("x-")}
    description = data.get("description")

    if "$ref" in data:
        return ReferenceSchema(
            target=str(data["$ref"]).rsplit("/", 1)[-1],
            description=description,
            extensions=extensions,
        )

    for key in ("anyOf", "oneOf"):
        variants = data.get(key)
        if isinstance(variants, list):
            present = [v for v in variants if not (isinstance(v, dict) and v.get("type") == "null")]
            if len(present) == 1 and len(present) < len(variants):
                inner = schema_from_json(present[0])
                return replace(
                    inner,
                    nullable=True,
                    description=description or inner.description,
                    extensions={**inner.extensions, **extensions},
                )
            return any_schema()

    raw_type = data.get("type")
    nullable = False
    if isinstance(raw_type, list):
        nullable = "null" in raw_type
        remaining = [t for t in raw_type if t != "null"]
        raw_type = remaining[0] if len(remaining) == 1 else None

    common = dict(nullable=nullable, description=description, extensions=extensions)

    if "enum" in data:
        return EnumSchema(title=data.get("title"), values=list(data["enum"]), **common)

    if raw_type == "object" or "properties" in data:
        additional = data.get("additionalProperties")
        return ObjectSchema(
            title=data.get("title"),
            properties={
                name: schema_from_json(prop) for name, prop in (data.get("properties") or {}).items()
            },
            required=list(data.get("required") or []),
            additional_properties=schema_from_json(additional) if isinstance(additional, dict) else additional,
            **common,
        )

    if raw_type == "array":
        return ArraySchema(items=schema_from_json(data.get("items") or {}), **common)

    if isinstance(raw_type, str):
        return PrimitiveSchema(type=raw_type, format=data.get("format"), **common)

    return PrimitiveSchema(**common)


__all__ = [
    "ORIGIN_NAMESPACE",
    "ORIGIN_IDENTITY",
    "SCHEMA_REF_PREFIX",
    "SchemaNode",
    "ObjectSchema",
    "ArraySchema",
    "ReferenceSchema",
    "PrimitiveSchema",
    "EnumSchema",
    "any_schema",
    "iter_references",
    "to_json_schema",
    "schema_from_json",
]
