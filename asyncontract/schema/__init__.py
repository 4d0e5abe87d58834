# asyncontract/schema/__init__.py
from asyncontract.schema.nodes import (
    ORIGIN_IDENTITY,
    ORIGIN_NAMESPACE,
    SCHEMA_REF_PREFIX,
    ArraySchema,
    EnumSchema,
    ObjectSchema,
    PrimitiveSchema,
    ReferenceSchema,
    SchemaNode,
    any_schema,
    iter_references,
    schema_from_json,
    to_json_schema,
)

__all__ = [
    "ORIGIN_IDENTITY",
    "ORIGIN_NAMESPACE",
    "SCHEMA_REF_PREFIX",
    "ArraySchema",
    "EnumSchema",
    "ObjectSchema",
    "PrimitiveSchema",
    "ReferenceSchema",
    "SchemaNode",
    "any_schema",
    "iter_references",
    "schema_from_json",
    "to_json_schema",
]
