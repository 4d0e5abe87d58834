# asyncontract/server/walker.py
"""
Schema walker: collect every composite type reachable from the discovered
message types and describe each one as a SchemaNode.

Traversal is arena-style. Each type gets a stable index on first visit and is
never walked again, so self-referencing and mutually-referencing graphs
terminate. One walker is shared across a whole batch; its visited set
accumulates across collect_dependencies() calls.

Wrappers (optional, array, map) are unwrapped before the leaf test. Map keys
are always strings, so only the value type is followed.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterator, List, Optional, Set

from asyncontract.catalog.catalog import TypeCatalog
from asyncontract.catalog.types import (
    ArrayRef,
    MapRef,
    NamedRef,
    OptionalRef,
    PrimitiveKind,
    PrimitiveRef,
    TypeDescriptor,
    TypeKind,
    TypeRef,
)
from asyncontract.core.diagnostics import UNRESOLVED_REFERENCE, Diagnostic
from asyncontract.logging.logger import get_logger
from asyncontract.logging.tags import WALKER
from asyncontract.schema.nodes import (
    ORIGIN_IDENTITY,
    ORIGIN_NAMESPACE,
    ArraySchema,
    EnumSchema,
    ObjectSchema,
    PrimitiveSchema,
    ReferenceSchema,
    SchemaNode,
    any_schema,
)

logger = get_logger(__name__)

# JSON Schema (type, format) per leaf kind
PRIMITIVE_SCHEMAS: Dict[PrimitiveKind, tuple] = {
    PrimitiveKind.STRING: ("string", None),
    PrimitiveKind.INTEGER: ("integer", None),
    PrimitiveKind.NUMBER: ("number", None),
    PrimitiveKind.DECIMAL: ("number", "decimal"),
    PrimitiveKind.BOOLEAN: ("boolean", None),
    PrimitiveKind.DATETIME: ("string", "date-time"),
    PrimitiveKind.DATE: ("string", "date"),
    PrimitiveKind.TIME: ("string", "time"),
    PrimitiveKind.DURATION: ("string", "duration"),
    PrimitiveKind.UUID: ("string", "uuid"),
    PrimitiveKind.BYTES: ("string", "binary"),
    PrimitiveKind.ANY: (None, None),
}


def named_targets(ref: TypeRef) -> Iterator[str]:
    """Identities a field type points at, after unwrapping wrappers."""
    while isinstance(ref, (OptionalRef, ArrayRef, MapRef)):
        if isinstance(ref, OptionalRef):
            ref = ref.inner
        elif isinstance(ref, ArrayRef):
            ref = ref.items
        else:
            ref = ref.values

    if isinstance(ref, NamedRef):
        yield ref.identity


class SchemaWalker:
    """
    Dependency collector and SchemaNode builder for one pipeline run.

    Usage:
        walker = SchemaWalker(catalog)
        for discovered in result.types:
            walker.collect_dependencies(discovered.descriptor)
        schemas = {t.name: walker.schema_for(t) for t in walker.collected}
    """

    def __init__(self, catalog: TypeCatalog):
        self._catalog = catalog
        self._arena: List[TypeDescriptor] = []
        self._index: Dict[str, int] = {}
        self._unresolved: Set[str] = set()
        self.diagnostics: List[Diagnostic] = []

    @property
    def collected(self) -> List[TypeDescriptor]:
        """Every type visited so far, in first-visit order."""
        return list(self._arena)

    def index_of(self, identity: str) -> Optional[int]:
        return self._index.get(identity)

    def collect_dependencies(self, root: TypeDescriptor) -> List[TypeDescriptor]:
        """
        Walk one root type depth-first in field order.

        Returns:
            Types first visited during this call (root included unless it was
            already visited by an earlier call)
        """
        start = len(self._arena)
        stack = [root]

        while stack:
            current = stack.pop()
            if current.identity in self._index:
                continue

            self._index[current.identity] = len(self._arena)
            self._arena.append(current)

            pending = []
            for f in current.fields:
                for identity in named_targets(f.type):
                    target = self._lookup(identity, owner=current.identity)
                    if target is not None and target.identity not in self._index:
                        pending.append(target)
            stack.extend(reversed(pending))

        walked = self._arena[start:]
        logger.debug(f"{WALKER} {root.identity}: {len(walked)} new types")
        return walked

    # -------------------------------------------------------------------------
    # SchemaNode construction
    # -------------------------------------------------------------------------

    def schema_for(self, descriptor: TypeDescriptor) -> SchemaNode:
        """Top-level schema node carrying the origin identity extensions."""
        extensions = {
            ORIGIN_NAMESPACE: descriptor.namespace,
            ORIGIN_IDENTITY: descriptor.identity,
        }

        if descriptor.kind is TypeKind.ENUM:
            return EnumSchema(
                title=descriptor.name,
                values=list(descriptor.enum_values),
                description=descriptor.description,
                extensions=extensions,
            )

        return ObjectSchema(
            title=descriptor.name,
            properties={f.name: self.field_schema(f.type) for f in descriptor.fields},
            required=[f.name for f in descriptor.fields if f.required],
            description=descriptor.description,
            extensions=extensions,
        )

    def field_schema(self, ref: TypeRef) -> SchemaNode:
        if isinstance(ref, PrimitiveRef):
            type_name, fmt = PRIMITIVE_SCHEMAS[ref.primitive]
            return PrimitiveSchema(type=type_name, format=fmt)

        if isinstance(ref, OptionalRef):
            return replace(self.field_schema(ref.inner), nullable=True)

        if isinstance(ref, ArrayRef):
            return ArraySchema(items=self.field_schema(ref.items))

        if isinstance(ref, MapRef):
            return ObjectSchema(additional_properties=self.field_schema(ref.values))

        target = self._lookup(ref.identity)
        if target is None:
            return any_schema()
        return ReferenceSchema(target=target.name)

    def _lookup(self, identity: str, owner: str = "") -> Optional[TypeDescriptor]:
        target = self._catalog.get(identity)
        if target is None and identity not in self._unresolved:
            self._unresolved.add(identity)
            logger.warning(f"{WALKER} Unresolved type {identity!r}; rendering as unconstrained")
            self.diagnostics.append(
                Diagnostic.warning(
                    UNRESOLVED_REFERENCE,
                    f"type not in catalog{f' (referenced by {owner})' if owner else ''}; "
                    "rendered as an unconstrained schema",
                    identity,
                )
            )
        return target


__all__ = ["SchemaWalker", "PRIMITIVE_SCHEMAS", "named_targets"]
