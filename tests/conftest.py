# tests/conftest.py
"""
Root conftest - shared fixtures.

The sample producer package lives in tests/fixtures/shopdemo and is importable
as "shopdemo" (tests/fixtures is on pythonpath, see pyproject.toml).

Test Tiers:
===========
- tier1: Pure logic, no code generation library calls
         Run: pytest -m tier1
- tier2: Runs datamodel-code-generator end to end
         Run: pytest -m "tier1 or tier2"
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from asyncontract.catalog import (
    ArrayRef,
    FieldDescriptor,
    NamedRef,
    OptionalRef,
    PrimitiveKind,
    PrimitiveRef,
    TypeCatalog,
    TypeDescriptor,
    TypeKind,
    build_catalog,
)
from asyncontract.client.adapter import AdaptedType
from asyncontract.schema.nodes import SchemaNode

# =============================================================================
# Descriptor helpers
# =============================================================================


def string_field(name: str, required: bool = True) -> FieldDescriptor:
    return FieldDescriptor(name=name, type=PrimitiveRef(primitive=PrimitiveKind.STRING), required=required)


def named_field(name: str, identity: str, *, optional: bool = False, array: bool = False) -> FieldDescriptor:
    ref = NamedRef(identity=identity)
    if array:
        ref = ArrayRef(items=ref)
    if optional:
        ref = OptionalRef(inner=ref)
    return FieldDescriptor(name=name, type=ref, required=not optional)


def make_type(
    name: str,
    namespace: str = "Shop.Events",
    *,
    kind: TypeKind = TypeKind.CLASS,
    bases: Optional[List[str]] = None,
    fields: Optional[List[FieldDescriptor]] = None,
    public: bool = True,
    scanned: bool = True,
) -> TypeDescriptor:
    return TypeDescriptor(
        name=name,
        namespace=namespace,
        kind=kind,
        bases=bases or [],
        fields=fields or [],
        public=public,
        scanned=scanned,
    )


def make_catalog(*descriptors: TypeDescriptor, name: str = "Shop") -> TypeCatalog:
    catalog = TypeCatalog(name=name)
    for d in descriptors:
        catalog.register(d)
    return catalog


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def shop_catalog() -> TypeCatalog:
    """Catalog of the whole shopdemo package."""
    return build_catalog("shopdemo")


class StubAdapter:
    """Stands in for the code generation library; records what it was asked for."""

    def __init__(self, placeholders: tuple = ()):
        self.calls: List[str] = []
        self.nodes: Dict[str, SchemaNode] = {}
        self._placeholders = set(placeholders)

    def adapt(self, type_name: str, node: SchemaNode) -> AdaptedType:
        self.calls.append(type_name)
        self.nodes[type_name] = node
        if type_name in self._placeholders:
            return AdaptedType(
                name=type_name,
                body=f"class {type_name}(BaseModel):\n    pass",
                placeholder=True,
            )
        return AdaptedType(
            name=type_name,
            body=f"class {type_name}(BaseModel):\n    value: str",
            from_imports={"pydantic": ["BaseModel", "Field"]},
        )


@pytest.fixture
def stub_adapter() -> StubAdapter:
    return StubAdapter()
