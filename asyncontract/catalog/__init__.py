# asyncontract/catalog/__init__.py
"""
Type catalog: the language-neutral view of a producer module.

Usage:
    from asyncontract.catalog import build_catalog, save_catalog

    catalog = build_catalog("shop.contracts")
    save_catalog(catalog, "build/shop.catalog.yaml")
"""

from asyncontract.catalog.catalog import TypeCatalog
from asyncontract.catalog.files import (
    CATALOG_SUFFIXES,
    CatalogFile,
    is_catalog_path,
    load_catalog,
    save_catalog,
)
from asyncontract.catalog.introspect import build_catalog
from asyncontract.catalog.types import (
    ArrayRef,
    FieldDescriptor,
    MapRef,
    NamedRef,
    OptionalRef,
    PrimitiveKind,
    PrimitiveRef,
    TypeDescriptor,
    TypeKind,
    TypeRef,
    qualified_name,
)

__all__ = [
    "TypeCatalog",
    "build_catalog",
    "load_catalog",
    "save_catalog",
    "is_catalog_path",
    "CatalogFile",
    "CATALOG_SUFFIXES",
    "TypeDescriptor",
    "FieldDescriptor",
    "TypeKind",
    "PrimitiveKind",
    "TypeRef",
    "PrimitiveRef",
    "NamedRef",
    "OptionalRef",
    "ArrayRef",
    "MapRef",
    "qualified_name",
]
