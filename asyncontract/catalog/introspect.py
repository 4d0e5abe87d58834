# asyncontract/catalog/introspect.py
"""
Build a TypeCatalog by introspecting an importable Python module.

The module (and, for a package, every sub-module) is imported and each class
defined inside it becomes a scanned descriptor. Classes that are only
referenced by field annotations (defined outside the scanned tree) are
described too, with scanned=False, so the schema walker can follow them.

Supported class shapes:
    - pydantic models (fields from model_fields, aliases honored)
    - dataclasses
    - plain annotated classes, typing.Protocol interfaces, ABCs
    - enum.Enum subclasses
"""

from __future__ import annotations

import abc
import collections.abc
import dataclasses
import importlib
import inspect
import pkgutil
import types
import typing
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from types import ModuleType
from typing import Any, Deque, Iterator, List, Optional, Tuple
from uuid import UUID

from pydantic import BaseModel

from asyncontract.catalog.catalog import TypeCatalog
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
from asyncontract.core.exceptions import CatalogError
from asyncontract.logging.logger import get_logger
from asyncontract.logging.tags import CATALOG

logger = get_logger(__name__)

# Exact-type lookup; bool must not fall through to int.
_PRIMITIVES = {
    str: PrimitiveKind.STRING,
    bool: PrimitiveKind.BOOLEAN,
    int: PrimitiveKind.INTEGER,
    float: PrimitiveKind.NUMBER,
    Decimal: PrimitiveKind.DECIMAL,
    datetime: PrimitiveKind.DATETIME,
    date: PrimitiveKind.DATE,
    time: PrimitiveKind.TIME,
    timedelta: PrimitiveKind.DURATION,
    UUID: PrimitiveKind.UUID,
    bytes: PrimitiveKind.BYTES,
}

_ANY = PrimitiveRef(primitive=PrimitiveKind.ANY)

FieldSpec = Tuple[str, Any, bool, Optional[str]]


def build_catalog(module_name: str, *, name: Optional[str] = None) -> TypeCatalog:
    """
    Import a module and describe every class it defines.

    Args:
        module_name: Dotted module or package name (e.g. "shop.contracts")
        name: Catalog name; defaults to module_name

    Raises:
        CatalogError: If the module cannot be imported
    """
    try:
        root = importlib.import_module(module_name)
    except Exception as exc:
        raise CatalogError(
            f"Could not import module {module_name!r}: {type(exc).__name__}: {exc}"
        ) from exc

    catalog = TypeCatalog(name=name or module_name)
    introspector = _Introspector(catalog, module_name)

    for module in _iter_modules(root):
        for obj in vars(module).values():
            if isinstance(obj, type) and obj.__module__ == module.__name__:
                introspector.describe(obj)

    introspector.describe_referenced()
    logger.info(f"{CATALOG} Described {len(catalog)} types from {module_name!r}")
    return catalog


def _iter_modules(root: ModuleType) -> Iterator[ModuleType]:
    yield root

    package_path = getattr(root, "__path__", None)
    if not package_path:
        return

    for mod_info in sorted(
        pkgutil.walk_packages(package_path, prefix=f"{root.__name__}."), key=lambda m: m.name
    ):
        try:
            yield importlib.import_module(mod_info.name)
        except Exception as exc:
            logger.warning(f"{CATALOG} Skipping {mod_info.name}: {type(exc).__name__}: {exc}")


class _Introspector:
    def __init__(self, catalog: TypeCatalog, root_module: str):
        self._catalog = catalog
        self._root = root_module
        self._referenced: Deque[type] = collections.deque()

    def describe(self, cls: type) -> None:
        identity = qualified_name(cls.__module__, cls.__name__)
        if identity in self._catalog:
            return

        kind = _kind_of(cls)
        fields: List[FieldDescriptor] = []
        enum_values: List[Any] = []

        if kind is TypeKind.ENUM:
            enum_values = [m.value if isinstance(m.value, (str, int)) else str(m.value) for m in cls]
        else:
            for field_name, annotation, required, description in _field_specs(cls):
                fields.append(
                    FieldDescriptor(
                        name=field_name,
                        type=self._to_ref(annotation),
                        required=required,
                        description=description,
                    )
                )

        self._catalog.register(
            TypeDescriptor(
                name=cls.__name__,
                namespace=cls.__module__,
                kind=kind,
                public=not cls.__name__.startswith("_"),
                bases=[qualified_name(b.__module__, b.__name__) for b in cls.__bases__ if b is not object],
                fields=fields,
                enum_values=enum_values,
                description=_own_doc(cls),
                scanned=self._in_tree(cls.__module__),
            )
        )

    def describe_referenced(self) -> None:
        """Describe classes reached through annotations, transitively."""
        while self._referenced:
            self.describe(self._referenced.popleft())

    def _in_tree(self, module: str) -> bool:
        return module == self._root or module.startswith(self._root + ".")

    def _to_ref(self, tp: Any) -> TypeRef:
        if tp is Any or tp is None or tp is type(None):
            return _ANY

        origin = typing.get_origin(tp)
        args = typing.get_args(tp)

        if origin is typing.Annotated:
            return self._to_ref(args[0])

        if origin is typing.Union or origin is types.UnionType:
            present = [a for a in args if a is not type(None)]
            inner = self._to_ref(present[0]) if len(present) == 1 else _ANY
            if len(present) < len(args):
                return OptionalRef(inner=inner)
            return inner

        if origin is typing.Literal:
            return self._to_ref(type(args[0])) if args else _ANY

        if isinstance(origin, type):
            if issubclass(origin, collections.abc.Mapping):
                return MapRef(values=self._to_ref(args[1]) if len(args) == 2 else _ANY)
            if issubclass(origin, collections.abc.Iterable) and not issubclass(origin, (str, bytes)):
                return ArrayRef(items=self._to_ref(args[0]) if args else _ANY)
            return self._to_ref(origin)

        if not isinstance(tp, type):
            return _ANY

        if issubclass(tp, Enum):
            return self._named(tp)

        if tp in _PRIMITIVES:
            return PrimitiveRef(primitive=_PRIMITIVES[tp])

        if issubclass(tp, collections.abc.Mapping):
            return MapRef(values=_ANY)
        if issubclass(tp, (list, tuple, set, frozenset)):
            return ArrayRef(items=_ANY)

        for base, primitive in _PRIMITIVES.items():
            if issubclass(tp, base):
                return PrimitiveRef(primitive=primitive)

        if tp.__module__ == "builtins":
            return _ANY

        return self._named(tp)

    def _named(self, cls: type) -> NamedRef:
        self._referenced.append(cls)
        return NamedRef(identity=qualified_name(cls.__module__, cls.__name__))


def _kind_of(cls: type) -> TypeKind:
    if issubclass(cls, Enum):
        return TypeKind.ENUM
    if getattr(cls, "_is_protocol", False):
        return TypeKind.INTERFACE
    if inspect.isabstract(cls) or abc.ABC in cls.__bases__:
        return TypeKind.ABSTRACT
    return TypeKind.CLASS


def _is_pydantic_model(cls: type) -> bool:
    return issubclass(cls, BaseModel) and cls is not BaseModel


def _field_specs(cls: type) -> List[FieldSpec]:
    """(json name, annotation, required, description) per field, in declaration order."""
    if _is_pydantic_model(cls):
        if not cls.__pydantic_complete__:
            cls.model_rebuild(raise_errors=False)
        return [
            (info.alias or name, info.annotation, info.is_required(), info.description)
            for name, info in cls.model_fields.items()
        ]

    hints = _type_hints(cls)

    if dataclasses.is_dataclass(cls):
        return [
            (
                f.name,
                hints.get(f.name, Any),
                f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING,
                None,
            )
            for f in dataclasses.fields(cls)
        ]

    specs: List[FieldSpec] = []
    for field_name, annotation in hints.items():
        if field_name.startswith("_") or typing.get_origin(annotation) is typing.ClassVar:
            continue
        specs.append((field_name, annotation, not hasattr(cls, field_name), None))
    return specs


def _type_hints(cls: type) -> dict:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError) as exc:
        logger.warning(
            f"{CATALOG} Unresolvable annotations on {cls.__module__}.{cls.__name__}: {exc}"
        )
        return {}


def _own_doc(cls: type) -> Optional[str]:
    doc = cls.__dict__.get("__doc__")
    if not isinstance(doc, str) or not doc.strip():
        return None
    # @dataclass fills in the signature when a class has no docstring
    if dataclasses.is_dataclass(cls) and doc.startswith(f"{cls.__name__}("):
        return None
    return inspect.cleandoc(doc)


__all__ = ["build_catalog"]
