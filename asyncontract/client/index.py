# asyncontract/client/index.py
"""
External type index: which types the consumer already has.

A reference is either a catalog file (.yaml/.yml/.json) or the dotted name
of an importable module. Every public scanned type of every reference is
indexed by fully-qualified name; the first loaded occurrence of a name wins.

A reference that cannot be loaded is skipped and reported as a diagnostic;
loading as a whole never fails.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from asyncontract.catalog.catalog import TypeCatalog
from asyncontract.catalog.files import CATALOG_SUFFIXES, is_catalog_path, load_catalog
from asyncontract.catalog.introspect import build_catalog
from asyncontract.client.types import TypeInfo
from asyncontract.core.diagnostics import MODULE_LOAD_FAILED, Diagnostic
from asyncontract.core.exceptions import CatalogError
from asyncontract.logging.logger import get_logger
from asyncontract.logging.tags import INDEX

logger = get_logger(__name__)

Reference = Union[str, Path]


class ExternalTypeIndex:
    """
    Fully-qualified type names provided by reference modules.

    Usage:
        index = ExternalTypeIndex()
        diagnostics = index.load_modules(["build/shared.catalog.yaml", "shop.shared"])
        index.exists("shop.shared.Customer")
    """

    def __init__(self, catalogs: Iterable[TypeCatalog] = ()):
        self._types: Dict[str, TypeInfo] = {}
        self._loaded: Set[str] = set()
        for catalog in catalogs:
            self.add_catalog(catalog)

    def load_modules(self, references: Iterable[Reference]) -> List[Diagnostic]:
        """
        Load references into the index, skipping any that were loaded before.

        Returns:
            One diagnostic per reference that could not be loaded
        """
        diagnostics: List[Diagnostic] = []

        for reference in references:
            key = str(reference)
            if key in self._loaded:
                continue

            catalog, problem = self._open(reference)
            if catalog is None:
                logger.warning(f"{INDEX} Skipping reference {key!r}: {problem}")
                diagnostics.append(Diagnostic.warning(MODULE_LOAD_FAILED, problem, key))
                continue

            self._loaded.add(key)
            added = self.add_catalog(catalog)
            logger.debug(f"{INDEX} {key}: {added} types indexed")

        return diagnostics

    def add_catalog(self, catalog: TypeCatalog) -> int:
        """Index a catalog directly. Returns how many new names were added."""
        added = 0
        for descriptor in catalog.scanned():
            if not descriptor.public or descriptor.identity in self._types:
                continue
            self._types[descriptor.identity] = TypeInfo(
                type_name=descriptor.name,
                namespace=descriptor.namespace,
                is_external=True,
                external_module=catalog.name,
            )
            added += 1
        return added

    def exists(self, full_name: str) -> bool:
        return full_name in self._types

    def lookup(self, full_name: str) -> Optional[TypeInfo]:
        return self._types.get(full_name)

    def type_names(self) -> List[str]:
        return list(self._types)

    def __len__(self) -> int:
        return len(self._types)

    @staticmethod
    def _open(reference: Reference) -> Tuple[Optional[TypeCatalog], str]:
        path = Path(reference)

        if is_catalog_path(path):
            try:
                return load_catalog(path), ""
            except CatalogError as e:
                return None, str(e)

        if path.is_file():
            return None, f"unsupported reference file (expected one of {', '.join(CATALOG_SUFFIXES)})"

        try:
            return build_catalog(str(reference)), ""
        except CatalogError as e:
            return None, str(e)


__all__ = ["ExternalTypeIndex"]
