# asyncontract/catalog/catalog.py
"""
TypeCatalog: the registry every pipeline stage reads types from.

A catalog is built once per invocation, either by introspecting a Python
module (see introspect.py), by explicit registration, or by loading a
catalog file (see files.py). Registration order is preserved, which keeps
discovery and schema output deterministic.
"""

from __future__ import annotations


from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set

from asyncontract.catalog.types import TypeDescriptor
from asyncontract.logging.logger import get_logger
from asyncontract.logging.tags import CATALOG

logger = get_logger(__name__)


@dataclass
class TypeCatalog:
    """
    Ordered registry of type descriptors keyed by identity.

    Args:
        name: Module identifier the catalog was built from (reported as the
            origin module of external types on the consumer side)
    """

    name: str
    _types: Dict[str, TypeDescriptor] = field(default_factory=dict, repr=False)

    def register(self, descriptor: TypeDescriptor) -> bool:
        """
        Register a descriptor. The first registration of an identity wins.

        Returns:
            True if the descriptor was added, False if the identity was taken
        """
        identity = descriptor.identity
        if identity in self._types:
            logger.debug(f"{CATALOG} Ignoring duplicate registration of {identity!r}")
            return False
        self._types[identity] = descriptor
        return True

    def get(self, identity: str) -> Optional[TypeDescriptor]:
        return self._types.get(identity)

    def resolve(self, name: str) -> Optional[TypeDescriptor]:
        """Resolve by identity first, then by the first matching simple name."""
        exact = self._types.get(name)
        if exact is not None:
            return exact
        for descriptor in self._types.values():
            if descriptor.name == name:
                return descriptor
        return None

    def scanned(self) -> List[TypeDescriptor]:
        """Types that belong to the module itself (not just referenced by it)."""
        return [t for t in self._types.values() if t.scanned]

    def ancestors(self, identity: str) -> Set[str]:
        """All transitive base identities of a type, including unknown bases."""
        found: Set[str] = set()
        pending = list(self._types[identity].bases) if identity in self._types else []
        while pending:
            base = pending.pop()
            if base in found:
                continue
            found.add(base)
            known = self._types.get(base)
            if known is not None:
                pending.extend(known.bases)
        return found

    def descendants_of(self, identity: str) -> List[TypeDescriptor]:
        """Scanned types deriving from (or implementing) the given type."""
        return [t for t in self.scanned() if identity in self.ancestors(t.identity)]

    def has_subtypes(self, identity: str) -> bool:
        return any(identity in self.ancestors(t.identity) for t in self._types.values())

    def __contains__(self, identity: object) -> bool:
        return identity in self._types

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)


__all__ = ["TypeCatalog"]
