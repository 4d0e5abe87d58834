# asyncontract/server/discovery.py
"""
Discovery engine: select message types from a catalog by pattern.

Pattern forms:
    "shop.events.**"      all public concrete types in shop.events and below
    "shop.events.*"       all public concrete types in shop.events only
    "ICustomerEvent"      all public concrete implementers / subtypes of a
                          polymorphic base (the base itself is never included)
    "shop.OrderCreated"   exactly that type

Names resolve by identity first, then by simple name. Only scanned types
(the module's own types) are candidates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional

from asyncontract.catalog.catalog import TypeCatalog
from asyncontract.catalog.types import TypeDescriptor
from asyncontract.core.diagnostics import CLASSIFICATION_CONFLICT, UNMATCHED_PATTERN, Diagnostic
from asyncontract.logging.logger import get_logger
from asyncontract.logging.tags import DISCOVERY

logger = get_logger(__name__)

RECURSIVE_WILDCARD = ".**"
NAMESPACE_WILDCARD = ".*"


class MessageKind(str, Enum):
    """Classification that decides the operation direction."""

    EVENT = "event"
    COMMAND = "command"

    @classmethod
    def parse(cls, value: Optional[str]) -> "MessageKind":
        """Case-insensitive "command" is a command; anything else is an event."""
        if value and value.strip().lower() == cls.COMMAND.value:
            return cls.COMMAND
        return cls.EVENT


@dataclass(frozen=True, slots=True)
class DiscoveryPattern:
    pattern: str
    kind: MessageKind = MessageKind.EVENT


def parse_pattern(text: str) -> DiscoveryPattern:
    """
    Parse "PATTERN" or "PATTERN=KIND".

    Examples:
        >>> parse_pattern("shop.commands.*=Command")
        DiscoveryPattern(pattern='shop.commands.*', kind=<MessageKind.COMMAND: 'command'>)
    """
    pattern, _, kind = text.partition("=")
    return DiscoveryPattern(pattern=pattern.strip(), kind=MessageKind.parse(kind))


@dataclass(frozen=True, slots=True)
class DiscoveredType:
    descriptor: TypeDescriptor
    kind: MessageKind

    @property
    def identity(self) -> str:
        return self.descriptor.identity

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def namespace(self) -> str:
        return self.descriptor.namespace


@dataclass
class DiscoveryResult:
    """Discovered types in first-claim order, plus what went unmatched or conflicted."""

    types: List[DiscoveredType] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def kinds(self) -> Dict[str, MessageKind]:
        return {t.identity: t.kind for t in self.types}

    def __iter__(self) -> Iterator[DiscoveredType]:
        return iter(self.types)

    def __len__(self) -> int:
        return len(self.types)


# =============================================================================
# Discovery
# =============================================================================


def discover(catalog: TypeCatalog, patterns: Iterable[DiscoveryPattern]) -> DiscoveryResult:
    """
    Match patterns against the catalog's scanned types.

    The first pattern to claim a type decides its classification. A later
    pattern claiming it with another classification is reported, not fatal.
    """
    result = DiscoveryResult()
    claimed: Dict[str, DiscoveredType] = {}

    for pattern in patterns:
        matches = _match(catalog, pattern.pattern)

        if not matches:
            logger.warning(f"{DISCOVERY} Pattern {pattern.pattern!r} matched no types")
            result.diagnostics.append(
                Diagnostic.warning(UNMATCHED_PATTERN, "pattern matched no types", pattern.pattern)
            )
            continue

        for descriptor in matches:
            existing = claimed.get(descriptor.identity)
            if existing is None:
                discovered = DiscoveredType(descriptor=descriptor, kind=pattern.kind)
                claimed[descriptor.identity] = discovered
                result.types.append(discovered)
            elif existing.kind is not pattern.kind:
                message = (
                    f"already classified as {existing.kind.value} by an earlier pattern; "
                    f"{pattern.pattern!r} ({pattern.kind.value}) ignored"
                )
                logger.warning(f"{DISCOVERY} {descriptor.identity}: {message}")
                result.diagnostics.append(
                    Diagnostic.warning(CLASSIFICATION_CONFLICT, message, descriptor.identity)
                )

        logger.debug(f"{DISCOVERY} {pattern.pattern!r} -> {len(matches)} types")

    logger.info(f"{DISCOVERY} Discovered {len(result.types)} message types")
    return result


def _is_candidate(descriptor: TypeDescriptor) -> bool:
    return descriptor.public and descriptor.is_concrete


def _match(catalog: TypeCatalog, pattern: str) -> List[TypeDescriptor]:
    if pattern.endswith(RECURSIVE_WILDCARD):
        ns = pattern[: -len(RECURSIVE_WILDCARD)]
        return [
            t
            for t in catalog.scanned()
            if _is_candidate(t) and (t.namespace == ns or t.namespace.startswith(ns + "."))
        ]

    if pattern.endswith(NAMESPACE_WILDCARD):
        ns = pattern[: -len(NAMESPACE_WILDCARD)]
        return [t for t in catalog.scanned() if _is_candidate(t) and t.namespace == ns]

    target = _resolve_scanned(catalog, pattern)
    if target is None:
        return []

    if target.is_interface or target.is_abstract or catalog.has_subtypes(target.identity):
        return [t for t in catalog.descendants_of(target.identity) if _is_candidate(t)]

    return [target]


def _resolve_scanned(catalog: TypeCatalog, name: str) -> Optional[TypeDescriptor]:
    exact = catalog.get(name)
    if exact is not None and exact.scanned:
        return exact
    return next((t for t in catalog.scanned() if t.name == name), None)


__all__ = [
    "MessageKind",
    "DiscoveryPattern",
    "DiscoveredType",
    "DiscoveryResult",
    "discover",
    "parse_pattern",
]
