# asyncontract/server/__init__.py
"""
Producer side: catalog -> discovered message types -> AsyncAPI document.

Usage:
    from asyncontract.server import DocumentAssembler, discover, parse_pattern

    result = discover(catalog, [parse_pattern("shop.events.**")])
    document = DocumentAssembler(catalog).assemble("shop", "1.0.0", result.types)
"""

from asyncontract.server.assembler import (
    GENERATOR_NAME,
    DocumentAssembler,
    assemble,
    channel_address,
    channel_ref,
    operation_key,
)
from asyncontract.server.discovery import (
    DiscoveredType,
    DiscoveryPattern,
    DiscoveryResult,
    MessageKind,
    discover,
    parse_pattern,
)
from asyncontract.server.walker import SchemaWalker

__all__ = [
    "GENERATOR_NAME",
    "DocumentAssembler",
    "assemble",
    "channel_address",
    "channel_ref",
    "operation_key",
    "DiscoveredType",
    "DiscoveryPattern",
    "DiscoveryResult",
    "MessageKind",
    "discover",
    "parse_pattern",
    "SchemaWalker",
]
