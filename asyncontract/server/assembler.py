# asyncontract/server/assembler.py
"""
Document assembler: discovered message types -> AsyncAPI 3.0 document.

Per discovered type (not per dependency):
    channels[identity]                = address urn:message:{ns}:{name}
    components.messages[name]         = application/json, payload -> schema
    operations[{name}Operation]       = receive (event) | send (command)

Per type in the dependency closure:
    components.schemas[name]          = draft-07 JSON Schema with
                                        x-origin-namespace / x-origin-identity
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional
from urllib.parse import quote

from asyncontract import __version__
from asyncontract.catalog.catalog import TypeCatalog
from asyncontract.core.diagnostics import Diagnostic
from asyncontract.core.exceptions import ConfigurationError, SchemaCollisionError
from asyncontract.document.models import (
    JSON_CONTENT_TYPE,
    JSON_SCHEMA_FORMAT,
    AsyncApiDocument,
    Channel,
    Components,
    Info,
    Message,
    Operation,
    OperationAction,
    Reference,
    SchemaEntry,
)
from asyncontract.logging.logger import get_logger
from asyncontract.logging.tags import ASSEMBLER
from asyncontract.schema.nodes import SCHEMA_REF_PREFIX, to_json_schema
from asyncontract.server.discovery import DiscoveredType, MessageKind
from asyncontract.server.walker import SchemaWalker

logger = get_logger(__name__)

GENERATOR_NAME = "asyncontract.server"

MESSAGE_REF_PREFIX = "#/components/messages/"
CHANNEL_REF_PREFIX = "#/channels/"

_ACTIONS = {
    MessageKind.EVENT: OperationAction.RECEIVE,
    MessageKind.COMMAND: OperationAction.SEND,
}


def channel_address(namespace: str, name: str) -> str:
    return f"urn:message:{namespace}:{name}"


def operation_key(name: str) -> str:
    return f"{name}Operation"


def channel_ref(identity: str) -> str:
    """Channel keys contain dots; escape everything reserved."""
    return f"{CHANNEL_REF_PREFIX}{quote(identity, safe='')}"


class DocumentAssembler:
    """
    Builds one document from a discovered type set.

    Args:
        catalog: Catalog the discovered types came from; used to resolve
            field references while walking
    """

    def __init__(self, catalog: TypeCatalog):
        self._catalog = catalog
        self.diagnostics: List[Diagnostic] = []

    def assemble(
        self,
        title: str,
        version: str,
        discovered_types: Optional[Iterable[DiscoveredType]],
    ) -> AsyncApiDocument:
        """
        Raises:
            ConfigurationError: Blank title/version or no type set
            SchemaCollisionError: Two types share a simple name
        """
        if not title or not title.strip():
            raise ConfigurationError("Document title must not be blank")
        if not version or not version.strip():
            raise ConfigurationError("Document version must not be blank")
        if discovered_types is None:
            raise ConfigurationError("No discovered type set given")

        discovered = list(discovered_types)
        walker = SchemaWalker(self._catalog)
        for item in discovered:
            walker.collect_dependencies(item.descriptor)

        schemas: Dict[str, SchemaEntry] = {}
        owners: Dict[str, str] = {}
        for descriptor in walker.collected:
            owner = owners.setdefault(descriptor.name, descriptor.identity)
            if owner != descriptor.identity:
                raise SchemaCollisionError(descriptor.name, owner, descriptor.identity)
            schemas[descriptor.name] = SchemaEntry(
                schema_format=JSON_SCHEMA_FORMAT,
                schema_=to_json_schema(walker.schema_for(descriptor)),
            )

        channels: Dict[str, Channel] = {}
        messages: Dict[str, Message] = {}
        operations: Dict[str, Operation] = {}
        for item in discovered:
            channels[item.identity] = Channel(
                address=channel_address(item.namespace, item.name),
                messages={item.name: Reference(ref=f"{MESSAGE_REF_PREFIX}{item.name}")},
            )
            messages[item.name] = Message(
                name=item.name,
                content_type=JSON_CONTENT_TYPE,
                payload=Reference(ref=f"{SCHEMA_REF_PREFIX}{item.name}"),
            )
            operations[operation_key(item.name)] = Operation(
                action=_ACTIONS[item.kind],
                channel=Reference(ref=channel_ref(item.identity)),
            )

        self.diagnostics.extend(walker.diagnostics)
        logger.info(
            f"{ASSEMBLER} {title} {version}: {len(channels)} channels, {len(schemas)} schemas"
        )

        return AsyncApiDocument(
            info=Info(
                title=title,
                version=version,
                description=f"Generated by {GENERATOR_NAME} {__version__}",
            ),
            channels=channels,
            operations=operations,
            components=Components(messages=messages, schemas=schemas),
        )


def assemble(
    title: str,
    version: str,
    discovered_types: Optional[Iterable[DiscoveredType]],
    catalog: TypeCatalog,
) -> AsyncApiDocument:
    """Convenience wrapper around DocumentAssembler for one-off use."""
    return DocumentAssembler(catalog).assemble(title, version, discovered_types)


__all__ = [
    "DocumentAssembler",
    "assemble",
    "channel_address",
    "channel_ref",
    "operation_key",
    "GENERATOR_NAME",
]
