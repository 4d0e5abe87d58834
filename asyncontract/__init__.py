"""
asyncontract - AsyncAPI contracts from Python message types, and back.

Producer side: discover message types in a module, walk their structure and
write an AsyncAPI 3.0 document that remembers where every type came from.
Consumer side: read that document and generate pydantic models for every
type the consumer doesn't already have.

Quick Start:
    >>> from asyncontract import build_catalog, discover, parse_pattern, DocumentAssembler
    >>> catalog = build_catalog("shop.contracts")
    >>> found = discover(catalog, [parse_pattern("shop.contracts.events.**")])
    >>> document = DocumentAssembler(catalog).assemble("shop", "1.0.0", found.types)

    >>> from asyncontract import ContractEmitter
    >>> result = ContractEmitter().generate(document)

Architecture:
    asyncontract/
    ├── catalog/     # Language-neutral type descriptors (introspection, catalog files)
    ├── server/      # Discovery, schema walking, document assembly
    ├── schema/      # SchemaNode variants and JSON Schema conversion
    ├── document/    # AsyncAPI models, YAML/JSON IO
    ├── client/      # External type index, code generation adapter, emitter
    ├── tasks/       # Build tasks (producer and consumer)
    ├── config/      # asyncontract.yaml loading
    └── cli/         # typer application
"""

__version__ = "0.1.0"

from asyncontract.catalog import TypeCatalog, build_catalog, load_catalog, save_catalog
from asyncontract.client import (
    ContractEmitter,
    ContractGenerationResult,
    ContractGeneratorSettings,
    ExternalTypeIndex,
    GeneratedSourceFile,
    TypeInfo,
)
from asyncontract.core import (
    AsyncContractError,
    CatalogError,
    CodeGenerationError,
    ConfigurationError,
    Diagnostic,
    DocumentError,
    SchemaCollisionError,
    Severity,
)
from asyncontract.document import AsyncApiDocument, DocumentFormat, read_document, write_document
from asyncontract.server import (
    DiscoveredType,
    DiscoveryPattern,
    DocumentAssembler,
    MessageKind,
    assemble,
    discover,
    parse_pattern,
)
from asyncontract.tasks import generate_contracts, generate_spec

__all__ = [
    "__version__",
    # Catalog
    "TypeCatalog",
    "build_catalog",
    "load_catalog",
    "save_catalog",
    # Producer
    "DiscoveredType",
    "DiscoveryPattern",
    "DocumentAssembler",
    "MessageKind",
    "assemble",
    "discover",
    "parse_pattern",
    # Document
    "AsyncApiDocument",
    "DocumentFormat",
    "read_document",
    "write_document",
    # Consumer
    "ContractEmitter",
    "ContractGenerationResult",
    "ContractGeneratorSettings",
    "ExternalTypeIndex",
    "GeneratedSourceFile",
    "TypeInfo",
    # Tasks
    "generate_contracts",
    "generate_spec",
    # Errors
    "AsyncContractError",
    "CatalogError",
    "CodeGenerationError",
    "ConfigurationError",
    "Diagnostic",
    "DocumentError",
    "SchemaCollisionError",
    "Severity",
]
