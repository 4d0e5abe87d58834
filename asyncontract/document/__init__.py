# asyncontract/document/__init__.py
from asyncontract.document.io import (
    DocumentFormat,
    dumps_document,
    format_for_path,
    read_document,
    write_document,
)
from asyncontract.document.models import (
    ASYNCAPI_VERSION,
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

__all__ = [
    "ASYNCAPI_VERSION",
    "JSON_CONTENT_TYPE",
    "JSON_SCHEMA_FORMAT",
    "AsyncApiDocument",
    "Channel",
    "Components",
    "DocumentFormat",
    "Info",
    "Message",
    "Operation",
    "OperationAction",
    "Reference",
    "SchemaEntry",
    "dumps_document",
    "format_for_path",
    "read_document",
    "write_document",
]
