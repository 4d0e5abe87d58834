# asyncontract/core/__init__.py
"""
Shared building blocks: exceptions, diagnostics and config file loading.
"""

from .diagnostics import Diagnostic, Severity
from .exceptions import (
    AsyncContractError,
    CatalogError,
    CodeGenerationError,
    ConfigurationError,
    DocumentError,
    SchemaCollisionError,
)

__all__ = [
    "AsyncContractError",
    "CatalogError",
    "CodeGenerationError",
    "ConfigurationError",
    "Diagnostic",
    "DocumentError",
    "SchemaCollisionError",
    "Severity",
]
