# asyncontract/core/exceptions.py
"""
Exception hierarchy for asyncontract.

Hierarchy:
    AsyncContractError
    ├── ConfigurationError - rejected input (blank title, missing types, bad config)
    │   └── SchemaCollisionError - two types share a simple name
    ├── CatalogError - producer module or catalog file could not be read
    ├── DocumentError - document could not be read or processed
    └── CodeGenerationError - the code generation library rejected a schema
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class AsyncContractError(Exception):
    """
    Base exception for all asyncontract errors.

    Examples:
        >>> try:
        ...     document = assemble(title, version, types)
        ... except AsyncContractError as e:
        ...     print(f"Generation failed: {e}")
    """

    pass


class ConfigurationError(AsyncContractError):
    """
    Invalid input or configuration.

    Raised before any generation work starts, for example:
    - Blank document title or version
    - Missing discovered type set
    - Missing document on the consumer side
    """

    pass


class SchemaCollisionError(ConfigurationError):
    """Two different types map to the same schema name."""

    def __init__(self, name: str, first: str, second: str):
        self.name = name
        self.identities = (first, second)
        super().__init__(
            f"Schema name {name!r} is claimed by both {first!r} and {second!r}. "
            "Rename one of the types or narrow the discovery patterns."
        )


class CatalogError(AsyncContractError):
    """A producer module or type catalog file could not be loaded."""

    pass


class DocumentError(AsyncContractError):
    """
    A document could not be read, parsed or turned into contracts.

    Carries the offending file so callers can report it.
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        if path is not None:
            message = f"{message} (file: {path})"
        super().__init__(message)


class CodeGenerationError(AsyncContractError):
    """The code generation library failed on a schema."""

    def __init__(self, type_name: str, reason: str):
        self.type_name = type_name
        super().__init__(f"Code generation failed for {type_name!r}: {reason}")


__all__ = [
    "AsyncContractError",
    "ConfigurationError",
    "SchemaCollisionError",
    "CatalogError",
    "DocumentError",
    "CodeGenerationError",
]
