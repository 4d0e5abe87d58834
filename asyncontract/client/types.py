# asyncontract/client/types.py
"""
Result types for contract generation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from asyncontract.catalog.types import qualified_name
from asyncontract.core.diagnostics import Diagnostic


@dataclass(frozen=True, slots=True)
class TypeInfo:
    """A type named by a document, either generated here or provided externally."""

    type_name: str
    namespace: str = ""
    is_external: bool = False
    external_module: Optional[str] = None

    @property
    def full_name(self) -> str:
        return qualified_name(self.namespace, self.type_name)


@dataclass(slots=True)
class GeneratedSourceFile:
    """One generated module; holds every generated type of one namespace."""

    file_name: str
    namespace: str
    content: str
    types: List[TypeInfo] = field(default_factory=list)


@dataclass(slots=True)
class ContractGenerationResult:
    source_files: List[GeneratedSourceFile] = field(default_factory=list)
    external_types: List[TypeInfo] = field(default_factory=list)
    generated_types: List[TypeInfo] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.diagnostics)


__all__ = ["TypeInfo", "GeneratedSourceFile", "ContractGenerationResult"]
