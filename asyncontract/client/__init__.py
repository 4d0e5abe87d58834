# asyncontract/client/__init__.py
"""
Consumer side: AsyncAPI document -> generated pydantic contracts.

Usage:
    from asyncontract.client import ContractEmitter, ExternalTypeIndex

    index = ExternalTypeIndex()
    index.load_modules(["shop.shared"])
    result = ContractEmitter(index=index).generate(document)
    for source in result.source_files:
        print(source.file_name)
"""

from asyncontract.client.adapter import AdaptedType, CodeGeneratorAdapter, extract_type
from asyncontract.client.emitter import (
    DEFAULT_NAMESPACE,
    ContractEmitter,
    generate_contracts_for,
    generated_file_name,
    generated_module_name,
)
from asyncontract.client.index import ExternalTypeIndex
from asyncontract.client.settings import ClassStyle, ContainerStyle, ContractGeneratorSettings
from asyncontract.client.types import ContractGenerationResult, GeneratedSourceFile, TypeInfo

__all__ = [
    "AdaptedType",
    "CodeGeneratorAdapter",
    "extract_type",
    "DEFAULT_NAMESPACE",
    "ContractEmitter",
    "generate_contracts_for",
    "generated_file_name",
    "generated_module_name",
    "ExternalTypeIndex",
    "ClassStyle",
    "ContainerStyle",
    "ContractGeneratorSettings",
    "ContractGenerationResult",
    "GeneratedSourceFile",
    "TypeInfo",
]
