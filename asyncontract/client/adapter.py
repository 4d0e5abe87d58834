# asyncontract/client/adapter.py
"""
Adapter between document schemas and datamodel-code-generator.

The conversion path:

    SchemaNode -> plain JSON Schema text -> JsonSchemaParser (library model)
               -> generated module text -> ast -> (imports, one class body)

The library writes a complete module per call. Only the body of the requested
class is kept; its import statements are returned separately so the emitter
owns the import block of every generated file.

References to other document schemas ("#/components/schemas/X") are rewritten
to local definitions backed by empty placeholders, so the library emits the
type name in annotations without generating the referenced type itself.
"""

from __future__ import annotations

import ast
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from datamodel_code_generator import DataModelType
from datamodel_code_generator.format import DateClassType, DatetimeClassType, PythonVersion
from datamodel_code_generator.model import get_data_model_types
from datamodel_code_generator.parser.jsonschema import JsonSchemaParser

from asyncontract.client.settings import ClassStyle, ContainerStyle, ContractGeneratorSettings
from asyncontract.core.exceptions import CodeGenerationError
from asyncontract.logging.logger import get_logger
from asyncontract.logging.tags import EMITTER
from asyncontract.schema.nodes import SCHEMA_REF_PREFIX, SchemaNode, to_json_schema

logger = get_logger(__name__)

DEFINITIONS_PREFIX = "#/definitions/"


@dataclass
class AdaptedType:
    """One class body plus the imports the library needed for it."""

    name: str
    body: str
    from_imports: Dict[str, List[str]] = field(default_factory=dict)
    imports: List[str] = field(default_factory=list)
    placeholder: bool = False


def placeholder_body(type_name: str, frozen: bool = False) -> str:
    if frozen:
        return f"class {type_name}(BaseModel):\n    model_config = ConfigDict(frozen=True)"
    return f"class {type_name}(BaseModel):\n    pass"


def placeholder_type(type_name: str, frozen: bool = False) -> AdaptedType:
    """Empty stand-in class in the requested style."""
    return AdaptedType(
        name=type_name,
        body=placeholder_body(type_name, frozen),
        from_imports={"pydantic": ["BaseModel", "ConfigDict"]} if frozen else {},
        placeholder=True,
    )


# =============================================================================
# Schema conversion
# =============================================================================


def to_library_schema(type_name: str, node: SchemaNode) -> Dict[str, Any]:
    """
    Plain JSON Schema for one type, self-contained for the library.

    Extension keys are dropped from the root; every referenced schema becomes
    an empty local definition.
    """
    schema = {k: v for k, v in to_json_schema(node).items() if not k.startswith("x-")}
    referenced: List[str] = []

    def rewrite(value: Any) -> Any:
        if isinstance(value, dict):
            out = {}
            for key, item in value.items():
                if key == "$ref" and isinstance(item, str) and item.startswith(SCHEMA_REF_PREFIX):
                    target = item[len(SCHEMA_REF_PREFIX):]
                    if target == type_name:
                        out[key] = "#"
                    else:
                        if target not in referenced:
                            referenced.append(target)
                        out[key] = f"{DEFINITIONS_PREFIX}{target}"
                else:
                    out[key] = rewrite(item)
            return out
        if isinstance(value, list):
            return [rewrite(item) for item in value]
        return value

    schema = rewrite(schema)
    schema.setdefault("title", type_name)
    if referenced:
        schema["definitions"] = {
            name: {"type": "object", "title": name, "properties": {}} for name in referenced
        }
    return schema


# =============================================================================
# Library invocation
# =============================================================================


class CodeGeneratorAdapter:
    """
    Generates pydantic v2 source for one schema at a time.

    Args:
        settings: Class style, annotation and type-mapping options
    """

    def __init__(self, settings: ContractGeneratorSettings | None = None):
        self.settings = settings or ContractGeneratorSettings()
        self._model_types = get_data_model_types(
            DataModelType.PydanticV2BaseModel,
            target_python_version=self._python_version,
        )

    @property
    def _python_version(self) -> PythonVersion:
        return PythonVersion(self.settings.python_version)

    def generate_module(self, type_name: str, node: SchemaNode) -> str:
        """
        Run the library on one schema and return the full module text.

        Raises:
            CodeGenerationError: If the library rejects the schema
        """
        s = self.settings
        source = json.dumps(to_library_schema(type_name, node))

        try:
            parser = JsonSchemaParser(
                source,
                data_model_type=self._model_types.data_model,
                data_model_root_type=self._model_types.root_model,
                data_model_field_type=self._model_types.field_model,
                data_type_manager_type=self._model_types.data_type_manager,
                dump_resolve_reference_action=self._model_types.dump_resolve_reference_action,
                target_python_version=self._python_version,
                target_datetime_class=DatetimeClassType(s.datetime_class),
                target_date_class=DateClassType(s.date_class),
                class_name=type_name,
                snake_case_field=True,
                use_schema_description=True,
                use_standard_collections=s.container_style is ContainerStyle.STANDARD,
                use_generic_container_types=s.container_style is ContainerStyle.ABSTRACT,
                use_union_operator=True,
                use_annotated=s.generate_data_annotations,
                field_constraints=s.generate_data_annotations,
                strict_nullable=s.generate_nullable_reference_types,
                enable_faux_immutability=s.class_style is ClassStyle.VALUE,
            )
            result = parser.parse()
        except Exception as e:
            raise CodeGenerationError(type_name, f"{type(e).__name__}: {e}") from e

        if not isinstance(result, str):
            raise CodeGenerationError(type_name, "library produced a multi-module result")
        return result

    def adapt(self, type_name: str, node: SchemaNode) -> AdaptedType:
        """Generate one type and strip it down to its class body."""
        frozen = self.settings.class_style is ClassStyle.VALUE
        return extract_type(self.generate_module(type_name, node), type_name, frozen)


# =============================================================================
# Extraction
# =============================================================================


def extract_type(module_source: str, type_name: str, frozen: bool = False) -> AdaptedType:
    """
    Pull one class definition (decorators included) and all import statements
    out of a generated module.

    Falls back to an empty placeholder class when the module does not parse or
    holds no class of that name; frozen selects the value-style placeholder.
    """
    try:
        tree = ast.parse(module_source)
    except SyntaxError as e:
        logger.warning(f"{EMITTER} Unparseable output for {type_name}: {e}")
        return placeholder_type(type_name, frozen)

    adapted = AdaptedType(name=type_name, body="")
    lines = module_source.splitlines()

    for node in tree.body:
        if isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            if node.module == "__future__":
                continue
            names = adapted.from_imports.setdefault(node.module, [])
            for alias in node.names:
                text = alias.name if alias.asname is None else f"{alias.name} as {alias.asname}"
                if text not in names:
                    names.append(text)
        elif isinstance(node, ast.Import):
            for alias in node.names:
                text = alias.name if alias.asname is None else f"{alias.name} as {alias.asname}"
                if text not in adapted.imports:
                    adapted.imports.append(text)
        elif isinstance(node, ast.ClassDef) and node.name == type_name and not adapted.body:
            start = min([d.lineno for d in node.decorator_list] + [node.lineno])
            adapted.body = "\n".join(lines[start - 1 : node.end_lineno]).rstrip()

    if not adapted.body:
        logger.warning(f"{EMITTER} No class {type_name!r} in generated output; using placeholder")
        return placeholder_type(type_name, frozen)

    return adapted


__all__ = [
    "AdaptedType",
    "CodeGeneratorAdapter",
    "extract_type",
    "placeholder_body",
    "placeholder_type",
    "to_library_schema",
]
