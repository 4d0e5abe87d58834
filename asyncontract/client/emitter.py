# asyncontract/client/emitter.py
"""
Contract emitter: AsyncAPI document -> generated Python modules.

Every schema in components.schemas is either external (its fully-qualified
name is in the ExternalTypeIndex) or generated. Generated schemas are grouped
by their x-origin-namespace and each group becomes one module:

    {namespace path}/generated.py      e.g. shop/models/generated.py

The emitter owns every import block. The adapter hands back bare class bodies
plus the imports the library needed, and they are merged here with:
    - the base imports (BaseModel, Annotated when annotations are enabled)
    - the names this group references from other generated namespaces
    - every namespace that provides an external type

Two generated namespaces that reference each other would import each other
while half-initialized. Such imports are placed at the end of the module,
after its classes exist; pydantic resolves the postponed annotations when a
model is first used.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

from jinja2 import Template

from asyncontract import __version__
from asyncontract.catalog.types import qualified_name
from asyncontract.client.adapter import AdaptedType, CodeGeneratorAdapter
from asyncontract.client.index import ExternalTypeIndex
from asyncontract.client.settings import ContractGeneratorSettings
from asyncontract.client.types import ContractGenerationResult, GeneratedSourceFile, TypeInfo
from asyncontract.core.diagnostics import PLACEHOLDER_TYPE, Diagnostic
from asyncontract.core.exceptions import ConfigurationError
from asyncontract.document.models import AsyncApiDocument
from asyncontract.logging.logger import get_logger
from asyncontract.logging.tags import EMITTER
from asyncontract.schema.nodes import SchemaNode, iter_references, schema_from_json

logger = get_logger(__name__)

GENERATOR_NAME = "asyncontract.client"
DEFAULT_NAMESPACE = "generated_contracts"
GENERATED_MODULE = "generated"

MODULE_TEMPLATE = Template(
    """\
# <auto-generated>
#     This code was generated by {{ generator }} {{ version }}.
#     Do not modify this file directly.
# </auto-generated>

from __future__ import annotations

{% for line in import_lines %}
{{ line }}
{% endfor %}

__namespace__ = "{{ namespace }}"

__all__ = [
{% for name in type_names %}
    "{{ name }}",
{% endfor %}
]
{% for body in bodies %}


{{ body }}
{% endfor %}
{% if deferred_import_lines %}


{% for line in deferred_import_lines %}
{{ line }}  # noqa: E402
{% endfor %}
{% endif %}
""",
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)

SchemaGroup = List[Tuple[str, SchemaNode]]


def module_namespace(namespace: str) -> str:
    return namespace or DEFAULT_NAMESPACE


def generated_module_name(namespace: str) -> str:
    return f"{module_namespace(namespace)}.{GENERATED_MODULE}"


def generated_file_name(namespace: str) -> str:
    return f"{module_namespace(namespace).replace('.', '/')}/{GENERATED_MODULE}.py"


def namespace_dependencies(groups: Dict[str, SchemaGroup]) -> Dict[str, List[str]]:
    """
    For each group, the other groups its schemas reference, in group order.

    Examples:
        >>> from asyncontract.schema.nodes import ObjectSchema, ReferenceSchema
        >>> namespace_dependencies({
        ...     "shop.events": [("OrderCreated", ObjectSchema(properties={"order": ReferenceSchema(target="Order")}))],
        ...     "shop.models": [("Order", ObjectSchema())],
        ... })
        {'shop.events': ['shop.models'], 'shop.models': []}
    """
    owner = {name: namespace for namespace, members in groups.items() for name, _ in members}
    dependencies: Dict[str, List[str]] = {}

    for namespace, members in groups.items():
        used: Set[str] = set()
        for _, node in members:
            used.update(owner[target] for target in iter_references(node) if target in owner)
        used.discard(namespace)
        dependencies[namespace] = [other for other in groups if other in used]

    return dependencies


def _reaches(dependencies: Dict[str, List[str]], start: str, goal: str) -> bool:
    seen: Set[str] = set()
    stack = [start]
    while stack:
        current = stack.pop()
        if current == goal:
            return True
        if current in seen:
            continue
        seen.add(current)
        stack.extend(dependencies.get(current, []))
    return False


class ContractEmitter:
    """
    Turns one document into generated source files.

    Args:
        settings: Code style options (defaults apply when omitted)
        index: Types the consumer already has; empty when omitted
        adapter: Code generation adapter; built from settings when omitted
    """

    def __init__(
        self,
        settings: Optional[ContractGeneratorSettings] = None,
        index: Optional[ExternalTypeIndex] = None,
        adapter: Optional[CodeGeneratorAdapter] = None,
    ):
        self.settings = settings or ContractGeneratorSettings()
        self.index = index if index is not None else ExternalTypeIndex()
        self.adapter = adapter or CodeGeneratorAdapter(self.settings)

    def generate(self, document: Optional[AsyncApiDocument]) -> ContractGenerationResult:
        """
        Raises:
            ConfigurationError: If no document is given
            CodeGenerationError: If the library rejects a schema
        """
        if document is None:
            raise ConfigurationError("No document given")

        result = ContractGenerationResult()
        groups: Dict[str, SchemaGroup] = {}

        for name, entry in document.components.schemas.items():
            node = schema_from_json(entry.schema_)
            namespace = node.origin_namespace
            external = self.index.lookup(qualified_name(namespace, name))
            if external is not None:
                result.external_types.append(external)
            else:
                groups.setdefault(namespace, []).append((name, node))

        dependencies = namespace_dependencies(groups)
        for namespace, members in groups.items():
            source = self._emit_group(namespace, members, groups, dependencies, result)
            result.source_files.append(source)
            result.generated_types.extend(source.types)

        logger.info(
            f"{EMITTER} {document.info.title}: {len(result.generated_types)} generated, "
            f"{len(result.external_types)} external, {len(result.source_files)} files"
        )
        return result

    def _emit_group(
        self,
        namespace: str,
        members: SchemaGroup,
        groups: Dict[str, SchemaGroup],
        dependencies: Dict[str, List[str]],
        result: ContractGenerationResult,
    ) -> GeneratedSourceFile:
        adapted: List[AdaptedType] = []
        for name, node in members:
            item = self.adapter.adapt(name, node)
            if item.placeholder:
                result.diagnostics.append(
                    Diagnostic.warning(
                        PLACEHOLDER_TYPE,
                        "code generator output had no matching class; emitted an empty placeholder",
                        qualified_name(namespace, name),
                    )
                )
            adapted.append(item)

        cross, deferred = self._cross_namespace_imports(namespace, members, groups, dependencies)
        if deferred:
            logger.debug(f"{EMITTER} {generated_file_name(namespace)}: deferred imports for mutual references")

        target = module_namespace(namespace)
        content = MODULE_TEMPLATE.render(
            generator=GENERATOR_NAME,
            version=__version__,
            import_lines=self._import_lines(adapted, result.external_types) + cross,
            deferred_import_lines=deferred,
            namespace=target,
            type_names=[item.name for item in adapted],
            bodies=[item.body for item in adapted],
        )

        logger.debug(f"{EMITTER} {generated_file_name(namespace)}: {len(adapted)} types")
        return GeneratedSourceFile(
            file_name=generated_file_name(namespace),
            namespace=target,
            content=content,
            types=[TypeInfo(type_name=item.name, namespace=target) for item in adapted],
        )

    def _import_lines(self, adapted: List[AdaptedType], external_types: List[TypeInfo]) -> List[str]:
        library: Dict[str, List[str]] = {"pydantic": ["BaseModel"]}
        if self.settings.generate_data_annotations:
            library["typing"] = ["Annotated"]
        plain: List[str] = []

        for item in adapted:
            for module, names in item.from_imports.items():
                merged = library.setdefault(module, [])
                merged.extend(n for n in names if n not in merged)
            plain.extend(i for i in item.imports if i not in plain)

        lines = [f"import {name}" for name in sorted(plain)]
        lines += [f"from {module} import {', '.join(sorted(library[module]))}" for module in sorted(library)]

        external: Dict[str, List[str]] = {}
        for info in external_types:
            if info.namespace:
                external.setdefault(info.namespace, []).append(info.type_name)
        for module, names in external.items():
            lines.append(f"from {module} import {', '.join(names)}")

        return lines

    def _cross_namespace_imports(
        self,
        namespace: str,
        members: SchemaGroup,
        groups: Dict[str, SchemaGroup],
        dependencies: Dict[str, List[str]],
    ) -> Tuple[List[str], List[str]]:
        """Imports of referenced names from other generated modules: (top, deferred)."""
        referenced: Set[str] = set()
        for _, node in members:
            referenced.update(iter_references(node))

        top: List[str] = []
        deferred: List[str] = []
        for other in dependencies[namespace]:
            names = ", ".join(name for name, _ in groups[other] if name in referenced)
            line = f"from {generated_module_name(other)} import {names}"
            if _reaches(dependencies, other, namespace):
                deferred.append(line)
            else:
                top.append(line)

        return top, deferred


def generate_contracts_for(
    document: AsyncApiDocument,
    settings: Optional[ContractGeneratorSettings] = None,
    index: Optional[ExternalTypeIndex] = None,
) -> ContractGenerationResult:
    """Convenience wrapper around ContractEmitter for one-off use."""
    return ContractEmitter(settings=settings, index=index).generate(document)


__all__ = [
    "ContractEmitter",
    "generate_contracts_for",
    "generated_file_name",
    "generated_module_name",
    "module_namespace",
    "namespace_dependencies",
    "DEFAULT_NAMESPACE",
    "GENERATOR_NAME",
]
