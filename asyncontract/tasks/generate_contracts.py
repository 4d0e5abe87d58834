# asyncontract/tasks/generate_contracts.py
"""
Consumer build task: document files -> generated contract modules.

Documents are processed in order against one shared external type index.
A missing document is skipped with a warning. A document that cannot be
read or generated stops the batch with a DocumentError naming the file;
files written for earlier documents stay on disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Union

from asyncontract.client.emitter import ContractEmitter
from asyncontract.client.index import ExternalTypeIndex
from asyncontract.client.settings import ContractGeneratorSettings
from asyncontract.client.types import TypeInfo
from asyncontract.core.diagnostics import Diagnostic
from asyncontract.core.exceptions import CodeGenerationError, DocumentError
from asyncontract.document.io import read_document
from asyncontract.logging.logger import get_logger
from asyncontract.logging.tags import TASK

logger = get_logger(__name__)

PathLike = Union[str, Path]


@dataclass
class ContractsTaskResult:
    files: List[Path] = field(default_factory=list)
    generated_types: List[TypeInfo] = field(default_factory=list)
    external_types: List[TypeInfo] = field(default_factory=list)
    skipped_documents: List[Path] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    cancelled: bool = False


def generate_contracts(
    documents: Sequence[PathLike],
    output_dir: PathLike,
    *,
    references: Iterable[PathLike] = (),
    settings: Optional[ContractGeneratorSettings] = None,
    should_cancel: Optional[Callable[[], bool]] = None,
) -> ContractsTaskResult:
    """
    Generate contracts for each document.

    Args:
        documents: Document files, processed in order
        output_dir: Root directory for generated modules
        references: Catalog files or module names providing external types
        settings: Code style options
        should_cancel: Polled before each document; True stops the batch

    Raises:
        DocumentError: A document is malformed or its generation failed
    """
    result = ContractsTaskResult()

    if not documents:
        logger.info(f"{TASK} No AsyncAPI documents specified, skipping generation")
        return result

    out_root = Path(output_dir)
    out_root.mkdir(parents=True, exist_ok=True)

    index = ExternalTypeIndex()
    result.diagnostics.extend(index.load_modules(references))
    emitter = ContractEmitter(settings=settings, index=index)

    logger.info(f"{TASK} Generating contracts from {len(documents)} document(s)")

    for entry in documents:
        if should_cancel is not None and should_cancel():
            logger.warning(f"{TASK} Cancelled; remaining documents not processed")
            result.cancelled = True
            break

        path = Path(entry)
        if not path.is_file():
            logger.warning(f"{TASK} AsyncAPI document not found: {path}")
            result.skipped_documents.append(path)
            continue

        logger.debug(f"{TASK} Processing {path}")
        document = read_document(path)

        try:
            generation = emitter.generate(document)
        except CodeGenerationError as e:
            raise DocumentError(f"Error generating contracts: {e}", path=path) from e

        for source in generation.source_files:
            target = out_root / source.file_name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(source.content, encoding="utf-8")
            result.files.append(target)
            logger.debug(f"{TASK} Generated {source.file_name} ({len(source.types)} types)")

        if generation.external_types:
            logger.info(
                f"{TASK} Skipped {len(generation.external_types)} external type(s) "
                "already provided by references"
            )

        result.generated_types.extend(generation.generated_types)
        result.external_types.extend(generation.external_types)
        result.diagnostics.extend(generation.diagnostics)
        logger.info(f"{TASK} Generated {len(generation.generated_types)} type(s) from {path.name}")

    return result


__all__ = ["ContractsTaskResult", "generate_contracts"]
