# asyncontract/document/io.py
"""
Read and write documents in either dialect (YAML or JSON).

Both dialects carry the same model; output is deterministic so that
re-running a build produces byte-identical files.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from asyncontract.core.exceptions import DocumentError
from asyncontract.document.models import AsyncApiDocument
from asyncontract.logging.logger import get_logger
from asyncontract.logging.tags import DOCUMENT

logger = get_logger(__name__)


class DocumentFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"

    @property
    def suffix(self) -> str:
        return f".{self.value}"


def format_for_path(path: Union[str, Path]) -> DocumentFormat:
    """JSON for .json files, YAML for everything else."""
    return DocumentFormat.JSON if Path(path).suffix.lower() == ".json" else DocumentFormat.YAML


def dumps_document(document: AsyncApiDocument, fmt: DocumentFormat = DocumentFormat.YAML) -> str:
    payload = document.to_dict()
    if fmt is DocumentFormat.JSON:
        return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True, default_flow_style=False)


def write_document(
    document: AsyncApiDocument,
    path: Union[str, Path],
    fmt: Optional[DocumentFormat] = None,
) -> Path:
    """
    Write a document, creating parent directories as needed.

    Args:
        document: Document to write
        path: Output file
        fmt: Dialect; inferred from the file suffix when omitted
    """
    p = Path(path)
    fmt = fmt or format_for_path(p)

    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(dumps_document(document, fmt), encoding="utf-8")

    logger.info(f"{DOCUMENT} Wrote {fmt.value} document to {p}")
    return p


def read_document(path: Union[str, Path]) -> AsyncApiDocument:
    """
    Read and validate a document.

    Raises:
        DocumentError: If the file cannot be read, parsed or validated
    """
    p = Path(path)

    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentError(f"Cannot read document: {e}", path=p) from e

    try:
        if format_for_path(p) is DocumentFormat.JSON:
            raw = json.loads(text)
        else:
            raw = yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as e:
        raise DocumentError(f"Document is not valid {format_for_path(p).value}: {e}", path=p) from e

    if not isinstance(raw, dict):
        raise DocumentError("Document root must be a mapping", path=p)

    try:
        return AsyncApiDocument.model_validate(raw)
    except ValidationError as e:
        raise DocumentError(f"Document does not match the AsyncAPI model: {e}", path=p) from e


__all__ = ["DocumentFormat", "format_for_path", "dumps_document", "write_document", "read_document"]
