# asyncontract/catalog/files.py
"""
Static catalog files.

A catalog file is the build-time snapshot of a module's types, so that
later steps (and consumers) never need to import the producer code.

    name: shop
    types:
      - name: OrderCreated
        namespace: shop.events
        fields:
          - name: order_id
            type: {kind: primitive, primitive: uuid}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from asyncontract.catalog.catalog import TypeCatalog
from asyncontract.catalog.types import TypeDescriptor
from asyncontract.core.exceptions import CatalogError

CATALOG_SUFFIXES = (".yaml", ".yml", ".json")


class CatalogFile(BaseModel):
    name: str
    types: List[TypeDescriptor] = Field(default_factory=list)


def is_catalog_path(path: Union[str, Path]) -> bool:
    return Path(path).suffix.lower() in CATALOG_SUFFIXES


def save_catalog(catalog: TypeCatalog, path: Union[str, Path]) -> Path:
    """Write a catalog as YAML or JSON, chosen by file suffix."""
    p = Path(path)
    payload = CatalogFile(name=catalog.name, types=list(catalog)).model_dump(
        mode="json", exclude_none=True
    )

    p.parent.mkdir(parents=True, exist_ok=True)
    if p.suffix.lower() == ".json":
        text = json.dumps(payload, indent=2) + "\n"
    else:
        text = yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)
    p.write_text(text, encoding="utf-8")
    return p


def load_catalog(path: Union[str, Path]) -> TypeCatalog:
    """
    Load a catalog file.

    Raises:
        CatalogError: If the file is missing, unparseable or invalid
    """
    p = Path(path)
    if not p.is_file():
        raise CatalogError(f"Catalog file not found: {p}")

    try:
        text = p.read_text(encoding="utf-8")
        raw = json.loads(text) if p.suffix.lower() == ".json" else yaml.safe_load(text)
        parsed = CatalogFile.model_validate(raw)
    except (OSError, ValueError, yaml.YAMLError, ValidationError) as e:
        raise CatalogError(f"Invalid catalog file {p}: {e}") from e

    catalog = TypeCatalog(name=parsed.name)
    for descriptor in parsed.types:
        catalog.register(descriptor)
    return catalog


__all__ = ["CATALOG_SUFFIXES", "CatalogFile", "is_catalog_path", "save_catalog", "load_catalog"]
