# asyncontract/cli/commands/catalog.py
"""
Static catalog command.

Usage:
    asyncontract catalog shop.contracts -o build/shop.catalog.yaml
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from asyncontract.catalog.files import CATALOG_SUFFIXES, is_catalog_path, save_catalog
from asyncontract.catalog.introspect import build_catalog
from asyncontract.cli.ui import ui
from asyncontract.core.exceptions import AsyncContractError
from asyncontract.logging.logger import get_logger
from asyncontract.logging.tags import CLI

logger = get_logger(__name__)


def command(module: str, output: Path, name: Optional[str] = None) -> None:
    """Describe every type of a module and write it as a catalog file."""
    ui.header("asyncontract catalog", module)

    if not is_catalog_path(output):
        ui.error(f"Unsupported catalog file {output}; use one of {', '.join(CATALOG_SUFFIXES)}")
        raise typer.Exit(1)

    try:
        catalog = build_catalog(module, name=name)
        path = save_catalog(catalog, output)
    except AsyncContractError as e:
        logger.debug(f"{CLI} catalog failed", exc_info=True)
        ui.error(str(e))
        raise typer.Exit(1)

    scanned = len(catalog.scanned())
    ui.success(f"Wrote {scanned} types ({len(catalog) - scanned} referenced) to {path}")
