# asyncontract/cli/commands/spec.py
"""
Producer command: message types -> AsyncAPI document.

Usage:
    asyncontract spec -m shop.contracts -p "shop.contracts.events.**" \\
        -p "shop.contracts.commands.*=command" -o specs/shop.yaml

Values missing on the command line come from asyncontract.yaml (server section).
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from asyncontract.cli.ui import ui
from asyncontract.config.loader import load_project_config
from asyncontract.core.exceptions import AsyncContractError
from asyncontract.document.io import DocumentFormat, format_for_path
from asyncontract.logging.logger import get_logger
from asyncontract.logging.tags import CLI
from asyncontract.server.discovery import parse_pattern
from asyncontract.tasks.generate_spec import generate_spec

logger = get_logger(__name__)


def _resolve_format(fmt: Optional[str], output: Optional[Path], configured: DocumentFormat) -> DocumentFormat:
    if fmt:
        try:
            return DocumentFormat(fmt.strip().lower())
        except ValueError:
            ui.error(f"Unknown format {fmt!r}; use yaml or json")
            raise typer.Exit(1)
    if output is not None:
        return format_for_path(output)
    return configured


def command(
    module: Optional[str],
    catalog_file: Optional[Path],
    patterns: List[str],
    title: Optional[str],
    version: Optional[str],
    output: Optional[Path],
    fmt: Optional[str],
    config: Optional[Path],
) -> None:
    """Run the producer task with CLI flags layered over the project config."""
    try:
        server = load_project_config(config).server
    except AsyncContractError as e:
        ui.error(str(e))
        raise typer.Exit(1)

    if not module and not catalog_file:
        module = server.module
        catalog_file = Path(server.catalog) if server.catalog else None

    if not module and not catalog_file:
        ui.error("No producer given. Pass --module or --catalog (or set server.module in asyncontract.yaml).")
        raise typer.Exit(1)

    discovery_patterns = [parse_pattern(p) for p in patterns] if patterns else server.discovery_patterns()
    output = output or (Path(server.output) if server.output else None)
    document_format = _resolve_format(fmt, output, server.format)

    ui.header("asyncontract spec", module or str(catalog_file))

    try:
        result = generate_spec(
            discovery_patterns,
            module=module,
            catalog_path=catalog_file,
            title=title or server.title,
            version=version or server.version,
            output=output,
            fmt=document_format,
        )
    except AsyncContractError as e:
        logger.debug(f"{CLI} spec failed", exc_info=True)
        ui.error(str(e))
        raise typer.Exit(1)

    ui.diagnostics(result.diagnostics)

    if not result.written:
        if not discovery_patterns:
            ui.warning("No message type patterns specified; nothing written", "use --pattern")
        else:
            ui.warning("No message types matched the patterns; nothing written")
        return

    ui.table(["Type", "Kind"], [(t.identity, t.kind.value) for t in result.types])
    ui.success(f"Generated AsyncAPI specification: {result.path}")
