# asyncontract/cli/commands/contracts.py
"""
Consumer command: AsyncAPI documents -> pydantic contract modules.

Usage:
    asyncontract contracts specs/shop.yaml -o src -r shop.shared --class-style value

Values missing on the command line come from asyncontract.yaml (client section).
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from asyncontract.cli.ui import ui
from asyncontract.client.settings import ClassStyle
from asyncontract.config.loader import load_project_config
from asyncontract.core.exceptions import AsyncContractError
from asyncontract.logging.logger import get_logger
from asyncontract.logging.tags import CLI
from asyncontract.tasks.generate_contracts import generate_contracts

logger = get_logger(__name__)


def command(
    documents: List[Path],
    output_dir: Optional[Path],
    references: List[str],
    class_style: Optional[str],
    no_annotations: bool,
    config: Optional[Path],
) -> None:
    """Run the consumer task with CLI flags layered over the project config."""
    try:
        client = load_project_config(config).client
    except AsyncContractError as e:
        ui.error(str(e))
        raise typer.Exit(1)

    overrides = {}
    if class_style:
        try:
            overrides["class_style"] = ClassStyle(class_style.strip().lower())
        except ValueError:
            ui.error(f"Unknown class style {class_style!r}; use model or value")
            raise typer.Exit(1)
    if no_annotations:
        overrides["generate_data_annotations"] = False

    settings = client.generator_settings().model_copy(update=overrides)
    documents = documents or [Path(d) for d in client.documents]
    references = references or list(client.references)
    out_dir = output_dir or Path(client.output_dir)

    if not documents:
        ui.warning("No AsyncAPI documents specified; nothing generated")
        return

    ui.header("asyncontract contracts", f"{len(documents)} document(s) -> {out_dir}")

    try:
        result = generate_contracts(
            documents,
            out_dir,
            references=references,
            settings=settings,
        )
    except AsyncContractError as e:
        logger.debug(f"{CLI} contracts failed", exc_info=True)
        ui.error(str(e))
        raise typer.Exit(1)

    for skipped in result.skipped_documents:
        ui.warning(f"AsyncAPI document not found: {skipped}")
    ui.diagnostics(result.diagnostics)

    for path in result.files:
        ui.info(str(path))
    if result.external_types:
        ui.info(f"Skipped {len(result.external_types)} external type(s) provided by references")
    ui.success(f"Generated {len(result.generated_types)} type(s) in {len(result.files)} file(s)")
