# asyncontract/cli/cli.py
"""
asyncontract CLI - Main application.

Commands:
    asyncontract catalog      Write a static type catalog for a module
    asyncontract spec         Generate an AsyncAPI document from message types
    asyncontract contracts    Generate pydantic contracts from AsyncAPI documents

NOTE: Commands use lazy loading - the pipeline is imported only when a command is invoked.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from asyncontract.logging.logger import configure_logging

app = typer.Typer(
    name="asyncontract",
    help="AsyncAPI contracts from Python message types, and back.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """AsyncAPI contracts from Python message types, and back."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


# =============================================================================
# LAZY COMMANDS
# =============================================================================


@app.command("catalog")
def catalog(
    module: str = typer.Argument(..., help="Importable module or package to describe."),
    output: Path = typer.Option(..., "--output", "-o", help="Catalog file (.yaml, .yml or .json)."),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Catalog name (default: module)."),
) -> None:
    """Write a static type catalog for a module."""
    from asyncontract.cli.commands import catalog as mod

    mod.command(module=module, output=output, name=name)


@app.command("spec")
def spec(
    module: Optional[str] = typer.Option(None, "--module", "-m", help="Importable producer module."),
    catalog_file: Optional[Path] = typer.Option(None, "--catalog", help="Static catalog file instead of a module."),
    patterns: Optional[List[str]] = typer.Option(
        None, "--pattern", "-p", help="PATTERN[=event|command]; repeatable."
    ),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Document title (default: module name)."),
    version: Optional[str] = typer.Option(None, "--version", help="Document version (default: 1.0.0)."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file."),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="yaml or json."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Project config file."),
) -> None:
    """Generate an AsyncAPI document from message types."""
    from asyncontract.cli.commands import spec as mod

    mod.command(
        module=module,
        catalog_file=catalog_file,
        patterns=patterns or [],
        title=title,
        version=version,
        output=output,
        fmt=fmt,
        config=config,
    )


@app.command("contracts")
def contracts(
    documents: Optional[List[Path]] = typer.Argument(None, help="AsyncAPI documents (default: from config)."),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Root directory for generated modules."),
    references: Optional[List[str]] = typer.Option(
        None, "--reference", "-r", help="Catalog file or module providing external types; repeatable."
    ),
    class_style: Optional[str] = typer.Option(None, "--class-style", help="model or value."),
    no_annotations: bool = typer.Option(False, "--no-annotations", help="Don't emit Annotated constraints."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Project config file."),
) -> None:
    """Generate pydantic contracts from AsyncAPI documents."""
    from asyncontract.cli.commands import contracts as mod

    mod.command(
        documents=documents or [],
        output_dir=output_dir,
        references=references or [],
        class_style=class_style,
        no_annotations=no_annotations,
        config=config,
    )


if __name__ == "__main__":
    app()
