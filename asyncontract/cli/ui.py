# asyncontract/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from asyncontract.cli.ui import ui

    ui.header("asyncontract spec", "shop.contracts")
    ui.success("Wrote shop.yaml")
    ui.diagnostics(result.diagnostics)
"""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from asyncontract.core.diagnostics import Diagnostic, Severity

console = Console()


class UI:
    """Consistent styling for command output. Dynamic text is always escaped."""

    def print(self, msg: str, style: str = "") -> None:
        if style:
            console.print(f"[{style}]{escape(msg)}[/{style}]")
        else:
            console.print(escape(msg))

    def header(self, title: str, subtitle: str = "") -> None:
        content = f"[bold]{escape(title)}[/bold]"
        if subtitle:
            content += f"\n[dim]{escape(subtitle)}[/dim]"
        console.print(Panel.fit(content, border_style="blue"))

    def section(self, title: str) -> None:
        console.print(f"\n[bold cyan]{escape(title)}[/bold cyan]")

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {escape(msg)}")

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {escape(msg)}")

    def warning(self, msg: str, detail: str = "") -> None:
        detail_str = f" [dim]({escape(detail)})[/dim]" if detail else ""
        console.print(f"[yellow]⚠[/yellow] {escape(msg)}{detail_str}")

    def info(self, msg: str) -> None:
        console.print(f"[dim]{escape(msg)}[/dim]")

    def table(self, columns: Sequence[str], rows: Iterable[Sequence[str]]) -> None:
        table = Table(show_header=True, header_style="bold")
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*(escape(str(cell)) for cell in row))
        console.print(table)

    def diagnostics(self, diagnostics: Iterable[Diagnostic]) -> None:
        """One line per diagnostic; info entries are dimmed."""
        for d in diagnostics:
            subject = f"{d.subject}: " if d.subject else ""
            if d.severity is Severity.INFO:
                self.info(f"{subject}{d.message}")
            else:
                self.warning(f"{subject}{d.message}", d.code)


ui = UI()

__all__ = ["UI", "ui", "console"]
