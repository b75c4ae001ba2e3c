"""CLI command: biasscan terms — list the active biased-term list."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from biasscan.cli.common import load_config
from biasscan.settings.models import Severity

console = Console()

SEVERITY_COLORS = {
    Severity.LOW: "blue",
    Severity.MEDIUM: "yellow",
    Severity.HIGH: "red",
}


@click.command()
@click.pass_context
def terms(ctx: click.Context) -> None:
    """List the biased terms the scanner will look for."""
    config = load_config(ctx)
    settings = config.settings

    table = Table(title="Biased terms", show_lines=False)
    table.add_column("ID", style="dim")
    table.add_column("Term", style="bold")
    table.add_column("Category")
    table.add_column("Severity")
    table.add_column("Suggestions")

    for term in settings.biased_terms:
        color = SEVERITY_COLORS.get(term.severity, "white")
        table.add_row(
            term.id,
            term.term,
            term.category.value,
            f"[{color}]{term.severity.value}[/{color}]",
            ", ".join(term.suggestions),
        )

    console.print(table)
    mode = "case-sensitive" if settings.case_sensitive else "case-insensitive"
    console.print(
        f"{len(settings.biased_terms)} terms, {mode}, "
        f"{settings.time_per_fix}s per fix"
    )
