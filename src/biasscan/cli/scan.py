"""CLI command: biasscan scan <paths> — find biased terms in source files."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from biasscan.cli.common import load_config
from biasscan.cli.terms import SEVERITY_COLORS
from biasscan.errors import SettingsError
from biasscan.export import EXPORTERS, default_export_filename
from biasscan.scanner.engine import ScanEngine
from biasscan.scanner.models import FileAnalysis, ScanResults

console = Console(stderr=True)

_SORT_KEYS = {
    "bias": lambda f: f.bias_percentage,
    "occurrences": lambda f: f.biased_elements,
    "elements": lambda f: f.total_elements,
    "time": lambda f: f.estimated_fix_time,
    "name": lambda f: f.name.lower(),
    "language": lambda f: f.language,
}

# Bias bands by percentage, upper bound inclusive
_BIAS_BANDS = {
    "high": lambda p: p > 10,
    "medium": lambda p: 5 < p <= 10,
    "low": lambda p: 0 < p <= 5,
    "none": lambda p: p == 0,
}


@click.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    "--case-sensitive/--ignore-case",
    default=None,
    help="Match terms case-sensitively (default: from settings).",
)
@click.option("--no-identifiers", is_flag=True, help="Skip identifiers.")
@click.option("--no-strings", is_flag=True, help="Skip string literals.")
@click.option("--no-comments", is_flag=True, help="Skip comments.")
@click.option(
    "--time-per-fix",
    type=click.IntRange(min=1),
    default=None,
    help="Estimated seconds to fix one occurrence.",
)
@click.option(
    "--exclude",
    "-e",
    multiple=True,
    help="File or directory names to exclude from the scan.",
)
@click.option("--language", "-l", help="Only show files detected as this language.")
@click.option(
    "--search",
    help="Only show files whose name or path contains this text (case-insensitive).",
)
@click.option(
    "--bias",
    "bias_band",
    type=click.Choice(sorted(_BIAS_BANDS)),
    help="Only show files in this bias band: high >10%, medium 5-10%, low 0-5%, none 0%.",
)
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice(sorted(_SORT_KEYS)),
    default="bias",
    show_default=True,
    help="Sort the results table by this column (descending, name ascending).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", *EXPORTERS]),
    default="table",
    show_default=True,
)
@click.option(
    "--output",
    "-o",
    type=click.Path(writable=True),
    help=(
        "Write the exported results to this file instead of stdout. "
        "An existing directory gets a dated file name."
    ),
)
@click.option("--details", is_flag=True, help="Show occurrences grouped by line.")
@click.pass_context
def scan(
    ctx: click.Context,
    paths: tuple[str, ...],
    case_sensitive: bool | None,
    no_identifiers: bool,
    no_strings: bool,
    no_comments: bool,
    time_per_fix: int | None,
    exclude: tuple[str, ...],
    language: str | None,
    search: str | None,
    bias_band: str | None,
    sort_by: str,
    output_format: str,
    output: str | None,
    details: bool,
) -> None:
    """Scan source files and directories for biased terms."""
    config = load_config(ctx)

    changes: dict = {}
    if case_sensitive is not None:
        changes["case_sensitive"] = case_sensitive
    if time_per_fix is not None:
        changes["time_per_fix"] = time_per_fix
    if no_identifiers:
        changes["include_identifiers"] = False
    if no_strings:
        changes["include_strings"] = False
    if no_comments:
        changes["include_comments"] = False
    try:
        settings = config.settings.replace(**changes)
    except SettingsError as e:
        raise click.BadParameter(str(e)) from e

    engine = ScanEngine(
        settings,
        max_file_size=config.max_file_size,
        exclude_patterns=list(exclude),
    )
    result = engine.scan(paths)

    if output_format != "table":
        text = EXPORTERS[output_format](result)
        if output:
            target = Path(output)
            if target.is_dir():
                target = target / default_export_filename(output_format)
            target.write_text(text + "\n", encoding="utf-8")
            console.print(
                f"Wrote {output_format} export to [cyan]{escape(str(target))}[/cyan]"
            )
        else:
            click.echo(text)
    else:
        files = _filter_and_sort(result, language, sort_by, search, bias_band)
        _print_table(files)
        if details:
            for analysis in files:
                _print_details(analysis)
        _print_summary(result)

    if result.total_occurrences > 0:
        sys.exit(1)


def _filter_and_sort(
    result: ScanResults,
    language: str | None,
    sort_by: str,
    search: str | None = None,
    bias_band: str | None = None,
) -> list[FileAnalysis]:
    files = list(result.files)
    if language:
        files = [f for f in files if f.language == language.lower()]
    if search:
        needle = search.lower()
        files = [
            f for f in files if needle in f.name.lower() or needle in f.path.lower()
        ]
    if bias_band:
        in_band = _BIAS_BANDS[bias_band]
        files = [f for f in files if in_band(f.bias_percentage)]
    # Names read best A→Z, every numeric column largest first
    descending = sort_by not in ("name", "language")
    return sorted(files, key=_SORT_KEYS[sort_by], reverse=descending)


def _print_table(files: list[FileAnalysis]) -> None:
    if not files:
        console.print("[yellow]No files match the current filters.[/yellow]")
        return

    table = Table(title="Bias scan", show_lines=False)
    table.add_column("File", style="cyan")
    table.add_column("Language")
    table.add_column("Elements", justify="right")
    table.add_column("Biased", justify="right")
    table.add_column("Bias %", justify="right")
    table.add_column("Fix time", justify="right")

    for f in files:
        biased = f"[red]{f.biased_elements}[/red]" if f.biased_elements else "0"
        name = escape(f.path)
        if f.has_error:
            name += " [red](error)[/red]"
        table.add_row(
            name,
            f.language,
            str(f.total_elements),
            biased,
            f"{f.bias_percentage:.1f}",
            format_duration(f.estimated_fix_time),
        )

    console.print(table)


def _print_details(analysis: FileAnalysis) -> None:
    if analysis.has_error:
        console.print(
            f"\n[bold]{escape(analysis.path)}[/bold]: [red]{escape(analysis.error)}[/red]"
        )
        return
    if not analysis.occurrences:
        return

    console.print(f"\n[bold]{escape(analysis.path)}[/bold]")
    for line, occurrences in analysis.occurrences_by_line().items():
        console.print(f"  [dim]{line:>5}[/dim]  {escape(occurrences[0].context)}")
        for occ in occurrences:
            term = occ.biased_term
            color = SEVERITY_COLORS.get(term.severity, "white")
            suggestions = ", ".join(term.suggestions) or "-"
            console.print(
                f"         [{color}]{term.term}[/{color}] "
                f"({term.category.value}, {occ.type.value}, col {occ.column}) "
                f"→ {suggestions}"
            )


def _print_summary(result: ScanResults) -> None:
    console.print(
        f"\nScanned {result.scanned_files}/{result.total_files} files "
        f"in {result.scan_duration / 1000:.2f}s"
    )
    if result.failed_files:
        console.print(f"[red]{len(result.failed_files)} file(s) failed to scan[/red]")
    console.print(f"Total occurrences: {result.total_occurrences}")
    console.print(
        f"Estimated fix time: {format_duration(result.estimated_total_time)}"
    )


def format_duration(seconds: int) -> str:
    """Render seconds as ``1h 2m 3s`` style text."""
    if seconds < 60:
        return f"{seconds}s"
    minutes, secs = divmod(seconds, 60)
    if minutes < 60:
        return f"{minutes}m {secs}s" if secs else f"{minutes}m"
    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes}m" if minutes else f"{hours}h"
