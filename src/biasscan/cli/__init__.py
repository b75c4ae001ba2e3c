"""CLI entry point — Click group with global options."""

from __future__ import annotations

import logging

import click

from biasscan import __version__


@click.group()
@click.version_option(version=__version__, prog_name="biasscan")
@click.option(
    "--settings",
    "-s",
    "settings_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a YAML settings / term-list file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.pass_context
def main(ctx: click.Context, settings_path: str | None, verbose: bool) -> None:
    """biasscan — find non-inclusive terms in source code."""
    ctx.ensure_object(dict)
    ctx.obj["settings_path"] = settings_path
    ctx.obj["verbose"] = verbose

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _register_commands() -> None:
    from biasscan.cli.scan import scan  # noqa: F811
    from biasscan.cli.terms import terms  # noqa: F811

    main.add_command(scan)
    main.add_command(terms)


_register_commands()
