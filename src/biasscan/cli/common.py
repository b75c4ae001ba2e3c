"""Helpers shared by CLI commands."""

from __future__ import annotations

import click

from biasscan.config import BiasScanConfig
from biasscan.errors import SettingsError


def load_config(ctx: click.Context) -> BiasScanConfig:
    """Build the config from the global --settings option, reporting bad input."""
    settings_path = (ctx.obj or {}).get("settings_path")
    try:
        config = BiasScanConfig.load(settings_path)
    except SettingsError as e:
        raise click.ClickException(f"Invalid settings: {e}") from e
    config.verbose = bool((ctx.obj or {}).get("verbose"))
    return config
