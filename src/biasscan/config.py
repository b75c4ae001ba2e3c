"""Global configuration — XDG paths, env vars, defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from biasscan.errors import SettingsError
from biasscan.scanner.engine import DEFAULT_MAX_FILE_SIZE
from biasscan.settings.defaults import DEFAULT_SETTINGS
from biasscan.settings.loader import load_settings
from biasscan.settings.models import ScanSettings

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _default_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "biasscan"
    return Path.home() / ".config" / "biasscan"


@dataclass
class BiasScanConfig:
    """Application-wide configuration."""

    config_dir: Path = field(default_factory=_default_config_dir)
    settings_path: Path | None = None
    settings: ScanSettings = DEFAULT_SETTINGS
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    verbose: bool = False

    @classmethod
    def load(cls, settings_path: str | Path | None = None) -> BiasScanConfig:
        """Load config from an explicit or XDG settings file plus env vars."""
        config = cls()

        if settings_path is not None:
            config.settings_path = Path(settings_path)
        else:
            candidate = config.config_dir / "settings.yaml"
            if candidate.is_file():
                config.settings_path = candidate

        if config.settings_path is not None:
            logger.debug("Loading settings from %s", config.settings_path)
            config.settings = load_settings(config.settings_path)

        env_time = os.environ.get("BIASSCAN_TIME_PER_FIX")
        if env_time:
            config.settings = config.settings.replace(
                time_per_fix=_parse_int("BIASSCAN_TIME_PER_FIX", env_time)
            )

        env_case = os.environ.get("BIASSCAN_CASE_SENSITIVE")
        if env_case:
            config.settings = config.settings.replace(
                case_sensitive=_parse_bool("BIASSCAN_CASE_SENSITIVE", env_case)
            )

        env_size = os.environ.get("BIASSCAN_MAX_FILE_SIZE")
        if env_size:
            config.max_file_size = _parse_int("BIASSCAN_MAX_FILE_SIZE", env_size)

        return config


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise SettingsError(f"{name} must be an integer, got {value!r}") from e


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise SettingsError(f"{name} must be a boolean, got {value!r}")
