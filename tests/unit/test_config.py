"""Tests for environment / XDG configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from biasscan.config import BiasScanConfig
from biasscan.errors import SettingsError
from biasscan.scanner.engine import DEFAULT_MAX_FILE_SIZE
from biasscan.settings.defaults import DEFAULT_SETTINGS


def test_defaults_without_settings_file(tmp_path: Path):
    config = BiasScanConfig.load()
    assert config.config_dir == tmp_path / "xdg-config" / "biasscan"
    assert config.settings_path is None
    assert config.settings == DEFAULT_SETTINGS
    assert config.max_file_size == DEFAULT_MAX_FILE_SIZE


def test_xdg_settings_file_is_picked_up(tmp_path: Path):
    config_dir = tmp_path / "xdg-config" / "biasscan"
    config_dir.mkdir(parents=True)
    (config_dir / "settings.yaml").write_text("time_per_fix: 10\n")

    config = BiasScanConfig.load()

    assert config.settings_path == config_dir / "settings.yaml"
    assert config.settings.time_per_fix == 10


def test_explicit_settings_path(custom_terms_path: Path):
    config = BiasScanConfig.load(custom_terms_path)
    assert config.settings_path == custom_terms_path
    assert len(config.settings.biased_terms) == 14


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, custom_terms_path: Path):
    monkeypatch.setenv("BIASSCAN_TIME_PER_FIX", "99")
    monkeypatch.setenv("BIASSCAN_CASE_SENSITIVE", "yes")
    monkeypatch.setenv("BIASSCAN_MAX_FILE_SIZE", "2048")

    config = BiasScanConfig.load(custom_terms_path)

    assert config.settings.time_per_fix == 99
    assert config.settings.case_sensitive
    assert config.max_file_size == 2048
    # Terms still come from the file
    assert len(config.settings.biased_terms) == 14


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("BIASSCAN_TIME_PER_FIX", "soon"),
        ("BIASSCAN_TIME_PER_FIX", "-1"),
        ("BIASSCAN_CASE_SENSITIVE", "sometimes"),
        ("BIASSCAN_MAX_FILE_SIZE", "1MB"),
    ],
)
def test_invalid_env(monkeypatch: pytest.MonkeyPatch, name: str, value: str):
    monkeypatch.setenv(name, value)
    with pytest.raises(SettingsError):
        BiasScanConfig.load()
