"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from biasscan.scanner.engine import ScanEngine
from biasscan.settings.defaults import DEFAULT_SETTINGS
from biasscan.settings.models import BiasedTerm, Category, ScanSettings, Severity


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def custom_terms_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "custom_terms.yaml"


@pytest.fixture
def replace_terms_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "replace_terms.yaml"


@pytest.fixture
def sample_py(fixtures_dir: Path) -> str:
    return (fixtures_dir / "sample.py").read_text(encoding="utf-8")


@pytest.fixture
def sample_ts(fixtures_dir: Path) -> str:
    return (fixtures_dir / "sample.ts").read_text(encoding="utf-8")


@pytest.fixture
def engine() -> ScanEngine:
    return ScanEngine(DEFAULT_SETTINGS)


@pytest.fixture
def case_sensitive_settings() -> ScanSettings:
    return ScanSettings(
        biased_terms=(
            BiasedTerm(id="1", term="Man", category=Category.GENDER),
            BiasedTerm(
                id="2",
                term="MASTER",
                category=Category.HIERARCHY,
                severity=Severity.HIGH,
            ),
        ),
        case_sensitive=True,
    )


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    for name in (
        "BIASSCAN_TIME_PER_FIX",
        "BIASSCAN_CASE_SENSITIVE",
        "BIASSCAN_MAX_FILE_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)
