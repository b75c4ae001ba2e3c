"""Load ScanSettings from YAML term-list files."""

from __future__ import annotations

from pathlib import Path

import yaml

from biasscan.errors import SettingsError
from biasscan.settings.defaults import DEFAULT_SETTINGS, DEFAULT_TERMS
from biasscan.settings.models import BiasedTerm, Category, ScanSettings, Severity

_BOOL_FIELDS = (
    "include_identifiers",
    "include_strings",
    "include_comments",
    "case_sensitive",
)


def load_settings(path: str | Path, base: ScanSettings | None = None) -> ScanSettings:
    """Load settings from a YAML file path."""
    text = Path(path).read_text(encoding="utf-8")
    return load_settings_from_string(text, base=base)


def load_settings_from_string(
    text: str, base: ScanSettings | None = None
) -> ScanSettings:
    """Parse a YAML string into ScanSettings, layered over ``base``."""
    data = yaml.safe_load(text)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsError("Settings YAML must be a mapping")
    return _build_settings(data, base or DEFAULT_SETTINGS)


def _build_settings(data: dict, base: ScanSettings) -> ScanSettings:
    changes: dict = {}

    if "time_per_fix" in data:
        changes["time_per_fix"] = data["time_per_fix"]

    for name in _BOOL_FIELDS:
        if name in data:
            value = data[name]
            if not isinstance(value, bool):
                raise SettingsError(f"{name} must be true or false, got {value!r}")
            changes[name] = value

    if "terms" in data or "include_defaults" in data:
        include_defaults = data.get("include_defaults", True)
        # Built-in terms first so that first-match order is stable
        terms = list(DEFAULT_TERMS) if include_defaults else []
        terms.extend(_parse_terms(data.get("terms") or [], start=len(terms)))
        changes["biased_terms"] = terms

    return base.replace(**changes)


def _parse_terms(terms_data: list, start: int = 0) -> list[BiasedTerm]:
    if not isinstance(terms_data, list):
        raise SettingsError("terms must be a list")

    terms: list[BiasedTerm] = []
    for index, t in enumerate(terms_data, start=start + 1):
        if isinstance(t, str):
            t = {"term": t}
        if not isinstance(t, dict):
            raise SettingsError(f"Invalid term entry: {t!r}")
        if "term" not in t:
            raise SettingsError(f"Term entry is missing 'term': {t!r}")
        if not isinstance(t["term"], str):
            raise SettingsError(f"Term must be a string, got {t['term']!r}")

        suggestions = t.get("suggestions")
        if suggestions is None:
            suggestions = ()
        elif isinstance(suggestions, str):
            suggestions = (suggestions,)
        if not isinstance(suggestions, (list, tuple)):
            raise SettingsError(
                f"suggestions must be a string or a list, got {suggestions!r}"
            )

        try:
            category = Category(t.get("category", "other"))
            severity = Severity(t.get("severity", "medium"))
        except ValueError as e:
            raise SettingsError(str(e)) from e

        terms.append(
            BiasedTerm(
                id=str(t.get("id", f"custom-{index}")),
                term=t["term"].strip(),
                category=category,
                severity=severity,
                suggestions=tuple(str(s) for s in suggestions),
            )
        )
    return terms
