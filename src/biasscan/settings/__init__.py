"""Scan settings — biased terms, defaults and YAML loading."""

from biasscan.settings.defaults import DEFAULT_SETTINGS, DEFAULT_TERMS
from biasscan.settings.models import BiasedTerm, Category, ScanSettings, Severity

__all__ = [
    "DEFAULT_SETTINGS",
    "DEFAULT_TERMS",
    "BiasedTerm",
    "Category",
    "ScanSettings",
    "Severity",
]
