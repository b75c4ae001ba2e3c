"""Bias scanning pipeline — tokenizers, matcher and batch engine."""

from biasscan.scanner.engine import ScanEngine
from biasscan.scanner.matcher import BiasMatcher
from biasscan.scanner.models import (
    CodeOccurrence,
    FileAnalysis,
    OccurrenceType,
    ParsedUnit,
    ScanResults,
    ScanState,
    SourceFile,
)
from biasscan.scanner.registry import ParserRegistry

__all__ = [
    "BiasMatcher",
    "CodeOccurrence",
    "FileAnalysis",
    "OccurrenceType",
    "ParsedUnit",
    "ParserRegistry",
    "ScanEngine",
    "ScanResults",
    "ScanState",
    "SourceFile",
]
