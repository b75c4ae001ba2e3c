"""Scanner data models — parsed units, occurrences and scan results."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from pathlib import Path

from biasscan.settings.models import BiasedTerm


class OccurrenceType(enum.Enum):
    """Which token category an occurrence was found in."""

    IDENTIFIER = "identifier"
    STRING = "string"
    COMMENT = "comment"


class ScanState(enum.Enum):
    """Lifecycle of a scan batch."""

    IDLE = "idle"
    SCANNING = "scanning"
    COMPLETED = "completed"
    PARTIALLY_FAILED = "partially_failed"


@dataclass(frozen=True)
class SourceFile:
    """One input to the engine: a display name plus content or a path to read."""

    name: str
    content: str | None = None
    path: Path | None = None

    @classmethod
    def from_path(cls, path: str | Path) -> SourceFile:
        path = Path(path)
        return cls(name=path.name, path=path)

    @property
    def display_path(self) -> str:
        return str(self.path) if self.path else self.name

    def read(self) -> str:
        """Return the file text, reading from disk if needed."""
        if self.content is not None:
            return self.content
        if self.path is None:
            raise ValueError(f"SourceFile {self.name!r} has neither content nor path")
        return self.path.read_text(encoding="utf-8")


@dataclass(frozen=True)
class ParsedUnit:
    """Tokens extracted from one file by a language parser."""

    identifiers: tuple[str, ...] = ()
    strings: tuple[str, ...] = ()
    comments: tuple[str, ...] = ()
    lines: tuple[str, ...] = ()


@dataclass(frozen=True)
class CodeOccurrence:
    """A biased term located on a specific line."""

    type: OccurrenceType
    line: int
    column: int
    content: str
    context: str
    biased_term: BiasedTerm


@dataclass(frozen=True)
class FileAnalysis:
    """Per-file scan statistics."""

    path: str
    name: str
    language: str
    total_elements: int = 0
    biased_elements: int = 0
    bias_percentage: float = 0.0
    estimated_fix_time: int = 0  # seconds
    occurrences: tuple[CodeOccurrence, ...] = ()
    last_scanned: float = field(default_factory=time.time)
    error: str = ""

    @classmethod
    def failed(cls, path: str, name: str, error: str) -> FileAnalysis:
        """Zero-valued analysis recorded for a file that could not be scanned."""
        return cls(path=path, name=name, language="text", error=error)

    @property
    def has_error(self) -> bool:
        return bool(self.error)

    def occurrences_by_line(self) -> dict[int, list[CodeOccurrence]]:
        """Group occurrences by line number, in line order."""
        grouped: dict[int, list[CodeOccurrence]] = {}
        for occ in sorted(self.occurrences, key=lambda o: o.line):
            grouped.setdefault(occ.line, []).append(occ)
        return grouped


@dataclass(frozen=True)
class ScanResults:
    """Aggregate result of a scan batch."""

    total_files: int
    scanned_files: int
    total_occurrences: int
    estimated_total_time: int
    files: tuple[FileAnalysis, ...] = ()
    scan_duration: float = 0.0  # milliseconds
    timestamp: float = field(default_factory=time.time)

    @property
    def failed_files(self) -> list[FileAnalysis]:
        return [f for f in self.files if f.has_error]

    @property
    def is_complete(self) -> bool:
        return self.scanned_files == self.total_files
