"""Scan engine — orchestrates per-file tokenizing, matching and aggregation."""

from __future__ import annotations

import logging
import os
import threading
import time
from collections.abc import Iterable, Iterator
from pathlib import Path

from biasscan.errors import FileTooLargeError
from biasscan.scanner.languages.generic import split_words
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
from biasscan.scanner.registry import TEXT_LANGUAGE, ParserRegistry
from biasscan.settings.models import ScanSettings

logger = logging.getLogger(__name__)

# Directories to always skip
_SKIP_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "__pycache__",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
    ".venv",
    "venv",
    ".tox",
    ".eggs",
    "dist",
    "build",
}

# Binary / non-text extensions to skip
_SKIP_EXTENSIONS = {
    ".pyc",
    ".pyo",
    ".so",
    ".dylib",
    ".dll",
    ".exe",
    ".bin",
    ".dat",
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".ico",
    ".pdf",
    ".zip",
    ".tar",
    ".gz",
    ".bz2",
    ".whl",
    ".egg",
    ".db",
    ".sqlite",
    ".sqlite3",
}

# Max characters per file (1 MB of text)
DEFAULT_MAX_FILE_SIZE = 1_048_576


class ScanEngine:
    """Scans batches of files against one ScanSettings."""

    def __init__(
        self,
        settings: ScanSettings,
        registry: ParserRegistry | None = None,
        max_file_size: int = DEFAULT_MAX_FILE_SIZE,
        exclude_patterns: list[str] | None = None,
    ) -> None:
        self._settings = settings
        self._matcher = BiasMatcher(settings)
        self._registry = registry or ParserRegistry.default()
        self._max_file_size = max_file_size
        self._exclude = set(exclude_patterns or [])
        self.state = ScanState.IDLE

    @property
    def settings(self) -> ScanSettings:
        return self._settings

    @property
    def registry(self) -> ParserRegistry:
        return self._registry

    def update_settings(self, settings: ScanSettings) -> None:
        """Replace settings; a batch already running keeps its own matcher."""
        self._settings = settings
        self._matcher = BiasMatcher(settings)

    def scan(self, paths: str | Path | Iterable[str | Path]) -> ScanResults:
        """Scan files and directories (walked recursively)."""
        if isinstance(paths, (str, Path)):
            paths = [paths]
        return self.scan_files(SourceFile.from_path(p) for p in self.collect(paths))

    def collect(self, paths: Iterable[str | Path]) -> list[Path]:
        """Expand directories into the scannable files they contain."""
        files: list[Path] = []
        for path in paths:
            path = Path(path)
            if path.is_dir():
                files.extend(self._walk(path))
            else:
                files.append(path)
        return files

    def scan_files(
        self,
        sources: Iterable[SourceFile],
        stop_event: threading.Event | None = None,
    ) -> ScanResults:
        """Scan files in order; per-file failures become zero-valued rows."""
        sources = list(sources)
        matcher = self._matcher
        settings = self._settings
        start = time.perf_counter()
        self.state = ScanState.SCANNING

        analyses: list[FileAnalysis] = []
        failures = 0
        for source in sources:
            if stop_event is not None and stop_event.is_set():
                logger.info(
                    "Scan cancelled after %d of %d files", len(analyses), len(sources)
                )
                break
            try:
                analysis = self._scan_source(source, matcher, settings)
            except Exception as e:
                logger.warning("Error scanning file %s: %s", source.name, e)
                failures += 1
                analysis = FileAnalysis.failed(
                    path=source.display_path, name=source.name, error=str(e)
                )
            analyses.append(analysis)

        self.state = ScanState.PARTIALLY_FAILED if failures else ScanState.COMPLETED

        return ScanResults(
            total_files=len(sources),
            scanned_files=len(analyses),
            total_occurrences=sum(a.biased_elements for a in analyses),
            estimated_total_time=sum(a.estimated_fix_time for a in analyses),
            files=tuple(analyses),
            scan_duration=(time.perf_counter() - start) * 1000,
        )

    def scan_file(self, source: SourceFile) -> FileAnalysis:
        """Scan a single file; errors propagate to the caller."""
        return self._scan_source(source, self._matcher, self._settings)

    def scan_text(self, name: str, content: str) -> FileAnalysis:
        return self.scan_file(SourceFile(name=name, content=content))

    def _scan_source(
        self,
        source: SourceFile,
        matcher: BiasMatcher,
        settings: ScanSettings,
    ) -> FileAnalysis:
        content = source.read()
        if len(content) > self._max_file_size:
            raise FileTooLargeError(source.name, len(content), self._max_file_size)

        language = self._registry.detect_language(source.name, content)
        parser = self._registry.get_parser(language)

        if parser is None:
            language = TEXT_LANGUAGE
            total, occurrences = self._match_words(content, matcher, settings)
        else:
            total, occurrences = self._match_parsed(
                parser.parse_code(content), matcher, settings
            )

        biased = len(occurrences)
        return FileAnalysis(
            path=source.display_path,
            name=source.name,
            language=language,
            total_elements=total,
            biased_elements=biased,
            bias_percentage=(biased / total) * 100 if total > 0 else 0.0,
            estimated_fix_time=biased * settings.time_per_fix,
            occurrences=tuple(occurrences),
            last_scanned=time.time(),
        )

    def _match_parsed(
        self, parsed: ParsedUnit, matcher: BiasMatcher, settings: ScanSettings
    ) -> tuple[int, list[CodeOccurrence]]:
        categories = (
            (settings.include_identifiers, parsed.identifiers, OccurrenceType.IDENTIFIER),
            (settings.include_strings, parsed.strings, OccurrenceType.STRING),
            (settings.include_comments, parsed.comments, OccurrenceType.COMMENT),
        )
        total = 0
        occurrences: list[CodeOccurrence] = []
        for enabled, tokens, occurrence_type in categories:
            if not enabled:
                continue
            total += len(tokens)
            occurrences.extend(matcher.match_tokens(tokens, parsed.lines, occurrence_type))
        return total, occurrences

    def _match_words(
        self, content: str, matcher: BiasMatcher, settings: ScanSettings
    ) -> tuple[int, list[CodeOccurrence]]:
        # Words of plain-text files count as string elements
        if not settings.include_strings:
            return 0, []
        words = split_words(content)
        lines = content.split("\n")
        return len(words), matcher.match_tokens(words, lines, OccurrenceType.STRING)

    def _walk(self, directory: Path) -> Iterator[Path]:
        """Walk directory yielding scannable files."""
        for root, dirs, files in os.walk(directory):
            # Prune skipped directories in-place
            dirs[:] = sorted(
                d
                for d in dirs
                if d not in _SKIP_DIRS
                and not d.endswith(".egg-info")
                and d not in self._exclude
            )

            for name in sorted(files):
                path = Path(root) / name
                if path.suffix.lower() in _SKIP_EXTENSIONS:
                    logger.debug("Skipping binary file %s", path)
                    continue
                if name in self._exclude:
                    continue
                yield path
