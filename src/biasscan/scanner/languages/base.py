"""LanguageParser protocol and regex helpers shared by every language."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Protocol, runtime_checkable

from biasscan.scanner.models import ParsedUnit

# Quoted literals; each pattern is applied independently over the whole text
_QUOTED_STRING_PATTERNS = [
    re.compile(r'"(?:[^"\\]|\\.)*"'),  # double quotes
    re.compile(r"'(?:[^'\\]|\\.)*'"),  # single quotes
    re.compile(r"`(?:[^`\\]|\\.)*`"),  # template literals
]


@runtime_checkable
class LanguageParser(Protocol):
    """Protocol for per-language tokenizers."""

    language: str
    extensions: tuple[str, ...]

    def parse_code(self, content: str) -> ParsedUnit:
        """Extract identifiers, strings, comments and raw lines."""
        ...


def split_lines(content: str) -> tuple[str, ...]:
    return tuple(content.split("\n"))


def extract_quoted_strings(content: str) -> list[str]:
    """Double-, single- and backtick-quoted literals with delimiters removed."""
    strings: list[str] = []
    for pattern in _QUOTED_STRING_PATTERNS:
        strings.extend(m.group(0)[1:-1] for m in pattern.finditer(content))
    return strings


def extract_line_comments(content: str, prefix: str) -> list[str]:
    """Text following ``prefix`` up to the end of each line."""
    regex = re.compile(re.escape(prefix) + r"(.*)$", re.MULTILINE)
    return [m.group(1).strip() for m in regex.finditer(content)]


def extract_block_comments(content: str, start: str, end: str) -> list[str]:
    """Text between ``start`` and the next ``end`` delimiter."""
    regex = re.compile(re.escape(start) + r"([\s\S]*?)" + re.escape(end))
    return [m.group(1).strip() for m in regex.finditer(content)]


def collect_identifiers(
    content: str,
    patterns: Iterable[re.Pattern[str]],
    is_keyword: Callable[[str], bool],
    split_commas: bool = False,
) -> list[str]:
    """Apply identifier patterns and return unique, non-keyword captures.

    Uniqueness is case-sensitive and first-seen order is kept.
    """
    found: list[str] = []
    for pattern in patterns:
        for match in pattern.finditer(content):
            name = (match.group(1) or "").strip()
            if not name or is_keyword(name):
                continue
            if split_commas and "," in name:
                found.extend(p.strip() for p in name.split(","))
            else:
                found.append(name)
    return [name for name in dict.fromkeys(found) if name]
