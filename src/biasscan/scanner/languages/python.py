"""Python tokenizer — regex-based, tolerant of syntax errors."""

from __future__ import annotations

import re

from biasscan.scanner.languages.base import (
    collect_identifiers,
    extract_block_comments,
    extract_line_comments,
    split_lines,
)
from biasscan.scanner.models import ParsedUnit

_NAME = r"[a-zA-Z_][a-zA-Z0-9_]*"

_DOCSTRING_DOUBLE = re.compile(r'"""[\s\S]*?"""')
_DOCSTRING_SINGLE = re.compile(r"'''[\s\S]*?'''")
_HASH_COMMENT = re.compile(r"#.*$", re.MULTILINE)

_PY_IDENTIFIER_PATTERNS = [
    re.compile(rf"(?:def|class)\s+({_NAME})"),
    re.compile(rf"({_NAME})\s*="),  # assignments
    re.compile(rf"for\s+({_NAME})\s+in"),
    re.compile(rf"except\s+\w+\s+as\s+({_NAME})"),
    re.compile(rf"with\s+.+\s+as\s+({_NAME})"),
    re.compile(r"import\s+([a-zA-Z_][a-zA-Z0-9_.]*)"),
    re.compile(r"from\s+[a-zA-Z_][a-zA-Z0-9_.]*\s+import\s+([a-zA-Z_][a-zA-Z0-9_, \t]*)"),
    re.compile(rf"\.({_NAME})"),  # attribute access
    re.compile(rf"({_NAME})\s*\("),  # call sites
]

# Triple-quoted first; prefixed literals are also seen by the plain patterns
_PY_STRING_PATTERNS = [
    re.compile(r'"""[\s\S]*?"""'),
    re.compile(r"'''[\s\S]*?'''"),
    re.compile(r'"(?:[^"\\]|\\.)*"'),
    re.compile(r"'(?:[^'\\]|\\.)*'"),
    re.compile(r'f"(?:[^"\\]|\\.)*"'),
    re.compile(r"f'(?:[^'\\]|\\.)*'"),
    re.compile(r'r"(?:[^"\\]|\\.)*"'),
    re.compile(r"r'(?:[^'\\]|\\.)*'"),
]

_STRING_OPEN = re.compile(r"^[frbFRB]*(?:\"\"\"|'''|[\"'])")
_STRING_CLOSE = re.compile(r"(?:\"\"\"|'''|[\"'])$")

PY_KEYWORDS = frozenset(
    {
        "False", "None", "True", "and", "as", "assert", "async", "await",
        "break", "class", "continue", "def", "del", "elif", "else", "except",
        "finally", "for", "from", "global", "if", "import", "in", "is",
        "lambda", "nonlocal", "not", "or", "pass", "raise", "return", "try",
        "while", "with", "yield",
    }
)


def _strip_delimiters(literal: str) -> str:
    return _STRING_CLOSE.sub("", _STRING_OPEN.sub("", literal, count=1), count=1)


class PythonParser:
    """Tokenizer for .py / .pyw / .pyi sources."""

    language = "python"
    extensions = (".py", ".pyw", ".pyi")
    keywords = PY_KEYWORDS

    def is_keyword(self, name: str) -> bool:
        # Python keywords are case-sensitive
        return name in self.keywords

    def strip_comments(self, content: str) -> str:
        """Remove docstrings and ``#`` comments."""
        content = _DOCSTRING_DOUBLE.sub("", content)
        content = _DOCSTRING_SINGLE.sub("", content)
        return _HASH_COMMENT.sub("", content)

    def extract_identifiers(self, content: str) -> list[str]:
        return collect_identifiers(
            content, _PY_IDENTIFIER_PATTERNS, self.is_keyword, split_commas=True
        )

    def extract_strings(self, content: str) -> list[str]:
        strings: list[str] = []
        for pattern in _PY_STRING_PATTERNS:
            strings.extend(_strip_delimiters(m.group(0)) for m in pattern.finditer(content))
        return strings

    def extract_comments(self, content: str) -> list[str]:
        return (
            extract_line_comments(content, "#")
            + extract_block_comments(content, '"""', '"""')
            + extract_block_comments(content, "'''", "'''")
        )

    def parse_code(self, content: str) -> ParsedUnit:
        return ParsedUnit(
            identifiers=tuple(self.extract_identifiers(self.strip_comments(content))),
            strings=tuple(self.extract_strings(content)),
            comments=tuple(self.extract_comments(content)),
            lines=split_lines(content),
        )
