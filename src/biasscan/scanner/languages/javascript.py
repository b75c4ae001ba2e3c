"""JavaScript tokenizer — regex-based identifier, string and comment extraction."""

from __future__ import annotations

import re

from biasscan.scanner.languages.base import (
    collect_identifiers,
    extract_block_comments,
    extract_line_comments,
    extract_quoted_strings,
    split_lines,
)
from biasscan.scanner.models import ParsedUnit

_NAME = r"[a-zA-Z_$][a-zA-Z0-9_$]*"

_BLOCK_COMMENT = re.compile(r"/\*[\s\S]*?\*/")
_LINE_COMMENT = re.compile(r"//.*$", re.MULTILINE)

JS_IDENTIFIER_PATTERNS = [
    re.compile(rf"\b(?:var|let|const)\s+({_NAME})"),  # variable declarations
    re.compile(rf"function\s+({_NAME})"),
    re.compile(rf"class\s+({_NAME})"),
    re.compile(rf"\.({_NAME})"),  # property access
    re.compile(rf"({_NAME})\s*:"),  # object keys
    re.compile(rf"({_NAME})\s*\("),  # call sites
]

JS_KEYWORDS = frozenset(
    {
        "abstract", "arguments", "await", "boolean", "break", "byte", "case",
        "catch", "char", "class", "const", "continue", "debugger", "default",
        "delete", "do", "double", "else", "enum", "eval", "export", "extends",
        "false", "final", "finally", "float", "for", "function", "goto", "if",
        "implements", "import", "in", "instanceof", "int", "interface", "let",
        "long", "native", "new", "null", "package", "private", "protected",
        "public", "return", "short", "static", "super", "switch",
        "synchronized", "this", "throw", "throws", "transient", "true", "try",
        "typeof", "var", "void", "volatile", "while", "with", "yield",
    }
)


def strip_js_comments(content: str) -> str:
    """Remove ``/* */`` and ``//`` comments."""
    content = _BLOCK_COMMENT.sub("", content)
    return _LINE_COMMENT.sub("", content)


def extract_js_comments(content: str) -> list[str]:
    return extract_line_comments(content, "//") + extract_block_comments(
        content, "/*", "*/"
    )


class JavaScriptParser:
    """Tokenizer for .js / .jsx / .mjs sources."""

    language = "javascript"
    extensions = (".js", ".jsx", ".mjs")
    keywords = JS_KEYWORDS

    def is_keyword(self, name: str) -> bool:
        # JS keywords are matched case-insensitively
        return name.lower() in self.keywords

    def extract_identifiers(self, content: str) -> list[str]:
        """Identifiers from comment-free source."""
        return collect_identifiers(content, JS_IDENTIFIER_PATTERNS, self.is_keyword)

    def parse_code(self, content: str) -> ParsedUnit:
        without_comments = strip_js_comments(content)
        return ParsedUnit(
            identifiers=tuple(self.extract_identifiers(without_comments)),
            strings=tuple(extract_quoted_strings(content)),
            comments=tuple(extract_js_comments(content)),
            lines=split_lines(content),
        )
