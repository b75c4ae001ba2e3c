"""TypeScript tokenizer — JavaScript extraction plus TS declaration forms."""

from __future__ import annotations

import re

from biasscan.scanner.languages.base import (
    collect_identifiers,
    extract_quoted_strings,
    split_lines,
)
from biasscan.scanner.languages.javascript import (
    JS_KEYWORDS,
    JavaScriptParser,
    extract_js_comments,
    strip_js_comments,
)
from biasscan.scanner.models import ParsedUnit

_NAME = r"[a-zA-Z_$][a-zA-Z0-9_$]*"

# Simple annotations only: `: Type =` and `: Type;`
_TYPE_BEFORE_ASSIGN = re.compile(r":\s*[a-zA-Z_$][a-zA-Z0-9_$<>|\[\]]*\s*=")
_TYPE_BEFORE_SEMI = re.compile(r":\s*[a-zA-Z_$][a-zA-Z0-9_$<>|\[\]]*\s*;")

TS_IDENTIFIER_PATTERNS = [
    re.compile(rf"interface\s+({_NAME})"),
    re.compile(rf"type\s+({_NAME})"),
    re.compile(rf"enum\s+({_NAME})"),
    re.compile(rf"namespace\s+({_NAME})"),
]

TS_KEYWORDS = frozenset(
    {
        "abstract", "any", "as", "asserts", "bigint", "boolean", "constructor",
        "declare", "get", "infer", "intrinsic", "is", "keyof", "module",
        "namespace", "never", "readonly", "require", "number", "object", "set",
        "string", "symbol", "type", "undefined", "unique", "unknown", "from",
        "global", "of", "satisfies",
    }
)


def strip_ts_comments_and_types(content: str) -> str:
    content = strip_js_comments(content)
    content = _TYPE_BEFORE_ASSIGN.sub(" = ", content)
    return _TYPE_BEFORE_SEMI.sub(";", content)


class TypeScriptParser:
    """Tokenizer for .ts / .tsx sources.

    Wraps a JavaScriptParser whose keyword list is widened to the union of
    the JavaScript and TypeScript keywords, so every JavaScript pattern
    filters TypeScript keywords too and no JavaScript keyword is lost.
    """

    language = "typescript"
    extensions = (".ts", ".tsx")
    keywords = JS_KEYWORDS | TS_KEYWORDS

    def __init__(self) -> None:
        self._js = JavaScriptParser()
        self._js.keywords = self.keywords

    def is_keyword(self, name: str) -> bool:
        return name.lower() in self.keywords

    def extract_identifiers(self, content: str) -> list[str]:
        """JavaScript identifiers followed by TypeScript declaration names."""
        js_identifiers = self._js.extract_identifiers(content)
        ts_identifiers = collect_identifiers(
            content, TS_IDENTIFIER_PATTERNS, self.is_keyword
        )
        return list(dict.fromkeys(js_identifiers + ts_identifiers))

    def parse_code(self, content: str) -> ParsedUnit:
        stripped = strip_ts_comments_and_types(content)
        return ParsedUnit(
            identifiers=tuple(self.extract_identifiers(stripped)),
            strings=tuple(extract_quoted_strings(content)),
            comments=tuple(extract_js_comments(content)),
            lines=split_lines(content),
        )
