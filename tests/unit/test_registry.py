"""Tests for parser selection and language detection."""

from __future__ import annotations

import pytest

from biasscan.scanner.languages.base import LanguageParser
from biasscan.scanner.models import ParsedUnit
from biasscan.scanner.registry import ParserRegistry


class _RubyParser:
    language = "ruby"
    extensions = (".rb",)

    def parse_code(self, content: str) -> ParsedUnit:
        return ParsedUnit(lines=tuple(content.split("\n")))


@pytest.fixture
def registry() -> ParserRegistry:
    return ParserRegistry.default()


@pytest.mark.parametrize(
    ("filename", "language"),
    [
        ("app.js", "javascript"),
        ("App.JSX", "javascript"),
        ("module.mjs", "javascript"),
        ("index.ts", "typescript"),
        ("view.tsx", "typescript"),
        ("main.py", "python"),
        ("gui.pyw", "python"),
        ("stubs.pyi", "python"),
        ("src/pkg.v2/main.py", "python"),
        (".py", "python"),
    ],
)
def test_detect_by_extension(registry: ParserRegistry, filename: str, language: str):
    assert registry.detect_language(filename) == language


def test_extension_wins_over_content(registry: ParserRegistry):
    assert registry.detect_language("app.js", "def main():\n    import os") == "javascript"


@pytest.mark.parametrize(
    ("content", "language"),
    [
        ("import os", "python"),
        ("def run(): pass", "python"),
        ("function go() {}", "javascript"),
        ("const a = 1", "javascript"),
        ("interface Foo {}", "typescript"),
        ("type Id = string", "typescript"),
        ("hello world", "text"),
        ('print("hello world")', "text"),
    ],
)
def test_detect_by_content(registry: ParserRegistry, content: str, language: str):
    assert registry.detect_language("snippet.xyz", content) == language


def test_dotfile_without_known_extension_uses_content(registry: ParserRegistry):
    assert registry.detect_language(".env", "const x = 1") == "javascript"
    assert registry.detect_language("archive.", "x") == "text"


def test_no_extension_no_content_is_text(registry: ParserRegistry):
    assert registry.detect_language("README") == "text"
    assert registry.detect_language("notes.xyz", None) == "text"


def test_get_parser(registry: ParserRegistry):
    assert registry.get_parser("python").language == "python"
    assert registry.get_parser("text") is None
    assert registry.get_parser_by_extension(".TSX").language == "typescript"
    assert registry.get_parser_by_extension(".rb") is None


def test_supported_extensions(registry: ParserRegistry):
    assert sorted(registry.supported_extensions()) == sorted(
        [".js", ".jsx", ".mjs", ".ts", ".tsx", ".py", ".pyw", ".pyi"]
    )
    assert registry.languages() == ["javascript", "typescript", "python"]


def test_registries_are_independent():
    first = ParserRegistry.default()
    second = ParserRegistry.default()
    first.register(_RubyParser())
    assert first.detect_language("app.rb") == "ruby"
    assert second.detect_language("app.rb") == "text"
    assert first.get_parser("python") is not second.get_parser("python")


def test_custom_parser_satisfies_protocol():
    assert isinstance(_RubyParser(), LanguageParser)
    registry = ParserRegistry.default()
    for language in registry.languages():
        assert isinstance(registry.get_parser(language), LanguageParser)
