"""Parser registry — extension lookup and content-based language detection."""

from __future__ import annotations

from pathlib import PurePath

from biasscan.scanner.languages.base import LanguageParser
from biasscan.scanner.languages.javascript import JavaScriptParser
from biasscan.scanner.languages.python import PythonParser
from biasscan.scanner.languages.typescript import TypeScriptParser

TEXT_LANGUAGE = "text"

# Content sniffing, checked in order when the extension is unknown
def file_extension(filename: str) -> str:
    """Text after the last dot of the base name, dot included.

    Dotfiles such as ``.py`` count as having that extension.
    """
    name = PurePath(filename).name
    if "." not in name:
        return ""
    return "." + name.rsplit(".", 1)[1]


_CONTENT_HINTS: list[tuple[str, tuple[str, ...]]] = [
    ("python", ("def ", "import ")),
    ("javascript", ("function ", "const ")),
    ("typescript", ("interface ", "type ")),
]


class ParserRegistry:
    """Maps languages and file extensions to parser instances."""

    def __init__(self, parsers: list[LanguageParser] | None = None) -> None:
        self._parsers: dict[str, LanguageParser] = {}
        for parser in parsers or []:
            self.register(parser)

    @classmethod
    def default(cls) -> ParserRegistry:
        """Registry with the built-in JavaScript, TypeScript and Python parsers."""
        return cls([JavaScriptParser(), TypeScriptParser(), PythonParser()])

    def register(self, parser: LanguageParser) -> None:
        self._parsers[parser.language] = parser

    def get_parser(self, language: str) -> LanguageParser | None:
        return self._parsers.get(language)

    def get_parser_by_extension(self, extension: str) -> LanguageParser | None:
        extension = extension.lower()
        for parser in self._parsers.values():
            if extension in parser.extensions:
                return parser
        return None

    def detect_language(self, filename: str, content: str | None = None) -> str:
        """Detect by extension first, then by content hints, else ``text``."""
        parser = self.get_parser_by_extension(file_extension(filename))
        if parser:
            return parser.language

        if content:
            for language, hints in _CONTENT_HINTS:
                if any(hint in content for hint in hints):
                    return language

        return TEXT_LANGUAGE

    def supported_extensions(self) -> list[str]:
        extensions: list[str] = []
        for parser in self._parsers.values():
            extensions.extend(parser.extensions)
        return list(dict.fromkeys(extensions))

    def languages(self) -> list[str]:
        return list(self._parsers)
