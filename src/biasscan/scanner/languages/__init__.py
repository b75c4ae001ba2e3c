"""Per-language tokenizers."""

from biasscan.scanner.languages.base import LanguageParser
from biasscan.scanner.languages.javascript import JavaScriptParser
from biasscan.scanner.languages.python import PythonParser
from biasscan.scanner.languages.typescript import TypeScriptParser

__all__ = ["JavaScriptParser", "LanguageParser", "PythonParser", "TypeScriptParser"]
