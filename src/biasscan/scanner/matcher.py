"""Bias matcher — finds biased terms in tokens and locates them in source lines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from biasscan.scanner.models import CodeOccurrence, OccurrenceType
from biasscan.settings.models import BiasedTerm, ScanSettings


class BiasMatcher:
    """Substring matcher over the term list of one ScanSettings.

    Matching is substring based, not whole-word: ``man`` matches inside
    ``manager`` and ``woman``.
    """

    def __init__(self, settings: ScanSettings) -> None:
        self.settings = settings
        self._case_sensitive = settings.case_sensitive
        self._terms: list[tuple[BiasedTerm, str]] = [
            (term, self._fold(term.term)) for term in settings.biased_terms
        ]

    def _fold(self, text: str) -> str:
        return text if self._case_sensitive else text.lower()

    def find_first_term(self, text: str) -> BiasedTerm | None:
        """First term in settings order contained in ``text``."""
        search = self._fold(text)
        for term, folded in self._terms:
            if folded in search:
                return term
        return None

    def find_all_terms(self, text: str) -> list[BiasedTerm]:
        """Every term contained in ``text``, in settings order."""
        search = self._fold(text)
        return [term for term, folded in self._terms if folded in search]

    def locate(
        self,
        token: str,
        lines: Sequence[str],
        occurrence_type: OccurrenceType,
        term: BiasedTerm,
    ) -> list[CodeOccurrence]:
        """One occurrence per line that textually contains ``token``.

        Every line of the file is searched, so a token repeated on several
        lines is reported once per line.
        """
        if not token:
            return []
        pattern = self._fold(token)
        if self._fold(term.term) not in pattern:
            return []

        occurrences: list[CodeOccurrence] = []
        for index, line in enumerate(lines):
            column = self._fold(line).find(pattern)
            if column < 0:
                continue
            occurrences.append(
                CodeOccurrence(
                    type=occurrence_type,
                    line=index + 1,
                    column=column,
                    content=token,
                    context=line.strip(),
                    biased_term=term,
                )
            )
        return occurrences

    def match_tokens(
        self,
        tokens: Iterable[str],
        lines: Sequence[str],
        occurrence_type: OccurrenceType,
    ) -> list[CodeOccurrence]:
        """Locate every biased token of one category.

        Identifiers report only their first matching term; strings and
        comments report every matching term.
        """
        occurrences: list[CodeOccurrence] = []
        for token in tokens:
            if occurrence_type is OccurrenceType.IDENTIFIER:
                first = self.find_first_term(token)
                terms = [first] if first else []
            else:
                terms = self.find_all_terms(token)
            for term in terms:
                occurrences.extend(self.locate(token, lines, occurrence_type, term))
        return occurrences
