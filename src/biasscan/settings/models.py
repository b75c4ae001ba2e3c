"""Settings data models — biased terms and scan settings, immutable across a batch."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass

from biasscan.errors import SettingsError


class Category(enum.Enum):
    """Kind of bias a term is associated with."""

    GENDER = "gender"
    RACE = "race"
    HIERARCHY = "hierarchy"
    AGE = "age"
    OTHER = "other"


class Severity(enum.Enum):
    """How urgently a term should be replaced."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class BiasedTerm:
    """A term flagged as non-inclusive, with suggested replacements."""

    id: str
    term: str
    category: Category = Category.OTHER
    severity: Severity = Severity.MEDIUM
    suggestions: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.term or not self.term.strip():
            raise SettingsError(f"Biased term {self.id!r} has empty term text")


@dataclass(frozen=True)
class ScanSettings:
    """Everything the engine needs to score a batch of files."""

    biased_terms: tuple[BiasedTerm, ...] = ()
    time_per_fix: int = 30  # seconds per occurrence
    include_identifiers: bool = True
    include_strings: bool = True
    include_comments: bool = True
    case_sensitive: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.time_per_fix, bool) or not isinstance(self.time_per_fix, int):
            raise SettingsError(
                f"time_per_fix must be an integer, got {self.time_per_fix!r}"
            )
        if self.time_per_fix <= 0:
            raise SettingsError(
                f"time_per_fix must be positive, got {self.time_per_fix}"
            )

        seen: set[str] = set()
        for term in self.biased_terms:
            if term.id in seen:
                raise SettingsError(f"Duplicate biased term id: {term.id}")
            seen.add(term.id)

    def replace(self, **changes) -> ScanSettings:
        """Return a copy with the given fields replaced."""
        if "biased_terms" in changes:
            changes["biased_terms"] = tuple(changes["biased_terms"])
        return dataclasses.replace(self, **changes)

    def get_term(self, term_id: str) -> BiasedTerm | None:
        for term in self.biased_terms:
            if term.id == term_id:
                return term
        return None
