"""Tests for the substring bias matcher."""

from __future__ import annotations

from biasscan.scanner.matcher import BiasMatcher
from biasscan.scanner.models import OccurrenceType
from biasscan.settings.defaults import DEFAULT_SETTINGS
from biasscan.settings.models import ScanSettings


def _terms(terms) -> list[str]:
    return [t.term for t in terms]


class TestTermLookup:
    def test_default_is_case_insensitive(self):
        matcher = BiasMatcher(DEFAULT_SETTINGS)
        term = matcher.find_first_term("Manager")
        assert term is not None
        assert term.term == "man"
        assert term.category.value == "gender"

    def test_case_sensitive_term_does_not_match_lowercase(
        self, case_sensitive_settings: ScanSettings
    ):
        matcher = BiasMatcher(case_sensitive_settings)
        assert matcher.find_all_terms("manager") == []
        assert matcher.find_first_term("manager") is None
        assert _terms(matcher.find_all_terms("Manager")) == ["Man"]

    def test_substring_not_whole_word(self):
        matcher = BiasMatcher(DEFAULT_SETTINGS)
        assert _terms(matcher.find_all_terms("womanhood")) == ["man", "woman"]

    def test_first_term_follows_settings_order(self):
        matcher = BiasMatcher(DEFAULT_SETTINGS)
        assert matcher.find_first_term("womanMaster").term == "man"
        assert _terms(matcher.find_all_terms("womanMaster")) == ["man", "woman", "master"]

    def test_no_match(self):
        matcher = BiasMatcher(DEFAULT_SETTINGS)
        assert matcher.find_first_term("userId") is None
        assert matcher.find_all_terms("") == []


class TestLocate:
    def test_one_occurrence_per_line_containing_token(self):
        matcher = BiasMatcher(DEFAULT_SETTINGS)
        master = matcher.find_first_term("master")
        lines = ["x = master", "y = 1", "print(master)"]

        occurrences = matcher.locate("master", lines, OccurrenceType.IDENTIFIER, master)

        assert [(o.line, o.column) for o in occurrences] == [(1, 4), (3, 6)]
        assert all(o.content == "master" for o in occurrences)
        assert occurrences[1].context == "print(master)"

    def test_column_is_first_occurrence_on_line(self):
        matcher = BiasMatcher(DEFAULT_SETTINGS)
        master = matcher.find_first_term("master")
        occurrences = matcher.locate(
            "master", ["  master master"], OccurrenceType.STRING, master
        )
        assert len(occurrences) == 1
        assert occurrences[0].column == 2
        assert occurrences[0].context == "master master"

    def test_case_insensitive_location(self):
        matcher = BiasMatcher(DEFAULT_SETTINGS)
        master = matcher.find_first_term("master")
        occurrences = matcher.locate(
            "MasterNode", ["node = new MASTERNODE()"], OccurrenceType.IDENTIFIER, master
        )
        assert [(o.line, o.column) for o in occurrences] == [(1, 11)]

    def test_token_without_term_is_not_located(self):
        matcher = BiasMatcher(DEFAULT_SETTINGS)
        slave = matcher.find_first_term("slave")
        assert matcher.locate("master", ["master"], OccurrenceType.STRING, slave) == []

    def test_multiline_token_is_not_located(self):
        matcher = BiasMatcher(DEFAULT_SETTINGS)
        master = matcher.find_first_term("master")
        lines = ["/*", " master", " node */"]
        assert matcher.locate("master\n node", lines, OccurrenceType.COMMENT, master) == []


class TestMatchTokens:
    def test_identifier_reports_first_term_only(self):
        matcher = BiasMatcher(DEFAULT_SETTINGS)
        occurrences = matcher.match_tokens(
            ["womanMaster"], ["womanMaster = 1"], OccurrenceType.IDENTIFIER
        )
        assert len(occurrences) == 1
        assert occurrences[0].biased_term.term == "man"
        assert occurrences[0].type is OccurrenceType.IDENTIFIER

    def test_string_reports_every_term(self):
        matcher = BiasMatcher(DEFAULT_SETTINGS)
        occurrences = matcher.match_tokens(
            ["womanMaster"], ['s = "womanMaster"'], OccurrenceType.STRING
        )
        assert _terms(o.biased_term for o in occurrences) == ["man", "woman", "master"]
        assert {o.line for o in occurrences} == {1}

    def test_every_occurrence_references_settings_term(self):
        matcher = BiasMatcher(DEFAULT_SETTINGS)
        occurrences = matcher.match_tokens(
            ["the master and the slave", "blacklist"],
            ["# the master and the slave", "blacklist = []"],
            OccurrenceType.COMMENT,
        )
        assert len(occurrences) == 3
        for occ in occurrences:
            assert occ.biased_term in DEFAULT_SETTINGS.biased_terms
