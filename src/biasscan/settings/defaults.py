"""Built-in term list and default scan settings."""

from __future__ import annotations

from biasscan.settings.models import BiasedTerm, Category, ScanSettings, Severity

DEFAULT_TERMS: tuple[BiasedTerm, ...] = (
    BiasedTerm(
        id="1",
        term="man",
        category=Category.GENDER,
        severity=Severity.MEDIUM,
        suggestions=("person", "individual"),
    ),
    BiasedTerm(
        id="2",
        term="woman",
        category=Category.GENDER,
        severity=Severity.MEDIUM,
        suggestions=("person", "individual"),
    ),
    BiasedTerm(
        id="3",
        term="male",
        category=Category.GENDER,
        severity=Severity.MEDIUM,
        suggestions=("user", "participant"),
    ),
    BiasedTerm(
        id="4",
        term="female",
        category=Category.GENDER,
        severity=Severity.MEDIUM,
        suggestions=("user", "participant"),
    ),
    BiasedTerm(
        id="5",
        term="master",
        category=Category.HIERARCHY,
        severity=Severity.HIGH,
        suggestions=("main", "primary", "leader"),
    ),
    BiasedTerm(
        id="6",
        term="slave",
        category=Category.HIERARCHY,
        severity=Severity.HIGH,
        suggestions=("worker", "replica", "follower"),
    ),
    BiasedTerm(
        id="7",
        term="blacklist",
        category=Category.RACE,
        severity=Severity.HIGH,
        suggestions=("blocklist", "denylist"),
    ),
    BiasedTerm(
        id="8",
        term="whitelist",
        category=Category.RACE,
        severity=Severity.HIGH,
        suggestions=("allowlist", "safelist"),
    ),
    BiasedTerm(
        id="9",
        term="king",
        category=Category.GENDER,
        severity=Severity.MEDIUM,
        suggestions=("leader", "ruler"),
    ),
    BiasedTerm(
        id="10",
        term="queen",
        category=Category.GENDER,
        severity=Severity.MEDIUM,
        suggestions=("leader", "ruler"),
    ),
    BiasedTerm(
        id="11",
        term="boy",
        category=Category.AGE,
        severity=Severity.LOW,
        suggestions=("child", "youth"),
    ),
    BiasedTerm(
        id="12",
        term="girl",
        category=Category.AGE,
        severity=Severity.LOW,
        suggestions=("child", "youth"),
    ),
)

DEFAULT_TIME_PER_FIX = 30

DEFAULT_SETTINGS = ScanSettings(
    biased_terms=DEFAULT_TERMS,
    time_per_fix=DEFAULT_TIME_PER_FIX,
    include_identifiers=True,
    include_strings=True,
    include_comments=True,
    case_sensitive=False,
)
