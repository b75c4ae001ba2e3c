"""Exception hierarchy shared across the scanner and settings layers."""

from __future__ import annotations


class BiasScanError(Exception):
    """Base class for all biasscan errors."""


class SettingsError(BiasScanError, ValueError):
    """Invalid scan settings or biased-term definition."""


class FileTooLargeError(BiasScanError):
    """A file exceeds the configured per-file size bound."""

    def __init__(self, name: str, size: int, limit: int) -> None:
        super().__init__(f"{name} is {size} characters, limit is {limit}")
        self.name = name
        self.size = size
        self.limit = limit
