"""Plain-text fallback — whitespace-split words for unsupported languages."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")


def split_words(content: str) -> list[str]:
    """Split on whitespace runs.

    Leading or trailing whitespace yields an empty word at that end, which
    still counts as an element but can never match a term.
    """
    return _WHITESPACE.split(content)
