"""Keyword and word-count measurements shared by the content checks."""

import re
from typing import Iterable

from formatting import to_fixed

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_keyword(raw: str | None) -> str:
    """Lower-case and trim the focus keyword. Missing keyword becomes ''."""
    return str(raw or "").strip().lower()


def count_words(text: str) -> int:
    stripped = (text or "").strip()
    if not stripped:
        return 0
    return len(_WHITESPACE_RUN.split(stripped))


def count_keyword(text: str, keyword: str) -> int:
    """
    Count non-overlapping, case-insensitive occurrences of `keyword` in `text`.

    The keyword is matched literally, so phrases like "c++" or "node.js" count
    the way a reader would expect.
    """
    if not keyword:
        return 0
    pattern = re.compile(re.escape(keyword.lower()))
    return len(pattern.findall((text or "").lower()))


def keyword_density(keyword_count: int, word_count: int) -> float | None:
    """Keyword occurrences per 100 words, rounded to 2 decimals. None with no words."""
    if word_count <= 0:
        return None
    return float(to_fixed(keyword_count / word_count * 100, 2))


def contains_keyword(text: str | None, keyword: str) -> bool:
    if not keyword:
        return False
    return keyword in (text or "").lower()


def any_contains_keyword(texts: Iterable[str], keyword: str) -> bool:
    return any(contains_keyword(text, keyword) for text in texts)
