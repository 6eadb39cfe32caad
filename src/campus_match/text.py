"""Text normalization shared by similarity, summarization, sentiment and tagging."""

import re
from collections import Counter

_NON_WORD = re.compile(r"[^\w\s]")

MIN_TOKEN_LENGTH = 3


def tokenize(text: str | None) -> list[str]:
    """Lowercase, replace punctuation with spaces, split, drop tokens shorter than 3 chars."""
    if not text:
        return []
    return [w for w in _NON_WORD.sub(" ", text.lower()).split() if len(w) >= MIN_TOKEN_LENGTH]


def term_counts(text: str | None) -> Counter:
    """Token frequency table for text."""
    return Counter(tokenize(text))
