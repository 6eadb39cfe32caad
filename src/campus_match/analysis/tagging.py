"""Keyword tags from free text by frequency of non-stopword tokens."""

from campus_match.text import term_counts

from .lexicons import STOPWORDS

MIN_TAG_LENGTH = 4


def generate_tags(text: str | None, max_tags: int = 5) -> list[str]:
    """Most frequent non-stopword tokens of 4+ chars, capitalized; ties keep first-seen order."""
    if not text:
        return []
    counts = [
        (word, count)
        for word, count in term_counts(text).items()
        if word not in STOPWORDS and len(word) >= MIN_TAG_LENGTH
    ]
    # Counter preserves insertion order, and sorted() is stable.
    ranked = sorted(counts, key=lambda item: item[1], reverse=True)
    return [word[:1].upper() + word[1:] for word, _ in ranked[: max(0, max_tags)]]
