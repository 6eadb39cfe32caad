"""Extractive summarization: keep the sentences whose words are most frequent in the text."""

import re

from campus_match.text import term_counts, tokenize

_SENTENCE_END = re.compile(r"[.!?]+")

# Fragments this short are abbreviations or noise, not sentences.
MIN_SENTENCE_LENGTH = 20


def split_sentences(text: str | None) -> list[str]:
    """Sentences longer than MIN_SENTENCE_LENGTH characters, stripped."""
    if not text:
        return []
    parts = (s.strip() for s in _SENTENCE_END.split(text))
    return [s for s in parts if len(s) > MIN_SENTENCE_LENGTH]


def summarize_text(text: str | None, max_sentences: int = 2) -> str:
    """
    Pick the top max_sentences sentences by summed word frequency and join with '. '.
    Text with max_sentences or fewer sentences is returned unchanged.
    '...' marks a summary shorter than the input text.
    """
    if not text:
        return ""

    sentences = split_sentences(text)
    if len(sentences) <= max_sentences:
        return text

    freq = term_counts(text)
    scored = [(sentence, sum(freq[w] for w in tokenize(sentence))) for sentence in sentences]
    scored.sort(key=lambda item: item[1], reverse=True)

    summary = ". ".join(sentence for sentence, _ in scored[: max(0, max_sentences)])
    return summary + ("..." if len(summary) < len(text) else "")
