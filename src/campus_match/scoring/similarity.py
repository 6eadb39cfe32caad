"""TF-IDF text similarity and startup similarity search. Pure Python, no index kept between calls."""

import math
from collections import Counter
from typing import Iterable

from campus_match.models.results import ScoredCandidate
from campus_match.models.startup import Startup
from campus_match.text import tokenize

# Matches at or below this similarity are noise.
SIMILARITY_THRESHOLD = 0.1

TermVector = dict[str, float]


def _weights(tokens: list[str], corpus_sets: list[set[str]]) -> TermVector:
    """TF-IDF weights for a tokenized document against tokenized corpus documents."""
    if not tokens:
        return {}
    total = len(tokens)
    n_docs = len(corpus_sets) or 1
    vector: TermVector = {}
    for term, count in Counter(tokens).items():
        df = sum(1 for doc in corpus_sets if term in doc)
        # Negative when the term is in (nearly) every document of a small corpus.
        idf = math.log(n_docs / (df + 1))
        vector[term] = (count / total) * idf
    return vector


def tfidf_vector(document: str | None, corpus: Iterable[str | None]) -> TermVector:
    """
    TF-IDF vector for document relative to corpus (which should include the document).
    TF = count / total tokens, IDF = ln(N / (df + 1)).
    """
    tokens = tokenize(document)
    corpus_sets = [set(tokenize(doc)) for doc in corpus]
    if not corpus_sets:
        corpus_sets = [set(tokens)]
    return _weights(tokens, corpus_sets)


def cosine_similarity(vec1: TermVector, vec2: TermVector) -> float:
    """Cosine over the union of terms (missing = 0). 0 when either norm is 0; clamped to [0, 1]."""
    dot = 0.0
    norm1 = 0.0
    norm2 = 0.0
    for term in vec1.keys() | vec2.keys():
        a = vec1.get(term, 0.0)
        b = vec2.get(term, 0.0)
        dot += a * b
        norm1 += a * a
        norm2 += b * b
    denominator = math.sqrt(norm1) * math.sqrt(norm2)
    if denominator == 0:
        return 0.0
    return max(0.0, min(1.0, dot / denominator))


def text_similarity(text1: str | None, text2: str | None) -> float:
    """Similarity of two texts (0 to 1) using the two texts as the corpus."""
    if not text1 or not text2:
        return 0.0
    corpus = [text1, text2]
    return cosine_similarity(tfidf_vector(text1, corpus), tfidf_vector(text2, corpus))


def score_similar_startups(
    query: str | None,
    startups: list[Startup],
    limit: int = 10,
) -> list[ScoredCandidate]:
    """
    Rank startups against query text. Corpus is every startup's search text plus the query.
    Drops matches with similarity <= SIMILARITY_THRESHOLD, sorts descending, truncates to limit.
    """
    if not query or not query.strip() or not startups:
        return []

    startup_tokens = [tokenize(s.search_text) for s in startups]
    query_tokens = tokenize(query)
    corpus_sets = [set(t) for t in startup_tokens] + [set(query_tokens)]

    query_vector = _weights(query_tokens, corpus_sets)
    scored = [
        ScoredCandidate(startup=startup, similarity=cosine_similarity(query_vector, _weights(tokens, corpus_sets)))
        for startup, tokens in zip(startups, startup_tokens)
    ]
    scored = [c for c in scored if c.similarity > SIMILARITY_THRESHOLD]
    scored.sort(key=lambda c: c.similarity, reverse=True)
    return scored[: max(0, limit)]


def find_similar_startups(
    query: str | None,
    startups: list[Startup],
    limit: int = 10,
) -> list[Startup]:
    """Startups most similar to query, best first (records only)."""
    return [c.startup for c in score_similar_startups(query, startups, limit)]
