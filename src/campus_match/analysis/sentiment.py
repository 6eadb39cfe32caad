"""Lexicon sentiment scoring for reviews and feedback, optionally blended with a star rating."""

import math
from typing import Any, Optional

from campus_match.models.results import SentimentResult
from campus_match.text import tokenize

from .lexicons import NEGATIVE_WORDS, POSITIVE_WORDS

POSITIVE_THRESHOLD = 0.2
NEGATIVE_THRESHOLD = -0.2

# Blend weights when a rating is given
TEXT_WEIGHT = 0.3
RATING_WEIGHT = 0.7

# (inclusive lower bound, score) for 1-5 star ratings, checked in order
_RATING_SCORES: tuple[tuple[float, float], ...] = ((5, 1.0), (4, 0.7), (3, 0.0), (2, -0.7))
_LOWEST_RATING_SCORE = -1.0


def _round_half_up(value: float) -> float:
    return math.floor(value * 100 + 0.5) / 100


def _label(score: float) -> str:
    if score > POSITIVE_THRESHOLD:
        return "positive"
    if score < NEGATIVE_THRESHOLD:
        return "negative"
    return "neutral"


def _rating_value(rating: Any) -> Optional[float]:
    """Numeric rating or None; non-numeric ratings are treated as absent."""
    if rating is None or isinstance(rating, bool):
        return None
    if isinstance(rating, (int, float)):
        value = float(rating)
    else:
        try:
            value = float(str(rating).strip())
        except ValueError:
            return None
    return value if math.isfinite(value) else None


def _rating_score(rating: float) -> float:
    for bound, score in _RATING_SCORES:
        if rating >= bound:
            return score
    return _LOWEST_RATING_SCORE


def text_sentiment_score(text: str | None) -> float:
    """(positive - negative) / max(positive + negative, 1) over lexicon hits."""
    positive = 0
    negative = 0
    for word in tokenize(text):
        if word in POSITIVE_WORDS:
            positive += 1
        if word in NEGATIVE_WORDS:
            negative += 1
    return (positive - negative) / max(positive + negative, 1)


def analyze_sentiment(text: str | None, rating: Any = None) -> SentimentResult:
    """
    Sentiment of text, optionally with a 1-5 star rating.
    Without rating: lexicon score, labelled at +/-0.2.
    With rating: 0.3 x text score + 0.7 x rating score; 5 stars is always positive,
    1 star always negative.
    """
    stars = _rating_value(rating)

    if not text:
        if stars is None:
            return SentimentResult(label="neutral", score=0.0)
        if stars >= 4:
            return SentimentResult(label="positive", score=0.8)
        if stars <= 2:
            return SentimentResult(label="negative", score=-0.8)
        return SentimentResult(label="neutral", score=0.0)

    text_score = text_sentiment_score(text)
    if stars is None:
        return SentimentResult(label=_label(text_score), score=_round_half_up(text_score))

    combined = text_score * TEXT_WEIGHT + _rating_score(stars) * RATING_WEIGHT
    label = _label(combined)
    if stars >= 5:
        label = "positive"
    elif stars <= 1:
        label = "negative"
    return SentimentResult(label=label, score=max(-1.0, min(1.0, _round_half_up(combined))))
