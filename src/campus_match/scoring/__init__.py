"""Relevance and heuristic scoring: similarity search, recommendations, compatibility, potential."""

import random
from typing import Optional

from campus_match.models.investor import InvestorProfile
from campus_match.models.results import ScoredStartup
from campus_match.models.startup import Startup

from .compatibility import apply_score_jitter, calculate_compatibility_score
from .potential import investment_factors, predict_investment_potential
from .recommend import popular_startups, recommend_startups_for_investor
from .similarity import (
    SIMILARITY_THRESHOLD,
    cosine_similarity,
    find_similar_startups,
    score_similar_startups,
    text_similarity,
    tfidf_vector,
)

__all__ = [
    "SIMILARITY_THRESHOLD",
    "annotate_compatibility",
    "apply_score_jitter",
    "calculate_compatibility_score",
    "cosine_similarity",
    "find_similar_startups",
    "investment_factors",
    "popular_startups",
    "predict_investment_potential",
    "recommend_for_investor",
    "recommend_startups_for_investor",
    "score_similar_startups",
    "text_similarity",
    "tfidf_vector",
]


def annotate_compatibility(
    investor: Optional[InvestorProfile],
    startups: list[Startup],
    *,
    jitter: Optional[tuple[int, int]] = None,
    rng: Optional[random.Random] = None,
) -> list[ScoredStartup]:
    """
    Pair startups with compatibility scores. Scores are only attached for approved
    investors; others get compatibility_score=None. jitter=(low, high) applies the
    display offset after scoring.
    """
    if investor is None or not investor.is_approved_investor:
        return [ScoredStartup(startup=s) for s in startups]
    return [_scored(investor, s, jitter, rng) for s in startups]


def recommend_for_investor(
    investor: InvestorProfile,
    startups: list[Startup],
    limit: int = 10,
    *,
    category_first: bool = False,
    jitter: Optional[tuple[int, int]] = None,
    rng: Optional[random.Random] = None,
) -> list[ScoredStartup]:
    """
    Recommendation pipeline:
    1. Recommend startups (similarity or cold-start popularity)
    2. Attach compatibility scores (with optional display jitter)
    """
    picked = recommend_startups_for_investor(investor, startups, limit, category_first=category_first)
    return [_scored(investor, s, jitter, rng) for s in picked]


def _scored(
    investor: InvestorProfile,
    startup: Startup,
    jitter: Optional[tuple[int, int]],
    rng: Optional[random.Random],
) -> ScoredStartup:
    score = calculate_compatibility_score(investor, startup)
    if jitter is not None:
        score = apply_score_jitter(score, low=jitter[0], high=jitter[1], rng=rng)
    return ScoredStartup(startup=startup, compatibility_score=score)
