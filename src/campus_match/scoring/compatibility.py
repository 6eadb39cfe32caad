"""Investor/startup compatibility score (0-100) and its display jitter."""

import math
import random
from typing import Optional

from campus_match.matching import any_domain_matches
from campus_match.models.investor import InvestorProfile
from campus_match.models.startup import Startup

from .similarity import text_similarity

_BASE_SCORE = 50
_DOMAIN_MATCH_POINTS = 30
_SIMILARITY_POINTS = 20
_EARLY_STAGE_POINTS = 5
_EARLY_STAGES = ("idea", "prototype")


def calculate_compatibility_score(investor: InvestorProfile, startup: Startup) -> int:
    """
    How well a startup matches an investor's interests:
    base 50, +30 domain/category match, +20 x text similarity, +5 early stage.
    Deterministic; rounded half up and clamped to [0, 100].
    """
    score: float = _BASE_SCORE

    if investor.investment_domains and startup.category:
        if any_domain_matches(investor.investment_domains, startup.category):
            score += _DOMAIN_MATCH_POINTS

    investor_text = " ".join([investor.bio or "", " ".join(investor.investment_domains)])
    score += text_similarity(investor_text, startup.pitch_text) * _SIMILARITY_POINTS

    if (startup.stage or "").lower() in _EARLY_STAGES:
        score += _EARLY_STAGE_POINTS

    return min(100, max(0, math.floor(score + 0.5)))


def apply_score_jitter(
    score: int,
    *,
    low: int = 0,
    high: int = 5,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Presentation-only: add a random integer offset in [low, high] to a score, clamped to [0, 100].
    Pass a seeded rng for reproducible output.
    """
    rng = rng or random.Random()
    return min(100, max(0, score + rng.randint(low, high)))
