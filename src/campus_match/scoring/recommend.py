"""Startup recommendations for an investor profile."""

import logging

from campus_match.matching import any_domain_matches
from campus_match.models.investor import InvestorProfile
from campus_match.models.startup import Startup

from .similarity import find_similar_startups, text_similarity

logger = logging.getLogger(__name__)

# Added to text similarity when the category matches a domain without family fuzziness.
_EXACT_CATEGORY_BOOST = 0.3


def investor_profile_text(investor: InvestorProfile) -> str:
    """Synthetic document describing the investor: bio, domains, current focus."""
    return " ".join(
        [investor.bio or "", " ".join(investor.investment_domains), investor.current_focus or ""]
    )


def popular_startups(startups: list[Startup], limit: int = 10) -> list[Startup]:
    """Startups by upvote count, descending."""
    return sorted(startups, key=lambda s: s.engagement, reverse=True)[: max(0, limit)]


def recommend_startups_for_investor(
    investor: InvestorProfile | None,
    startups: list[Startup],
    limit: int = 10,
    *,
    category_first: bool = False,
) -> list[Startup]:
    """
    Recommend startups for an investor.
    Blank profile -> most upvoted startups (cold start).
    Otherwise similarity search with the profile text as the query.
    category_first=True ranks startups in the investor's domains first, then fills
    remaining slots by similarity.
    """
    if investor is None or not startups:
        return []

    profile = investor_profile_text(investor)

    if category_first and investor.investment_domains:
        picked = _recommend_by_category(investor, profile, startups, limit)
        if picked is not None:
            return picked

    if not profile.strip():
        logger.debug("Empty investor profile; using popularity ranking")
        return popular_startups(startups, limit)

    return find_similar_startups(profile, startups, limit)


def _recommend_by_category(
    investor: InvestorProfile,
    profile: str,
    startups: list[Startup],
    limit: int,
) -> list[Startup] | None:
    """Category-priority ranking; None when no startup is in the investor's domains."""
    matches = [s for s in startups if s.category and any_domain_matches(investor.investment_domains, s.category)]
    if not matches:
        return None

    def _score(startup: Startup) -> float:
        similarity = text_similarity(profile, startup.search_text) if profile.strip() else 0.5
        boost = _EXACT_CATEGORY_BOOST if any_domain_matches(
            investor.investment_domains, startup.category, strict=True
        ) else 0.0
        return similarity + boost

    top = sorted(matches, key=_score, reverse=True)[: max(0, limit)]
    if len(top) >= limit:
        return top

    picked = {id(s) for s in top}
    others = [s for s in startups if id(s) not in picked]
    if others and profile.strip():
        return top + find_similar_startups(profile, others, limit - len(top))
    return top
