"""Rule-based investment potential prediction from startup metrics."""

from campus_match.models.results import InvestmentPotential
from campus_match.models.startup import Startup

# Factor 1: stage (max 25)
STAGE_POINTS: dict[str, int] = {
    "idea": 5,
    "prototype": 10,
    "mvp": 15,
    "beta": 20,
    "launched": 25,
    "growth": 25,
}

# (exclusive lower bound, points), checked in order
USER_TIERS: tuple[tuple[float, int], ...] = ((10_000, 20), (5_000, 15), (1_000, 10), (100, 5))
REVENUE_TIERS: tuple[tuple[float, int], ...] = ((1_000_000, 20), (500_000, 15), (100_000, 10), (50_000, 5))
ENGAGEMENT_TIERS: tuple[tuple[float, int], ...] = ((50, 15), (25, 10), (10, 5))
DESCRIPTION_TIERS: tuple[tuple[float, int], ...] = ((500, 10), (300, 7), (100, 5))

# (inclusive lower bound, points)
TEAM_TIERS: tuple[tuple[int, int], ...] = ((5, 10), (3, 7), (2, 5), (1, 2))

HIGH_THRESHOLD = 70
MEDIUM_THRESHOLD = 40

RECOMMENDATIONS: dict[str, str] = {
    "high": "Strong investment potential",
    "medium": "Moderate investment potential",
    "low": "Early stage, higher risk",
}


def _tier(value: float, tiers: tuple[tuple[float, int], ...], *, inclusive: bool = False) -> int:
    for bound, points in tiers:
        if value >= bound if inclusive else value > bound:
            return points
    return 0


def investment_factors(startup: Startup) -> dict[str, int]:
    """Points per factor: stage, users, revenue, engagement, team, description."""
    return {
        "stage": STAGE_POINTS.get((startup.stage or "").lower(), 0),
        "users": _tier(startup.users, USER_TIERS),
        "revenue": _tier(startup.revenue, REVENUE_TIERS),
        "engagement": _tier(startup.engagement, ENGAGEMENT_TIERS),
        "team": _tier(len(startup.team), TEAM_TIERS, inclusive=True),
        "description": _tier(len(startup.description or ""), DESCRIPTION_TIERS),
    }


def classify_potential(score: int) -> str:
    """high (>= 70) | medium (>= 40) | low."""
    if score >= HIGH_THRESHOLD:
        return "high"
    if score >= MEDIUM_THRESHOLD:
        return "medium"
    return "low"


def predict_investment_potential(startup: Startup) -> InvestmentPotential:
    """Sum the six factor scores into a 0-100 score with a high/medium/low prediction."""
    factors = investment_factors(startup)
    score = min(100, max(0, sum(factors.values())))
    prediction = classify_potential(score)
    return InvestmentPotential(
        score=score,
        factors=factors,
        prediction=prediction,
        recommendation=RECOMMENDATIONS[prediction],
    )
