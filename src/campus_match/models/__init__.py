"""Data models for startups, investors and engine results."""

from campus_match.models.investor import InvestorProfile
from campus_match.models.results import (
    ChatbotReply,
    InvestmentPotential,
    ScoredCandidate,
    ScoredStartup,
    SentimentResult,
)
from campus_match.models.startup import Review, Startup

__all__ = [
    "ChatbotReply",
    "InvestmentPotential",
    "InvestorProfile",
    "Review",
    "ScoredCandidate",
    "ScoredStartup",
    "SentimentResult",
    "Startup",
]
