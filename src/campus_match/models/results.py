"""Result values produced by the scoring and analysis functions."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from campus_match.models.startup import Startup


class ScoredCandidate(BaseModel):
    """A candidate startup paired with its similarity to a query, in [0, 1]."""

    startup: Startup
    similarity: float = Field(..., ge=0.0, le=1.0)


class ScoredStartup(BaseModel):
    """Startup annotated with an investor compatibility score for display."""

    startup: Startup
    compatibility_score: Optional[int] = Field(default=None, ge=0, le=100)

    def to_summary(self) -> dict[str, Any]:
        """Compact card used in chatbot replies."""
        s = self.startup
        return {
            "_id": s.id,
            "name": s.name,
            "tagline": s.tagline,
            "logo": s.logo,
            "category": s.category,
            "stage": s.stage,
            "upvoteCount": int(s.engagement),
            "compatibilityScore": self.compatibility_score,
            "owner": s.owner,
        }


class SentimentResult(BaseModel):
    """Sentiment label and score in [-1, 1]."""

    label: str = Field(..., description="positive | negative | neutral")
    score: float = Field(..., ge=-1.0, le=1.0)


class InvestmentPotential(BaseModel):
    """Investment potential prediction with per-factor points."""

    score: int = Field(..., ge=0, le=100)
    factors: dict[str, int]
    prediction: str = Field(..., description="high | medium | low")
    recommendation: str


class ChatbotReply(BaseModel):
    """Chatbot answer: canned text, category tag and optional result cards."""

    response: str
    type: str = Field(..., description="greeting | information | help | startups | investors | text | default")
    data: Optional[list[dict[str, Any]]] = None
