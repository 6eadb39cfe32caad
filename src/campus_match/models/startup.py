"""Startup and review records as received from the platform."""

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def coerce_number(value: Any) -> float:
    """Numeric fields from the platform may arrive as strings or null; bad values count as 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return 0
    return number if math.isfinite(number) else 0


class Startup(BaseModel):
    """
    Startup listing. Field names follow the platform's JSON (camelCase aliases);
    unknown fields are kept so records pass through the engine untouched.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Optional[str] = Field(default=None, alias="_id")
    name: str = ""
    tagline: str = ""
    description: str = ""
    category: str = ""
    stage: str = "idea"
    logo: str = ""
    owner: Optional[Any] = None

    team: list[Any] = Field(default_factory=list)
    users: float = 0
    revenue: float = 0
    upvote_count: float = Field(default=0, alias="upvoteCount")
    upvotes: list[Any] = Field(default_factory=list)

    status: str = "draft"
    university: str = ""
    ai_tags: list[str] = Field(default_factory=list, alias="aiTags")
    investment_potential: Optional[dict[str, Any]] = Field(default=None, alias="investmentPotential")

    @field_validator("users", "revenue", "upvote_count", mode="before")
    @classmethod
    def _coerce_metrics(cls, value: Any) -> float:
        return coerce_number(value)

    @field_validator("name", "tagline", "description", "category", "stage", "logo", "university", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("team", "upvotes", "ai_tags", mode="before")
    @classmethod
    def _none_to_list(cls, value: Any) -> list:
        if value is None:
            return []
        return value if isinstance(value, list) else [value]

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    @property
    def search_text(self) -> str:
        """Text indexed by similarity search."""
        return f"{self.name} {self.tagline} {self.description} {self.category}"

    @property
    def pitch_text(self) -> str:
        """Name, tagline and description, without the category."""
        return f"{self.name} {self.tagline} {self.description}"

    @property
    def engagement(self) -> float:
        """Upvote count, falling back to the number of upvoters."""
        return self.upvote_count or len(self.upvotes)


class Review(BaseModel):
    """Rated comment on a startup, with its computed sentiment."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Optional[int] = None
    startup_id: str = Field(..., alias="startup")
    user_id: str = Field(..., alias="user")
    rating: int
    comment: str
    sentiment_score: float = Field(default=0.0, alias="sentimentScore")
    sentiment_label: str = Field(default="neutral", alias="sentimentLabel")
