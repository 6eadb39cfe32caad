"""Unit tests for data models."""

import pytest

from campus_match.models import (
    ChatbotReply,
    InvestorProfile,
    Review,
    ScoredCandidate,
    ScoredStartup,
    Startup,
)
from campus_match.models.startup import coerce_number


class TestCoerceNumber:
    """Numeric coercion for platform metrics."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(7, 7), ("3.5", 3.5), (" 12 ", 12.0), (None, 0), (True, 0), ("n/a", 0), (float("nan"), 0), ("inf", 0)],
    )
    def test_coerce(self, value, expected) -> None:
        """Numbers and numeric strings parse; everything else is 0."""
        assert coerce_number(value) == expected


class TestStartup:
    """Tests for Startup."""

    def test_from_platform_json(self) -> None:
        """camelCase keys, string numbers and nulls are normalized; unknown keys kept."""
        startup = Startup.model_validate(
            {
                "_id": 123,
                "name": "PayEase",
                "tagline": None,
                "upvoteCount": "12",
                "users": None,
                "revenue": "n/a",
                "team": None,
                "aiTags": None,
                "roadmap": ["launch"],
            }
        )
        assert startup.id == "123"
        assert startup.tagline == ""
        assert startup.upvote_count == 12
        assert startup.users == 0
        assert startup.revenue == 0
        assert startup.team == []
        assert startup.ai_tags == []
        assert startup.model_extra["roadmap"] == ["launch"]

    def test_defaults(self) -> None:
        """New startups are draft ideas."""
        startup = Startup()
        assert startup.id is None
        assert startup.stage == "idea"
        assert startup.status == "draft"

    def test_engagement(self) -> None:
        """Upvote count, else number of upvoters."""
        assert Startup(upvote_count=4, upvotes=["a"]).engagement == 4
        assert Startup(upvotes=["a", "b"]).engagement == 2

    def test_engagement_keeps_fractional_counts(self) -> None:
        """Fractional counts are not truncated; summary cards show whole numbers."""
        startup = Startup.model_validate({"_id": "s1", "upvoteCount": 50.5})
        assert startup.engagement == 50.5
        assert ScoredStartup(startup=startup).to_summary()["upvoteCount"] == 50

    def test_text_views(self) -> None:
        """search_text includes category; pitch_text does not."""
        startup = Startup(name="PayEase", tagline="Payments", description="For students", category="fintech")
        assert startup.search_text == "PayEase Payments For students fintech"
        assert startup.pitch_text == "PayEase Payments For students"

    def test_dump_uses_platform_keys(self) -> None:
        """by_alias dump round-trips platform field names."""
        data = Startup(id="s1", upvote_count=3).model_dump(by_alias=True)
        assert data["_id"] == "s1"
        assert data["upvoteCount"] == 3


class TestInvestorProfile:
    """Tests for InvestorProfile."""

    def test_from_platform_json(self) -> None:
        """camelCase keys and comma-separated domains."""
        investor = InvestorProfile.model_validate(
            {
                "_id": "u1",
                "fullName": "Ada Lovelace",
                "role": "investor",
                "investmentDomains": "Fintech, Edtech",
                "investorApprovalStatus": "pending",
                "bio": None,
            }
        )
        assert investor.id == "u1"
        assert investor.investment_domains == ["Fintech", "Edtech"]
        assert investor.bio == ""
        assert investor.is_investor is True
        assert investor.is_approved_investor is False

    def test_malformed_domains_treated_as_absent(self) -> None:
        """Domains that are neither text nor a list become an empty list."""
        assert InvestorProfile.model_validate({"investmentDomains": 5}).investment_domains == []
        assert InvestorProfile.model_validate({"investmentDomains": {"a": 1}}).investment_domains == []
        assert InvestorProfile.model_validate({"investmentDomains": ("Fintech", None)}).investment_domains == ["Fintech"]

    def test_display_name(self) -> None:
        """Full name, else username, else 'there'."""
        assert InvestorProfile(full_name="Ada", username="ada").display_name == "Ada"
        assert InvestorProfile(username="ada").display_name == "ada"
        assert InvestorProfile().display_name == "there"

    def test_non_investor(self) -> None:
        """Default role is not an investor."""
        assert InvestorProfile().is_approved_investor is False


class TestResults:
    """Tests for result models."""

    def test_scored_startup_summary(self) -> None:
        """Summary card uses platform keys."""
        startup = Startup(id="s1", name="PayEase", tagline="Payments", category="fintech", upvotes=["u1"])
        summary = ScoredStartup(startup=startup, compatibility_score=81).to_summary()
        assert summary == {
            "_id": "s1",
            "name": "PayEase",
            "tagline": "Payments",
            "logo": "",
            "category": "fintech",
            "stage": "idea",
            "upvoteCount": 1,
            "compatibilityScore": 81,
            "owner": None,
        }

    def test_similarity_bounds(self) -> None:
        """Similarity outside [0, 1] is rejected."""
        with pytest.raises(ValueError):
            ScoredCandidate(startup=Startup(), similarity=1.5)

    def test_chatbot_reply_data_optional(self) -> None:
        """Canned replies carry no data."""
        assert ChatbotReply(response="Hi", type="greeting").data is None

    def test_review_aliases(self) -> None:
        """Review accepts platform keys."""
        review = Review.model_validate({"startup": "s1", "user": "u1", "rating": 4, "comment": "Solid"})
        assert review.startup_id == "s1"
        assert review.user_id == "u1"
        assert review.sentiment_label == "neutral"
