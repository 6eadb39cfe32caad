"""Unit tests for RecordStore."""

import pytest

from campus_match.models.investor import InvestorProfile
from campus_match.models.startup import Startup
from campus_match.store import RecordStore


def _make_startup(**kwargs) -> Startup:
    defaults = {
        "id": "s1",
        "name": "PayEase",
        "tagline": "Mobile payments for students",
        "description": "Split rent and pay bills with instant mobile payments on campus.",
        "category": "Fintech",
        "stage": "mvp",
        "upvote_count": 12,
        "status": "approved",
    }
    defaults.update(kwargs)
    return Startup(**defaults)


def _make_user(user_id: str, **kwargs) -> InvestorProfile:
    defaults = {"id": user_id, "username": user_id, "role": "investor", "investor_approval_status": "approved"}
    defaults.update(kwargs)
    return InvestorProfile(**defaults)


class TestRecordStoreStartups:
    """Tests for startup storage."""

    def test_upsert_new_returns_true_for_new(self, store: RecordStore) -> None:
        """First upsert is new, second is an update."""
        _, was_new = store.upsert_startup(_make_startup())
        assert was_new is True
        _, was_new = store.upsert_startup(_make_startup(name="PayEase Pro"))
        assert was_new is False
        assert store.get_startup("s1").name == "PayEase Pro"

    def test_upsert_assigns_id(self, store: RecordStore) -> None:
        """Startups without an id get one."""
        stored, _ = store.upsert_startup(_make_startup(id=None))
        assert stored.id
        assert store.get_startup(stored.id).name == "PayEase"

    def test_upsert_generates_tags_and_potential(self, store: RecordStore) -> None:
        """AI tags and investment potential are regenerated on every save."""
        stored, _ = store.upsert_startup(_make_startup(ai_tags=["Stale"]))
        assert stored.ai_tags == ["Mobile", "Payments", "Payease", "Students", "Split"]
        assert stored.investment_potential == {"score": 20, "prediction": "low"}
        assert store.get_startup("s1").ai_tags == stored.ai_tags

    def test_get_missing(self, store: RecordStore) -> None:
        """Unknown id returns None."""
        assert store.get_startup("nope") is None

    def test_find_startups_approved_by_upvotes(self, populated_store: RecordStore) -> None:
        """Only approved startups, most upvoted first."""
        populated_store.upsert_startup(_make_startup(id="d1", status="draft", upvote_count=99))
        assert [s.id for s in populated_store.find_startups()] == ["s2", "s1", "s4", "s3"]

    def test_find_startups_by_category_case_insensitive(self, populated_store: RecordStore) -> None:
        """Category filter ignores case."""
        assert [s.id for s in populated_store.find_startups(category="FinTech")] == ["s1"]
        assert populated_store.find_startups(category="gaming") == []

    def test_find_startups_limit(self, populated_store: RecordStore) -> None:
        """limit truncates results."""
        assert [s.id for s in populated_store.find_startups(limit=2)] == ["s2", "s1"]

    def test_all_startups(self, populated_store: RecordStore) -> None:
        """all_startups returns every approved startup."""
        assert len(populated_store.all_startups()) == 4

    def test_set_startup_status(self, store: RecordStore) -> None:
        """Approving a draft makes it visible."""
        store.upsert_startup(_make_startup(status="draft"))
        assert store.find_startups() == []
        assert store.set_startup_status("s1", "approved") is True
        assert [s.id for s in store.find_startups()] == ["s1"]

    def test_set_startup_status_unknown(self, store: RecordStore) -> None:
        """Unknown startup returns False; invalid status raises."""
        assert store.set_startup_status("nope", "approved") is False
        with pytest.raises(ValueError, match="Invalid startup status"):
            store.set_startup_status("s1", "archived")


class TestRecordStoreUsers:
    """Tests for user storage."""

    def test_upsert_and_get_user(self, store: RecordStore) -> None:
        """User round-trips through the store."""
        store.upsert_user(_make_user("u1", investment_domains=["Fintech"]))
        user = store.get_user("u1")
        assert user.investment_domains == ["Fintech"]
        assert store.get_user("nope") is None

    def test_upsert_user_updates(self, store: RecordStore) -> None:
        """Second upsert overwrites."""
        store.upsert_user(_make_user("u1", bio="old"))
        store.upsert_user(_make_user("u1", bio="new"))
        assert store.get_user("u1").bio == "new"

    def test_find_investors_only_approved(self, store: RecordStore) -> None:
        """Pending investors and non-investors are excluded."""
        store.upsert_user(_make_user("u1"))
        store.upsert_user(_make_user("u2", investor_approval_status="pending"))
        store.upsert_user(_make_user("u3", role="student"))
        assert [u.id for u in store.find_investors()] == ["u1"]


class TestRecordStoreReviews:
    """Tests for reviews."""

    def test_add_review_scores_sentiment_with_rating(self, populated_store: RecordStore) -> None:
        """Sentiment blends comment and rating."""
        review, was_new = populated_store.add_review("s1", "u1", 5, "Innovative and promising")
        assert was_new is True
        assert review.sentiment_label == "positive"
        assert review.sentiment_score == pytest.approx(1.0)

    def test_add_review_twice_updates(self, populated_store: RecordStore) -> None:
        """One review per user and startup."""
        populated_store.add_review("s1", "u1", 5, "Great")
        review, was_new = populated_store.add_review("s1", "u1", 2, "Actually disappointing")
        assert was_new is False
        assert review.sentiment_label == "negative"
        reviews = populated_store.reviews_for("s1")
        assert len(reviews) == 1
        assert reviews[0].rating == 2

    @pytest.mark.parametrize(
        ("startup_id", "rating", "comment", "message"),
        [
            ("s1", 0, "Fine", "between 1 and 5"),
            ("s1", 6, "Fine", "between 1 and 5"),
            ("s1", 3, "  ", "required"),
            ("nope", 3, "Fine", "Startup not found"),
        ],
    )
    def test_add_review_rejects_bad_input(
        self, populated_store: RecordStore, startup_id: str, rating: int, comment: str, message: str
    ) -> None:
        """Bad rating, blank comment or unknown startup raise ValueError."""
        with pytest.raises(ValueError, match=message):
            populated_store.add_review(startup_id, "u1", rating, comment)

    def test_review_stats(self, populated_store: RecordStore) -> None:
        """Average rating rounded to one decimal and count."""
        assert populated_store.review_stats("s1") == {"avgRating": 0.0, "totalReviews": 0}
        populated_store.add_review("s1", "u1", 4, "Solid")
        populated_store.add_review("s1", "u2", 5, "Excellent")
        assert populated_store.review_stats("s1") == {"avgRating": 4.5, "totalReviews": 2}
