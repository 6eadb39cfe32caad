"""SQLite-backed record store for startups, users and reviews."""

import json
import logging
import sqlite3
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from campus_match.analysis import analyze_sentiment, generate_tags
from campus_match.models.investor import InvestorProfile
from campus_match.models.startup import Review, Startup
from campus_match.scoring.potential import predict_investment_potential
from campus_match.sources.base import RecordSource

logger = logging.getLogger(__name__)


class RecordStore(RecordSource):
    """
    SQLite store holding platform records as JSON documents.
    Indexed columns (status, category, role, upvote_count) back the chatbot's lookups.
    """

    source_id = "sqlite"

    def __init__(self, db_path: str | Path = "campus_match.db"):
        self._db_path = Path(db_path)
        self._ensure_schema()

    def _connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        schema_path = Path(__file__).parent / "schema.sql"
        with self._connection() as conn:
            conn.executescript(schema_path.read_text())

    # --- startups ---------------------------------------------------------

    def upsert_startup(self, startup: Startup) -> tuple[Startup, bool]:
        """
        Insert or update a startup, regenerating its AI tags and investment potential.
        Returns (stored startup, was_new).
        """
        now = datetime.now(timezone.utc).isoformat()
        startup = self._with_insights(startup)
        if startup.id is None:
            startup = startup.model_copy(update={"id": uuid.uuid4().hex})
        data_str = json.dumps(startup.model_dump(mode="json", by_alias=True), default=str)

        with self._connection() as conn:
            existing = conn.execute("SELECT id FROM startups WHERE id = ?", (startup.id,)).fetchone()
            if existing:
                conn.execute(
                    """
                    UPDATE startups SET
                        name = ?, category = ?, stage = ?, status = ?, upvote_count = ?,
                        data = ?, updated_at = ?
                    WHERE id = ?
                    """,
                    (
                        startup.name,
                        startup.category.lower(),
                        startup.stage,
                        startup.status,
                        startup.engagement,
                        data_str,
                        now,
                        startup.id,
                    ),
                )
            else:
                conn.execute(
                    """
                    INSERT INTO startups (id, name, category, stage, status, upvote_count, data, created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        startup.id,
                        startup.name,
                        startup.category.lower(),
                        startup.stage,
                        startup.status,
                        startup.engagement,
                        data_str,
                        now,
                        now,
                    ),
                )
            conn.commit()
        logger.debug("Stored startup %s (new=%s)", startup.id, existing is None)
        return startup, existing is None

    def _with_insights(self, startup: Startup) -> Startup:
        """Copy of startup with regenerated ai_tags and investment_potential."""
        potential = predict_investment_potential(startup)
        return startup.model_copy(
            update={
                "ai_tags": generate_tags(startup.pitch_text, 5),
                "investment_potential": {"score": potential.score, "prediction": potential.prediction},
            }
        )

    def get_startup(self, startup_id: str) -> Optional[Startup]:
        """Get single startup by id."""
        with self._connection() as conn:
            row = conn.execute("SELECT data FROM startups WHERE id = ?", (startup_id,)).fetchone()
        return Startup.model_validate(json.loads(row["data"])) if row else None

    def set_startup_status(self, startup_id: str, status: str) -> bool:
        """Moderation: set draft | pending | approved | rejected. Returns False if not found."""
        if status not in ("draft", "pending", "approved", "rejected"):
            raise ValueError(f"Invalid startup status: {status}")
        startup = self.get_startup(startup_id)
        if startup is None:
            return False
        self.upsert_startup(startup.model_copy(update={"status": status}))
        return True

    def find_startups(self, category: Optional[str] = None, limit: Optional[int] = None) -> list[Startup]:
        """Approved startups, most upvoted then most recent first."""
        sql = "SELECT data FROM startups WHERE status = 'approved'"
        params: list = []
        if category:
            sql += " AND category = ?"
            params.append(category.lower())
        sql += " ORDER BY upvote_count DESC, created_at DESC"
        if limit is not None:
            sql += " LIMIT ?"
            params.append(limit)
        with self._connection() as conn:
            rows = conn.execute(sql, params).fetchall()
        return [Startup.model_validate(json.loads(r["data"])) for r in rows]

    # --- users ------------------------------------------------------------

    def upsert_user(self, user: InvestorProfile) -> InvestorProfile:
        """Insert or update a user; assigns an id when missing."""
        now = datetime.now(timezone.utc).isoformat()
        if user.id is None:
            user = user.model_copy(update={"id": uuid.uuid4().hex})
        data_str = json.dumps(user.model_dump(mode="json", by_alias=True), default=str)
        with self._connection() as conn:
            conn.execute(
                """
                INSERT INTO users (id, username, role, approval_status, data, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    username = excluded.username, role = excluded.role,
                    approval_status = excluded.approval_status,
                    data = excluded.data, updated_at = excluded.updated_at
                """,
                (user.id, user.username, user.role, user.investor_approval_status, data_str, now, now),
            )
            conn.commit()
        return user

    def get_user(self, user_id: str) -> Optional[InvestorProfile]:
        """Get single user by id."""
        with self._connection() as conn:
            row = conn.execute("SELECT data FROM users WHERE id = ?", (user_id,)).fetchone()
        return InvestorProfile.model_validate(json.loads(row["data"])) if row else None

    def find_investors(self, limit: Optional[int] = None) -> list[InvestorProfile]:
        """Investors with approved accounts."""
        sql = "SELECT data FROM users WHERE role = 'investor' AND approval_status = 'approved' ORDER BY created_at"
        params: list = []
        if limit is not None:
            sql += " LIMIT ?"
            params.append(limit)
        with self._connection() as conn:
            rows = conn.execute(sql, params).fetchall()
        return [InvestorProfile.model_validate(json.loads(r["data"])) for r in rows]

    # --- reviews ----------------------------------------------------------

    def add_review(self, startup_id: str, user_id: str, rating: int, comment: str) -> tuple[Review, bool]:
        """
        Add or update a user's review of a startup, scoring its sentiment with the rating.
        Returns (review, was_new). Raises ValueError for bad rating/comment or unknown startup.
        """
        if not comment or not comment.strip():
            raise ValueError("Rating and comment are required")
        if not 1 <= rating <= 5:
            raise ValueError("Rating must be between 1 and 5")
        if self.get_startup(startup_id) is None:
            raise ValueError(f"Startup not found: {startup_id}")

        sentiment = analyze_sentiment(comment, rating)
        now = datetime.now(timezone.utc).isoformat()
        with self._connection() as conn:
            existing = conn.execute(
                "SELECT id FROM reviews WHERE startup_id = ? AND user_id = ?",
                (startup_id, user_id),
            ).fetchone()
            if existing:
                conn.execute(
                    """
                    UPDATE reviews SET rating = ?, comment = ?, sentiment_score = ?, sentiment_label = ?, updated_at = ?
                    WHERE id = ?
                    """,
                    (rating, comment, sentiment.score, sentiment.label, now, existing["id"]),
                )
                review_id = existing["id"]
            else:
                cursor = conn.execute(
                    """
                    INSERT INTO reviews (startup_id, user_id, rating, comment, sentiment_score, sentiment_label, created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (startup_id, user_id, rating, comment, sentiment.score, sentiment.label, now, now),
                )
                review_id = cursor.lastrowid or 0
            conn.commit()

        review = Review(
            id=review_id,
            startup_id=startup_id,
            user_id=user_id,
            rating=rating,
            comment=comment,
            sentiment_score=sentiment.score,
            sentiment_label=sentiment.label,
        )
        return review, existing is None

    def reviews_for(self, startup_id: str) -> list[Review]:
        """Reviews of a startup, newest first."""
        with self._connection() as conn:
            rows = conn.execute(
                "SELECT * FROM reviews WHERE startup_id = ? ORDER BY created_at DESC, id DESC",
                (startup_id,),
            ).fetchall()
        return [self._row_to_review(r) for r in rows]

    def review_stats(self, startup_id: str) -> dict[str, float]:
        """Average rating (1 decimal) and review count."""
        reviews = self.reviews_for(startup_id)
        avg = sum(r.rating for r in reviews) / len(reviews) if reviews else 0.0
        return {"avgRating": round(avg, 1), "totalReviews": len(reviews)}

    def _row_to_review(self, row: sqlite3.Row) -> Review:
        return Review(
            id=row["id"],
            startup_id=row["startup_id"],
            user_id=row["user_id"],
            rating=row["rating"],
            comment=row["comment"],
            sentiment_score=row["sentiment_score"],
            sentiment_label=row["sentiment_label"],
        )
