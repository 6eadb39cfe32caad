"""Pytest fixtures for campus-match tests."""

import tempfile
from pathlib import Path

import pytest

from campus_match.models.investor import InvestorProfile
from campus_match.models.startup import Startup
from campus_match.store import RecordStore


@pytest.fixture
def sample_startup_rows() -> list[dict]:
    """Approved startups as the platform API returns them (camelCase JSON)."""
    return [
        {
            "_id": "s1",
            "name": "PayEase",
            "tagline": "Mobile payments for students",
            "description": "Split rent and pay bills with instant mobile payments on campus.",
            "category": "fintech",
            "stage": "mvp",
            "upvoteCount": 12,
            "status": "approved",
        },
        {
            "_id": "s2",
            "name": "LearnLoop",
            "tagline": "Adaptive quizzes for exam prep",
            "description": "Personalized learning paths help students master course material faster.",
            "category": "edtech",
            "stage": "launched",
            "upvoteCount": 30,
            "status": "approved",
        },
        {
            "_id": "s3",
            "name": "MediTrack",
            "tagline": "Medication reminders for patients",
            "description": "Track doses and share health records with your doctor.",
            "category": "healthtech",
            "stage": "idea",
            "upvoteCount": 5,
            "status": "approved",
        },
        {
            "_id": "s4",
            "name": "CropSense",
            "tagline": "Soil sensors for small farms",
            "description": "Sensors measure soil moisture and send irrigation alerts to farmers.",
            "category": "agritech",
            "stage": "prototype",
            "upvoteCount": 8,
            "status": "approved",
        },
    ]


@pytest.fixture
def sample_startups(sample_startup_rows: list[dict]) -> list[Startup]:
    """Startup models built from sample rows."""
    return [Startup.model_validate(row) for row in sample_startup_rows]


@pytest.fixture
def fintech_investor() -> InvestorProfile:
    """Approved investor interested in student payments."""
    return InvestorProfile(
        id="u1",
        username="vc_ada",
        full_name="Ada",
        bio="I back mobile payments founders",
        role="investor",
        investor_approval_status="approved",
        investment_domains=["Fintech"],
    )


@pytest.fixture
def temp_db() -> Path:
    """Temporary database path for isolated tests."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        path = Path(f.name)
    yield path
    path.unlink(missing_ok=True)


@pytest.fixture
def store(temp_db: Path) -> RecordStore:
    """RecordStore with temporary database."""
    return RecordStore(temp_db)


@pytest.fixture
def populated_store(store: RecordStore, sample_startups: list[Startup]) -> RecordStore:
    """RecordStore holding the sample startups."""
    for startup in sample_startups:
        store.upsert_startup(startup)
    return store
