"""Shared pytest fixtures for the test suite.

Provides:
- Test environment (set BEFORE app imports)
- Isolated in-memory SQLite session per test
- Fake text-generation client for the Gemini seam
"""
import json
import os

import pytest

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["GEMINI_API_KEY"] = "test-key"
os.environ["GEMINI_MODEL"] = "gemini-2.0-flash"
os.environ["DB_CREATE_ALL"] = "false"

from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from db.base import Base  # noqa: E402
import models.industry_insight  # noqa: E402,F401
import models.user  # noqa: E402,F401

PRIMARY_MODEL = "gemini-2.0-flash"
FALLBACK_MODEL = "text-bison-001"


class FakeTextClient:
    """Records calls; each model answers with a fixed text or raises."""

    def __init__(self, responses: dict[str, str | Exception]):
        self.responses = responses
        self.calls: list[tuple[str, str]] = []

    async def generate_text(self, model: str, prompt: str) -> str:
        self.calls.append((model, prompt))
        result = self.responses[model]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def db_session():
    """Fresh in-memory database for each test function."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def insight_payload() -> dict:
    return {
        "salaryRanges": [
            {"role": "Data Engineer", "min": 90000, "median": 115000, "max": 150000, "location": "US"},
            {"role": "ML Engineer", "min": 110000, "median": 140000, "max": 190000, "location": "US"},
            {"role": "Data Analyst", "min": 60000, "median": 75000, "max": 95000, "location": "US"},
            {"role": "Data Scientist", "min": 95000, "median": 125000, "max": 170000, "location": "US"},
            {"role": "Analytics Manager", "min": 120000, "median": 150000, "max": 200000, "location": "US"},
        ],
        "growthRate": 12.5,
        "demandLevel": "High",
        "topSkills": ["Python", "SQL", "Spark", "Statistics", "Cloud"],
        "marketOutlook": "Positive",
        "keyTrends": ["GenAI", "MLOps", "Data mesh", "Real-time analytics", "Privacy"],
        "recommendedSkills": ["LLM tooling", "dbt", "Kubernetes", "Airflow", "Rust"],
    }


@pytest.fixture
def insight_text(insight_payload) -> str:
    return "```json\n" + json.dumps(insight_payload) + "\n```"


@pytest.fixture
def make_text_client():
    return FakeTextClient
