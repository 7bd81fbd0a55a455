"""Tests for get-or-create of industry insights."""
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from agent.parsing import default_insight
from core.errors import (
    AuthenticationError,
    NotFoundError,
    ProfileIncompleteError,
    RemoteCapabilityError,
)
from crud.industry_insight import create_industry_insight, get_insight_by_industry
from crud.user import create, set_industry
from models.industry_insight import IndustryInsight
from schemas.insight import IndustryInsightData
from services.industry_insights import get_or_create_insights

NOW = datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)


def _generator(result=None, error=None):
    generator = MagicMock()
    generator.generate = AsyncMock(return_value=result, side_effect=error)
    return generator


def _naive(value: datetime) -> datetime:
    return value.replace(tzinfo=None)


@pytest.mark.asyncio
async def test_missing_identity_raises_before_store_access():
    db = MagicMock()
    generator = _generator()

    with pytest.raises(AuthenticationError):
        await get_or_create_insights(db, None, generator)

    db.query.assert_not_called()
    db.add.assert_not_called()
    generator.generate.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_user_raises_not_found(db_session):
    with pytest.raises(NotFoundError):
        await get_or_create_insights(db_session, "ghost", _generator())


@pytest.mark.asyncio
async def test_user_without_industry_is_rejected(db_session):
    create(db_session, "u1")
    generator = _generator()

    with pytest.raises(ProfileIncompleteError):
        await get_or_create_insights(db_session, "u1", generator)

    generator.generate.assert_not_awaited()


@pytest.mark.asyncio
async def test_first_request_generates_and_stores(db_session, insight_payload):
    user = create(db_session, "u1")
    set_industry(db_session, user, "Data")
    generated = IndustryInsightData.model_validate(insight_payload)
    generator = _generator(result=generated)

    record = await get_or_create_insights(db_session, "u1", generator, now=NOW)

    generator.generate.assert_awaited_once_with("Data")
    assert record.id is not None
    assert record.industry == "Data"
    assert record.growth_rate == 12.5
    assert record.demand_level == "High"
    assert record.market_outlook == "Positive"
    assert record.salary_ranges[0]["role"] == "Data Engineer"
    assert record.key_trends == insight_payload["keyTrends"]
    assert _naive(record.next_update) == _naive(NOW + timedelta(days=7))
    assert db_session.query(IndustryInsight).count() == 1


@pytest.mark.asyncio
async def test_existing_insight_is_returned_without_generation(db_session):
    user = create(db_session, "u1")
    set_industry(db_session, user, "Retail")
    stored = create_industry_insight(
        db_session,
        industry="Retail",
        data=default_insight("Retail"),
        last_updated=NOW,
        next_update=NOW - timedelta(days=30),  # просрочено, но не обновляется
    )
    generator = _generator()

    record = await get_or_create_insights(db_session, "u1", generator)

    generator.generate.assert_not_awaited()
    assert record.id == stored.id
    assert _naive(record.next_update) == _naive(NOW - timedelta(days=30))


@pytest.mark.asyncio
async def test_insight_is_shared_between_users_of_one_industry(db_session, insight_payload):
    for auth_id in ("u1", "u2"):
        set_industry(db_session, create(db_session, auth_id), "Data")
    generator = _generator(result=IndustryInsightData.model_validate(insight_payload))

    first = await get_or_create_insights(db_session, "u1", generator, now=NOW)
    second = await get_or_create_insights(db_session, "u2", generator, now=NOW)

    assert first.id == second.id
    generator.generate.assert_awaited_once()


@pytest.mark.asyncio
async def test_generation_failure_writes_nothing(db_session):
    set_industry(db_session, create(db_session, "u1"), "Data")
    generator = _generator(error=RemoteCapabilityError("both models failed"))

    with pytest.raises(RemoteCapabilityError):
        await get_or_create_insights(db_session, "u1", generator)

    assert db_session.query(IndustryInsight).count() == 0


def test_duplicate_create_returns_stored_record(db_session):
    first = create_industry_insight(
        db_session, "Energy", default_insight("Energy"), NOW, NOW + timedelta(days=7)
    )
    second = create_industry_insight(
        db_session, "Energy", default_insight("Energy"), NOW, NOW + timedelta(days=7)
    )

    assert second.id == first.id
    assert db_session.query(IndustryInsight).count() == 1
    assert get_insight_by_industry(db_session, "Energy").id == first.id
