import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from agent.insight_generator import InsightGenerator
from core.config import settings
from core.errors import (
    AuthenticationError,
    NotFoundError,
    ProfileIncompleteError,
)
from crud.industry_insight import create_industry_insight
from crud.user import get_user_by_auth_id
from models.industry_insight import IndustryInsight

logger = logging.getLogger(__name__)


async def get_or_create_insights(
    db: Session,
    identity: str | None,
    generator: InsightGenerator,
    now: datetime | None = None,
) -> IndustryInsight:
    """
    Возвращает инсайты по отрасли текущего пользователя.

    Если для отрасли ещё нет записи, генерирует её и сохраняет с датой
    следующего обновления через INSIGHT_REFRESH_DAYS. Существующая запись
    возвращается как есть, next_update не проверяется.
    """
    if not identity:
        raise AuthenticationError("Unauthorized")

    user = get_user_by_auth_id(db, identity)
    if not user:
        raise NotFoundError("User not found")

    if user.industry_insight is not None:
        return user.industry_insight

    if not user.industry:
        raise ProfileIncompleteError("Industry is not set for user")

    insights = await generator.generate(user.industry)

    now = now or datetime.now(timezone.utc)
    record = create_industry_insight(
        db,
        industry=user.industry,
        data=insights,
        last_updated=now,
        next_update=now + timedelta(days=settings.INSIGHT_REFRESH_DAYS),
    )
    logger.info("Created insights for industry=%s (id=%s)", record.industry, record.id)
    return record
