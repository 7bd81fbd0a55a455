import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.industry_insight import IndustryInsight
from schemas.insight import IndustryInsightData

logger = logging.getLogger(__name__)


def get_insight_by_industry(db: Session, industry: str) -> IndustryInsight | None:
    """Returns the stored insight record for an industry, if any."""
    return (
        db.query(IndustryInsight)
        .filter(IndustryInsight.industry == industry)
        .first()
    )


def create_industry_insight(
    db: Session,
    industry: str,
    data: IndustryInsightData,
    last_updated: datetime,
    next_update: datetime,
) -> IndustryInsight:
    """
    Persists a freshly generated insight for the industry.

    If a concurrent request already stored a record for the same industry,
    the unique constraint rejects this insert and the stored record is
    returned instead.
    """
    insight = IndustryInsight(
        industry=industry,
        salary_ranges=[r.model_dump() for r in data.salary_ranges],
        growth_rate=data.growth_rate,
        demand_level=data.demand_level,
        top_skills=list(data.top_skills),
        market_outlook=data.market_outlook,
        key_trends=list(data.key_trends),
        recommended_skills=list(data.recommended_skills),
        last_updated=last_updated,
        next_update=next_update,
    )
    db.add(insight)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        existing = get_insight_by_industry(db, industry)
        if existing is None:
            raise
        logger.info("Insight for industry=%s already stored, reusing it", industry)
        return existing
    db.refresh(insight)
    return insight
