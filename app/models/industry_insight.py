from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Float,
    Integer,
    String,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func

from db.base import Base

JSONList = JSON().with_variant(JSONB, "postgresql")


class IndustryInsight(Base):
    """
    Сводка по рынку труда для одной отрасли.

    Одна запись на отрасль, её видят все пользователи этой отрасли.

    Attributes:
        id: Уникальный идентификатор записи.
        industry: Отрасль (уникальный ключ).
        salary_ranges: Список вилок зарплат по ролям.
        growth_rate: Рост отрасли, %.
        demand_level: Спрос на специалистов (High/Medium/Low).
        top_skills: Востребованные навыки.
        market_outlook: Прогноз рынка (Positive/Neutral/Negative).
        key_trends: Ключевые тренды.
        recommended_skills: Рекомендуемые навыки.
        last_updated: Время генерации.
        next_update: Плановое время обновления.
    """
    __tablename__ = "industry_insights"

    id = Column(Integer, primary_key=True)
    industry = Column(String, unique=True, nullable=False, index=True)

    salary_ranges = Column(JSONList, nullable=False, default=list)
    growth_rate = Column(Float, nullable=False, default=0.0)
    demand_level = Column(String, nullable=False, default="Medium")
    top_skills = Column(JSONList, nullable=False, default=list)
    market_outlook = Column(String, nullable=False, default="Neutral")
    key_trends = Column(JSONList, nullable=False, default=list)
    recommended_skills = Column(JSONList, nullable=False, default=list)

    last_updated = Column(
        DateTime(timezone=True),
        default=func.now(),
        comment="Время генерации",
    )
    next_update = Column(
        DateTime(timezone=True),
        nullable=False,
        comment="Плановое время обновления",
    )
