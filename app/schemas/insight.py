from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DemandLevel = Literal["High", "Medium", "Low"]
MarketOutlook = Literal["Positive", "Neutral", "Negative"]


def _match_choice(value, choices: tuple[str, ...]):
    if isinstance(value, str):
        for choice in choices:
            if value.strip().lower() == choice.lower():
                return choice
    return value


class CamelModel(BaseModel):
    """Поля в snake_case, JSON в camelCase (как отдаёт модель и фронт)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SalaryRange(CamelModel):
    """Вилка зарплаты для одной роли. min ≤ median ≤ max не проверяется."""
    role: str
    min: float
    median: float
    max: float
    location: str


class IndustryInsightData(CamelModel):
    """
    Сгенерированные данные по отрасли, ещё не сохранённые в БД.

    Значения по умолчанию совпадают с минимальным запасным ответом,
    поэтому пропущенные моделью поля не ломают разбор.
    """
    salary_ranges: list[SalaryRange] = Field(default_factory=list)
    growth_rate: float = 0.0
    demand_level: DemandLevel = "Medium"
    top_skills: list[str] = Field(default_factory=list)
    market_outlook: MarketOutlook = "Neutral"
    key_trends: list[str] = Field(default_factory=list)
    recommended_skills: list[str] = Field(default_factory=list)

    @field_validator("demand_level", mode="before")
    @classmethod
    def _demand_level(cls, value):
        return _match_choice(value, ("High", "Medium", "Low"))

    @field_validator("market_outlook", mode="before")
    @classmethod
    def _market_outlook(cls, value):
        return _match_choice(value, ("Positive", "Neutral", "Negative"))


class IndustryInsightOut(IndustryInsightData):
    """Сохранённая запись инсайтов."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    industry: str
    last_updated: datetime | None = None
    next_update: datetime
