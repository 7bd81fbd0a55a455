"""
Разбор ответа модели с инсайтами по отрасли.

Модель часто оборачивает JSON в markdown-блок, иногда отвечает текстом
или отдаёт неполную структуру. Здесь ответ очищается, разбирается и
проверяется по схеме ``IndustryInsightData``; всё, что нельзя использовать,
заменяется консервативными запасными данными.
"""
import enum
import json
import logging
import re
from dataclasses import dataclass
from typing import Any

from pydantic import TypeAdapter, ValidationError

from core.errors import MalformedOutputError
from schemas.insight import IndustryInsightData, SalaryRange

__all__ = [
    "ParseStatus",
    "ParseOutcome",
    "strip_code_fences",
    "fallback_salary_ranges",
    "default_insight",
    "parse_insight_text",
]

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r"```(?:json)?\n?")

# (уровень, min, median, max)
_FALLBACK_TIERS = (
    ("Entry Level", 30000, 40000, 55000),
    ("Associate", 45000, 60000, 80000),
    ("Mid-level", 65000, 85000, 110000),
    ("Senior", 90000, 120000, 160000),
    ("Lead/Manager", 120000, 150000, 200000),
)
_FALLBACK_LOCATION = "Remote"

_SALARY_RANGES = TypeAdapter(list[SalaryRange])


class ParseStatus(str, enum.Enum):
    VALID = "valid"
    REPAIRED = "repaired"  # salaryRanges заменены запасными
    DEFAULTED = "defaulted"  # ответ отброшен целиком


@dataclass
class ParseOutcome:
    status: ParseStatus
    insight: IndustryInsightData
    reason: str | None = None


def strip_code_fences(text: str) -> str:
    """Убирает ```/```json вокруг ответа и пробелы по краям."""
    return _CODE_FENCE_RE.sub("", text).strip()


def fallback_salary_ranges(industry: str) -> list[SalaryRange]:
    """
    Запасные вилки зарплат: пять уровней, роль = "<отрасль> - <уровень>".

    Значения заведомо консервативные и не зависят ни от чего, кроме отрасли.
    """
    return [
        SalaryRange(
            role=f"{industry} - {tier}",
            min=low,
            median=median,
            max=high,
            location=_FALLBACK_LOCATION,
        )
        for tier, low, median, high in _FALLBACK_TIERS
    ]


def default_insight(industry: str) -> IndustryInsightData:
    """Минимальный ответ, когда от модели ничего не удалось получить."""
    return IndustryInsightData(
        salary_ranges=fallback_salary_ranges(industry),
        growth_rate=0,
        demand_level="Medium",
        top_skills=[],
        market_outlook="Neutral",
        key_trends=[],
        recommended_skills=[],
    )


def _load_object(cleaned: str) -> dict[str, Any]:
    if not cleaned:
        raise MalformedOutputError("empty model output")
    try:
        payload = json.loads(cleaned)
    except (ValueError, RecursionError) as exc:
        raise MalformedOutputError(f"invalid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise MalformedOutputError(
            f"expected JSON object, got {type(payload).__name__}"
        )
    return payload


def _usable_salary_ranges(raw: Any) -> list[SalaryRange] | None:
    if not isinstance(raw, list) or not raw:
        return None
    try:
        return _SALARY_RANGES.validate_python(raw)
    except ValidationError:
        return None


def parse_insight_text(text: str, industry: str) -> ParseOutcome:
    """
    Разбирает текст ответа модели.

    * VALID — объект корректен, salaryRanges непустые.
    * REPAIRED — объект корректен, но salaryRanges отсутствуют, пусты или
      битые (заменяются запасными), либо отдельные поля неверного типа
      (сбрасываются к значениям по умолчанию); остальные поля сохраняются.
    * DEFAULTED — пусто, не JSON или не объект; возвращается
      ``default_insight``.
    """
    cleaned = strip_code_fences(text or "")
    try:
        payload = _load_object(cleaned)
    except MalformedOutputError as exc:
        logger.warning(
            "Failed to parse model output for industry=%s, using fallback insights: %s",
            industry, exc,
        )
        return ParseOutcome(ParseStatus.DEFAULTED, default_insight(industry), str(exc))

    status = ParseStatus.VALID
    reason = None
    if _usable_salary_ranges(payload.get("salaryRanges")) is None:
        logger.warning(
            "Model returned no usable salaryRanges for industry=%s, using fallback ranges",
            industry,
        )
        payload = {**payload, "salaryRanges": fallback_salary_ranges(industry)}
        status = ParseStatus.REPAIRED
        reason = "salaryRanges missing or unusable"

    try:
        insight = IndustryInsightData.model_validate(payload)
    except ValidationError as exc:
        bad_fields = {err["loc"][0] for err in exc.errors() if err["loc"]}
        logger.warning(
            "Model output for industry=%s has invalid fields %s, resetting them to defaults",
            industry, sorted(map(str, bad_fields)),
        )
        payload = {k: v for k, v in payload.items() if k not in bad_fields}
        if "salaryRanges" not in payload:
            payload["salaryRanges"] = fallback_salary_ranges(industry)
        try:
            insight = IndustryInsightData.model_validate(payload)
        except ValidationError as retry_exc:
            logger.warning(
                "Model output for industry=%s is still invalid, using fallback insights: %s",
                industry, retry_exc.errors(include_url=False),
            )
            return ParseOutcome(
                ParseStatus.DEFAULTED, default_insight(industry), str(retry_exc)
            )
        status = ParseStatus.REPAIRED
        reason = ", ".join(
            filter(None, [reason, f"invalid fields reset: {sorted(map(str, bad_fields))}"])
        )

    return ParseOutcome(status, insight, reason)
