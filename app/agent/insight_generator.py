import logging

from agent.llm import TextGenerationClient
from agent.parsing import ParseStatus, parse_insight_text
from agent.prompts import build_insights_prompt
from core.config import settings
from core.errors import RemoteCapabilityError
from schemas.insight import IndustryInsightData

logger = logging.getLogger(__name__)

FALLBACK_MODEL = "text-bison-001"


class InsightGenerator:
    """
    Генерирует инсайты по отрасли через удалённую модель.

    Сначала вызывается основная модель, при любой ошибке один раз
    резервная. Плохой ответ никогда не приводит к исключению: вместо него
    подставляются запасные данные. Исключение возможно только если
    не ответила ни одна из моделей.
    """

    def __init__(
        self,
        client: TextGenerationClient,
        primary_model: str = settings.GEMINI_MODEL,
        fallback_model: str = FALLBACK_MODEL,
    ):
        self.client = client
        self.primary_model = primary_model
        self.fallback_model = fallback_model

    async def _call_model(self, prompt: str) -> str:
        try:
            return await self.client.generate_text(self.primary_model, prompt)
        except Exception as exc:
            logger.warning(
                "Primary model %s failed, attempting fallback %s: %s",
                self.primary_model, self.fallback_model, exc,
            )

        try:
            return await self.client.generate_text(self.fallback_model, prompt)
        except Exception as exc:
            logger.error(
                "Fallback model %s failed as well: %s", self.fallback_model, exc
            )
            raise RemoteCapabilityError(
                f"Both {self.primary_model} and {self.fallback_model} failed"
            ) from exc

    async def generate(self, industry: str) -> IndustryInsightData:
        prompt = build_insights_prompt(industry)
        text = await self._call_model(prompt)

        outcome = parse_insight_text(text, industry)
        if outcome.status is not ParseStatus.VALID:
            logger.info(
                "Insights for industry=%s %s: %s",
                industry, outcome.status.value, outcome.reason,
            )
        return outcome.insight
