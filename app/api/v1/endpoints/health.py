import logging

from fastapi import APIRouter, Depends, HTTPException, status

from agent.insight_generator import InsightGenerator
from agent.prompts import HEALTH_CHECK_PROMPT
from api.deps import get_insight_generator

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/health_check", status_code=status.HTTP_200_OK)
def health_check() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/health_check/llm", status_code=status.HTTP_200_OK)
async def health_check_llm(
    generator: InsightGenerator = Depends(get_insight_generator),
) -> dict[str, str]:
    """
    Проверяет, что основная модель отвечает на короткий запрос.
    """
    try:
        answer = await generator.client.generate_text(
            generator.primary_model, HEALTH_CHECK_PROMPT
        )
    except Exception as exc:
        logger.error("LLM health check failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"LLM error: {exc}",
        )
    return {
        "status": "ok",
        "model": generator.primary_model,
        "response": answer,
    }
