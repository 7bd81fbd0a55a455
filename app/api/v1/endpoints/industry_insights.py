import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from agent.insight_generator import InsightGenerator
from api import deps
from core.errors import (
    AuthenticationError,
    NotFoundError,
    ProfileIncompleteError,
    RemoteCapabilityError,
)
from db.session import get_db
from schemas.insight import IndustryInsightOut
from services.industry_insights import get_or_create_insights

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/industry-insights", response_model=IndustryInsightOut)
async def get_industry_insights(
    identity: str | None = Depends(deps.get_current_identity),
    db: Session = Depends(get_db),
    generator: InsightGenerator = Depends(deps.get_insight_generator),
):
    """
    Инсайты по отрасли пользователя. При первом запросе генерируются
    и сохраняются, дальше отдаются из БД.
    """
    try:
        insight = await get_or_create_insights(db, identity, generator)
    except AuthenticationError as exc:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, detail=str(exc))
    except NotFoundError as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=str(exc))
    except ProfileIncompleteError as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except RemoteCapabilityError as exc:
        logger.error("Insight generation failed for %s: %s", identity, exc)
        raise HTTPException(
            status.HTTP_502_BAD_GATEWAY, detail=f"Assistant error: {exc}"
        )
    return IndustryInsightOut.model_validate(insight)
