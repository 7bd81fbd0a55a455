from fastapi import APIRouter
from api.v1.endpoints import (
    auth,
    user,
    health,
    industry_insights,
)

router = APIRouter()
router.include_router(health.router, tags=["Health"])
router.include_router(auth.router, tags=["Auth"])
router.include_router(user.router, tags=["User"])
router.include_router(industry_insights.router, tags=["Industry Insights"])
