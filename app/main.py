from fastapi import FastAPI
from fastapi.concurrency import asynccontextmanager
from core.config import settings
from api.v1.router import router as api_v1_router
from agent.insight_generator import InsightGenerator
from agent.llm import GeminiTextClient
from db.session import init_db

import logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DB_CREATE_ALL:
        init_db()
    client = GeminiTextClient(api_key=settings.gemini_api_key.get_secret_value())
    app.state.insight_generator = InsightGenerator(
        client, primary_model=settings.GEMINI_MODEL
    )
    logger.info("Insight generator ready (primary model %s)", settings.GEMINI_MODEL)
    yield


logger = logging.getLogger(__name__)

app = FastAPI(
    title="Industry Insights API", version="0.1.0", lifespan=lifespan
)

if settings.DEBUG:
    import debugpy

    debugpy.listen(("0.0.0.0", 5678))
    logger.info("Debugger enabled!")

app.include_router(api_v1_router, prefix=settings.API_V1_STR)


def run() -> None:
    import uvicorn

    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
