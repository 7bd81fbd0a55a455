from typing import Protocol

from core.config import settings

from langchain_core.messages import BaseMessage
from langchain_google_genai import ChatGoogleGenerativeAI
import logging

logger = logging.getLogger(__name__)


class TextGenerationClient(Protocol):
    """Удалённая генерация текста: модель + промпт -> текст ответа."""

    async def generate_text(self, model: str, prompt: str) -> str:
        ...


def create_llm(model: str = settings.GEMINI_MODEL,
               api_key: str | None = None,
               temperature: float = settings.temperature,
               top_p: float = settings.top_p) -> ChatGoogleGenerativeAI:
    if api_key is None:
        api_key = settings.gemini_api_key.get_secret_value()
    if not api_key:
        logger.error("Google API key is not configured.")
        raise ValueError("Google API key is not configured.")

    logger.info(f"SET LLM google {model}")
    return ChatGoogleGenerativeAI(
        model=model,
        google_api_key=api_key,
        temperature=temperature,
        top_p=top_p,
        max_retries=settings.LLM_MAX_RETRIES,
    )


def message_text(message: BaseMessage) -> str:
    """Достаёт текст из ответа модели (строка или список частей)."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type", "text") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class GeminiTextClient:
    """
    Клиент Gemini поверх LangChain.

    Создаётся один раз на процесс (в lifespan приложения) и передаётся
    генератору явно. Чат-модели кешируются по идентификатору модели.
    """

    def __init__(self, api_key: str, temperature: float = settings.temperature,
                 top_p: float = settings.top_p):
        self._api_key = api_key
        self._temperature = temperature
        self._top_p = top_p
        self._models: dict[str, ChatGoogleGenerativeAI] = {}

    def _get_model(self, model: str) -> ChatGoogleGenerativeAI:
        if model not in self._models:
            self._models[model] = create_llm(
                model=model,
                api_key=self._api_key,
                temperature=self._temperature,
                top_p=self._top_p,
            )
        return self._models[model]

    async def generate_text(self, model: str, prompt: str) -> str:
        response = await self._get_model(model).ainvoke(prompt)
        return message_text(response)
