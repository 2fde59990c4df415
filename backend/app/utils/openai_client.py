from __future__ import annotations

from functools import lru_cache

from openai import AsyncOpenAI

from app.config import settings
from app.utils.logging import get_logger


def is_model_configured() -> bool:
    return bool(settings.openai_api_key)


@lru_cache(maxsize=1)
def _build_openai_client(api_key: str) -> AsyncOpenAI:
    logger = get_logger(__name__)
    logger.debug("Initializing OpenAI client with APP_OPENAI_API_KEY")
    return AsyncOpenAI(api_key=api_key)


def get_openai_client() -> AsyncOpenAI | None:
    """Return a shared OpenAI client, or None when no API key is configured.

    A missing key is a configuration error that callers report to the client;
    it is never replaced by the ambient OPENAI_API_KEY.
    """
    if not settings.openai_api_key:
        return None
    return _build_openai_client(settings.openai_api_key)
