from __future__ import annotations

from functools import lru_cache

from openai import AsyncOpenAI

from telugu_chat.utils.logging import get_logger


@lru_cache(maxsize=4)
def get_openai_client(api_key: str | None) -> AsyncOpenAI | None:
    """Return a shared OpenAI client for ``api_key``, or None without a key.

    Retries are disabled: a failed completion is reported to the caller as-is.
    """
    logger = get_logger(__name__)
    if not api_key:
        logger.warning("No OpenAI API key configured; chat relay will answer with the fallback reply")
        return None
    logger.debug("Initializing OpenAI client")
    return AsyncOpenAI(api_key=api_key, max_retries=0)
