from typing import Optional

from openai import AsyncOpenAI

from alttext.config.settings import settings
from alttext.utils.logger import get_logger

logger = get_logger(__name__)

_client: Optional[AsyncOpenAI] = None


class ProviderNotConfiguredError(RuntimeError):
    """Raised when an API route needs OpenAI but OPENAI_API_KEY is unset."""


def get_openai_client() -> AsyncOpenAI:
    """Return the shared AsyncOpenAI client, creating it on first use.

    Built lazily so the server can start (and serve static assets) without a
    key; the relay routes turn the error below into a 500.
    """
    global _client
    if _client is None:
        if not settings.provider_configured:
            raise ProviderNotConfiguredError("OPENAI_API_KEY is not set")
        _client = AsyncOpenAI(api_key=settings.openai_api_key)
        logger.info("OpenAI client initialised")
    return _client
