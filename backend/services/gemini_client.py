"""Text-generation client interface and its Google Gemini implementation."""

import logging
from abc import ABC, abstractmethod

import httpx
from google import genai
from google.genai import errors, types

from config import settings
from services.errors import ExternalServiceUnavailable, UpstreamError

logger = logging.getLogger(__name__)

_client: "GeminiTextClient | None" = None


class BaseTextClient(ABC):
    """Anything that turns a prompt into free text.

    The text may or may not follow ``format_instructions``; validating it
    is the caller's job.
    """

    @abstractmethod
    async def complete(self, prompt: str, format_instructions: str) -> str:
        """Return the raw completion text."""


class GeminiTextClient(BaseTextClient):
    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        temperature: float = 0.0,
        max_output_tokens: int = 2048,
    ) -> None:
        self._genai = genai.Client(api_key=api_key)
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

    async def complete(self, prompt: str, format_instructions: str) -> str:
        try:
            response = await self._genai.aio.models.generate_content(
                model=self.model,
                contents=f"{prompt}\n\n{format_instructions}",
                config=types.GenerateContentConfig(
                    temperature=self.temperature,
                    max_output_tokens=self.max_output_tokens,
                    response_mime_type="application/json",
                ),
            )
        except errors.APIError as e:
            if e.code in (401, 403):
                raise ExternalServiceUnavailable(f"Gemini rejected the credential: {e.message}") from e
            raise UpstreamError(f"Gemini API error {e.code}: {e.message}") from e
        except (httpx.NetworkError, ConnectionError) as e:
            raise ExternalServiceUnavailable(f"Gemini is unreachable: {e}") from e

        return response.text or ""


def get_client() -> GeminiTextClient | None:
    """Process-wide Gemini client, or None when no credential is configured."""
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - AI match scoring disabled")
        return None
    if _client is None:
        _client = GeminiTextClient(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            temperature=settings.llm_temperature,
            max_output_tokens=settings.llm_max_output_tokens,
        )
    return _client
