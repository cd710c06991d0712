"""
LLM client for the lesson generator.
"""

import asyncio
import logging
from typing import List, Optional
from abc import ABC, abstractmethod

import google.generativeai as genai

from .models import ConversationMessage, LLMProvider
from .config import get_settings

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """Raised when a provider call fails or returns nothing usable."""


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    provider: LLMProvider

    @abstractmethod
    async def generate_response(
        self,
        messages: List[ConversationMessage],
        max_tokens: int = 1000,
        temperature: float = 0.7
    ) -> str:
        """Generate a response from the LLM."""
        pass


class GeminiClient(LLMClient):
    """Google Gemini API client."""

    provider = LLMProvider.GOOGLE

    def __init__(self, api_key: str, model: str = "gemini-1.5-flash", timeout: Optional[float] = None):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        genai.configure(api_key=api_key)
        self.model_obj = genai.GenerativeModel(model)

    @staticmethod
    def _format_prompt(messages: List[ConversationMessage]) -> str:
        # A lone prompt is sent verbatim; conversations are flattened with role tags
        if len(messages) == 1:
            return messages[0].content
        return "\n".join([
            f"[{msg.role.value.upper()}] {msg.content}" for msg in messages
        ])

    async def generate_response(
        self,
        messages: List[ConversationMessage],
        max_tokens: int = 1000,
        temperature: float = 0.7
    ) -> str:
        """Generate response using Gemini API."""
        prompt = self._format_prompt(messages)
        try:
            logger.debug(">>> [Gemini] About to call Gemini API")
            # Gemini's SDK is sync, so run it in a worker thread
            call = asyncio.to_thread(
                self.model_obj.generate_content,
                prompt,
                generation_config={
                    "max_output_tokens": max_tokens,
                    "temperature": temperature
                }
            )
            if self.timeout:
                response = await asyncio.wait_for(call, timeout=self.timeout)
            else:
                response = await call
            logger.debug("<<< [Gemini] Gemini API call returned")
            return response.text or ""
        except asyncio.TimeoutError:
            raise LLMError(f"Gemini API call timed out after {self.timeout} seconds")
        except Exception as e:
            raise LLMError(f"Gemini API error: {str(e)}") from e


# Global client instance
_llm_client: Optional[LLMClient] = None


def get_llm_client() -> Optional[LLMClient]:
    """Get the global LLM client, or None when no API key is configured."""
    global _llm_client
    if _llm_client is None:
        settings = get_settings()
        if not settings.google_api_key:
            logger.info("[LLM] Gemini not available - GOOGLE_AI_KEY not set, lessons will be mocked")
            return None
        _llm_client = GeminiClient(
            settings.google_api_key,
            model=settings.gemini_model,
            timeout=settings.llm_timeout_seconds,
        )
        logger.info(f"[LLM] Gemini client initialized with model: {settings.gemini_model}")
    return _llm_client
