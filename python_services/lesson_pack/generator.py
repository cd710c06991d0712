from __future__ import annotations

import logging
import time
from typing import Optional

from shared.config import get_settings
from shared.llm_client import LLMClient, get_llm_client
from shared.models import (
    ConversationMessage,
    FallbackReason,
    GenerationResult,
    GenerationSource,
    LessonInput,
    LessonOutput,
    MessageRole,
)

from .mock import generate_mock_response
from .parser import LessonParseError, parse_lesson_response
from .prompts import build_lesson_prompt

logger = logging.getLogger(__name__)


class LessonGenerator:
    """Generates lesson packs, degrading to the mock pack on any failure.

    ``generate`` never raises: missing credentials, request errors and
    unparseable output all produce a mock result tagged with the reason.
    """

    def __init__(self, llm: Optional[LLMClient], max_tokens: int = 4096, temperature: float = 0.7) -> None:
        self.llm = llm
        self.max_tokens = max_tokens
        self.temperature = temperature

    async def generate(self, lesson_input: LessonInput) -> GenerationResult:
        started = time.perf_counter()

        def elapsed_ms() -> int:
            return int((time.perf_counter() - started) * 1000)

        def fallback(reason: FallbackReason, detail: Optional[str] = None) -> GenerationResult:
            return GenerationResult(
                output=generate_mock_response(lesson_input),
                source=GenerationSource.MOCK,
                fallback_reason=reason,
                detail=detail,
                processing_time_ms=elapsed_ms(),
            )

        if self.llm is None:
            return fallback(FallbackReason.NO_CREDENTIALS)

        prompt = build_lesson_prompt(lesson_input)
        try:
            text = await self.llm.generate_response(
                [ConversationMessage(role=MessageRole.USER, content=prompt)],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except Exception as e:
            logger.error(f"Gemini API Error: {e}")
            return fallback(FallbackReason.REQUEST_FAILED, str(e))

        try:
            output = parse_lesson_response(text, lesson_input.global_module)
        except LessonParseError as e:
            logger.warning(f"Unusable lesson response ({e.reason.value}): {e}")
            return fallback(e.reason, str(e))

        logger.info(
            f"Generated lesson pack for {lesson_input.subject} class {lesson_input.class_level} "
            f"with {len(output.questions_and_answers)} questions"
        )
        return GenerationResult(
            output=output,
            source=GenerationSource.MODEL,
            provider_used=self.llm.provider,
            processing_time_ms=elapsed_ms(),
        )


def get_lesson_generator() -> LessonGenerator:
    """Generator wired to the configured LLM client (mock-only without a key)."""
    settings = get_settings()
    return LessonGenerator(
        get_llm_client(),
        max_tokens=settings.llm_max_tokens,
        temperature=settings.llm_temperature,
    )


async def generate_lesson_pack(lesson_input: LessonInput) -> LessonOutput:
    """Generate a lesson pack with the configured client. Never raises."""
    result = await get_lesson_generator().generate(lesson_input)
    return result.output
