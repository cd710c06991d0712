"""Extraction of a lesson pack from free-form model output."""

from __future__ import annotations

import json
import re
from typing import Any, Dict, Optional

from pydantic import ValidationError

from shared.models import FallbackReason, LessonOutput

from .modules import get_global_module_name

# Greedy: first "{" through the last "}" in the text
_JSON_SPAN = re.compile(r"\{[\s\S]*\}")


class LessonParseError(ValueError):
    """Model output did not contain a usable lesson pack."""

    def __init__(self, reason: FallbackReason, message: str):
        super().__init__(message)
        self.reason = reason


def extract_json_span(text: str) -> Optional[str]:
    m = _JSON_SPAN.search(text or "")
    return m.group(0) if m else None


def parse_lesson_response(text: str, global_module: str) -> LessonOutput:
    """Parse model output into a LessonOutput.

    ``global_module_used`` is always replaced with the display name for
    ``global_module``, whatever the model wrote there.

    Raises:
        LessonParseError: no brace span, invalid JSON, or a payload that does
            not have the lesson pack shape.
    """
    span = extract_json_span(text)
    if span is None:
        raise LessonParseError(FallbackReason.NO_JSON_FOUND, "Invalid response format: no JSON object found")

    try:
        payload: Dict[str, Any] = json.loads(span)
    except json.JSONDecodeError as e:
        raise LessonParseError(FallbackReason.INVALID_JSON, f"Invalid JSON in model response: {e}") from e

    data: Dict[str, Any] = {**payload, "global_module_used": get_global_module_name(global_module)}
    try:
        return LessonOutput.model_validate(data)
    except ValidationError as e:
        raise LessonParseError(FallbackReason.INVALID_SHAPE, f"Model response missing lesson fields: {e}") from e
