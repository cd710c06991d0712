"""Lesson pack generation.

Turns uploaded lesson content into a lesson pack (simplified explanation,
practical activity, questions and answers) using Gemini, with a deterministic
templated pack whenever no model is configured or generation fails.

The FastAPI router is exposed via `get_router()` in `api.py`.
"""

from .api import get_router
from .generator import LessonGenerator, generate_lesson_pack

__all__ = ["get_router", "LessonGenerator", "generate_lesson_pack"]
