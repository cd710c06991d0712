from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from shared.models import GenerationResult, LessonInput

from .generator import LessonGenerator, get_lesson_generator
from .modules import BRAND, CLASS_LEVELS, GLOBAL_MODULES, SUBJECTS

logger = logging.getLogger(__name__)


def get_router() -> APIRouter:
    router = APIRouter(prefix="/lesson", tags=["lesson_pack"])

    @router.get("/modules")
    async def list_modules():
        return [m.model_dump(exclude={"context"}) for m in GLOBAL_MODULES]

    @router.get("/catalog")
    async def catalog():
        return {
            "brand": BRAND,
            "subjects": SUBJECTS,
            "class_levels": CLASS_LEVELS,
            "global_modules": [m.model_dump(exclude={"context"}) for m in GLOBAL_MODULES],
        }

    @router.post("/generate", response_model=GenerationResult)
    async def generate(req: LessonInput, generator: LessonGenerator = Depends(get_lesson_generator)):
        logger.info(f"📚 Lesson request: {req.subject} class {req.class_level} ({req.global_module}, {req.upload_type.value})")
        try:
            result = await generator.generate(req)
        except Exception as e:
            logger.error(f"❌ Lesson generation error: {str(e)}")
            raise HTTPException(status_code=500, detail=f"Lesson generation failed: {str(e)}")
        if result.is_fallback:
            logger.info(f"Returning mock lesson pack ({result.fallback_reason.value})")
        return result

    return router
