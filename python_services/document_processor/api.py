from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from shared.models import ExtractedContent, UploadType

from .extraction import ContentExtractor

logger = logging.getLogger(__name__)


def get_content_extractor() -> ContentExtractor:
    return ContentExtractor()


def get_router() -> APIRouter:
    router = APIRouter(prefix="/content", tags=["content"])

    @router.post("/extract", response_model=ExtractedContent)
    async def extract(
        file: UploadFile = File(...),
        upload_type: UploadType = Form(...),
        extractor: ContentExtractor = Depends(get_content_extractor),
    ):
        """Extract lesson text from an uploaded text, PDF/image or audio file."""
        try:
            logger.info(f"📤 Upload received: {file.filename} ({upload_type.value}, {file.content_type})")
            content = await file.read()
            if not file.filename or len(content) == 0:
                raise HTTPException(status_code=400, detail="Invalid file provided")
            return await extractor.extract(upload_type, content, file.filename, file.content_type)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"❌ Content extraction error: {str(e)}")
            raise HTTPException(status_code=500, detail=f"Content extraction failed: {str(e)}")

    return router
