from __future__ import annotations

import logging
from typing import Optional

from shared.models import ContentSource, ExtractedContent, UploadType

from .ocr import OCRClient
from .transcription import SpeechTranscriber

logger = logging.getLogger(__name__)


class ContentExtractor:
    """Routes an upload to the right collaborator by upload type.

    Always returns content; collaborator failures yield placeholder text.
    """

    def __init__(self, ocr: Optional[OCRClient] = None, transcriber: Optional[SpeechTranscriber] = None) -> None:
        self.ocr = ocr or OCRClient()
        self.transcriber = transcriber or SpeechTranscriber()

    async def extract(
        self,
        upload_type: UploadType,
        content: bytes,
        filename: str,
        content_type: Optional[str] = None,
    ) -> ExtractedContent:
        if upload_type == UploadType.TEXT:
            text = content.decode("utf-8", errors="replace")
            source = ContentSource.DIRECT
        elif upload_type == UploadType.PDF:
            text, ok = await self.ocr.extract_text(content, filename, content_type)
            source = ContentSource.OCR if ok else ContentSource.PLACEHOLDER
        else:
            text, ok = await self.transcriber.transcribe(content, filename)
            source = ContentSource.TRANSCRIPT if ok else ContentSource.PLACEHOLDER

        logger.info(f"Extracted {len(text)} chars from {filename} ({upload_type.value}, {source.value})")
        return ExtractedContent(filename=filename, upload_type=upload_type, text=text, source=source)
