"""OCR.space client for PDF and image uploads."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from shared.config import get_settings

logger = logging.getLogger(__name__)


class OCRError(Exception):
    """OCR request failed or returned no parsed text."""


def ocr_placeholder(filename: str) -> str:
    return (
        f"[OCR processed content from {filename}] - This would contain the extracted "
        "text from the uploaded PDF or image file."
    )


class OCRClient:
    """Minimal async client for the OCR.space parse endpoint."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        language: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self.api_key = api_key or settings.ocr_api_key
        self.api_url = api_url or settings.ocr_api_url
        self.language = language or settings.ocr_language
        self._transport = transport

    async def parse(self, content: bytes, filename: str, content_type: Optional[str] = None) -> str:
        """Return ``ParsedResults[0].ParsedText`` for the file.

        Raises:
            OCRError: on HTTP failure or an unexpected response shape.
        """
        files = {"file": (filename, content, content_type or "application/octet-stream")}
        data = {"apikey": self.api_key, "language": self.language}

        async with httpx.AsyncClient(transport=self._transport, timeout=httpx.Timeout(60.0)) as client:
            try:
                resp = await client.post(self.api_url, data=data, files=files)
                resp.raise_for_status()
                result = resp.json()
            except (httpx.HTTPError, ValueError) as e:
                raise OCRError(f"OCR request failed: {e}") from e

        parsed_results = result.get("ParsedResults") if isinstance(result, dict) else None
        if not isinstance(parsed_results, list) or not parsed_results or not isinstance(parsed_results[0], dict):
            raise OCRError("OCR processing failed")
        text = parsed_results[0].get("ParsedText")
        if not isinstance(text, str):
            raise OCRError("OCR processing failed: no ParsedText")
        return text

    async def extract_text(self, content: bytes, filename: str, content_type: Optional[str] = None) -> tuple[str, bool]:
        """OCR the file, substituting a placeholder on any failure.

        Returns ``(text, ok)`` where ``ok`` is False when the placeholder was used.
        """
        try:
            return await self.parse(content, filename, content_type), True
        except OCRError as e:
            logger.error(f"OCR Error: {e}")
            return ocr_placeholder(filename), False
