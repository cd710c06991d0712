"""Text extraction for uploaded lesson content (plain text, OCR, speech-to-text)."""

from .extraction import ContentExtractor
from .ocr import OCRClient, OCRError
from .transcription import SpeechTranscriber

__all__ = ["ContentExtractor", "OCRClient", "OCRError", "SpeechTranscriber"]
