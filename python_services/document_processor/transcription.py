"""Speech-to-text for audio uploads.

Live recognition is off by default: the demo flow resolves after a fixed delay
with placeholder text. Enable ``TRANSCRIPTION_ENABLED`` to run the Google
recogniser on WAV/AIFF/FLAC uploads.
"""

from __future__ import annotations

import asyncio
import io
import logging
from typing import Optional

import speech_recognition as sr

from shared.config import get_settings

logger = logging.getLogger(__name__)


def demo_transcript(filename: str) -> str:
    return (
        f"[Speech-to-text processed content from {filename}] - This would contain the "
        "transcribed text from the uploaded audio file about the lesson topic."
    )


def empty_transcript(filename: str) -> str:
    return f"[Speech-to-text processed content from {filename}] - Audio transcription would appear here."


class SpeechTranscriber:
    """Turns an uploaded recording into lesson text."""

    def __init__(
        self,
        enabled: Optional[bool] = None,
        language: Optional[str] = None,
        demo_delay: Optional[float] = None,
        recognizer: Optional[sr.Recognizer] = None,
    ) -> None:
        settings = get_settings()
        self.enabled = settings.transcription_enabled if enabled is None else enabled
        self.language = language or settings.speech_language
        self.demo_delay = settings.transcription_demo_delay if demo_delay is None else demo_delay
        self.recognizer = recognizer or sr.Recognizer()

    async def transcribe(self, content: bytes, filename: str) -> tuple[str, bool]:
        """Return ``(text, ok)``; ``ok`` is False when placeholder text was returned."""
        if not self.enabled:
            await asyncio.sleep(self.demo_delay)
            return demo_transcript(filename), False

        try:
            transcript = await asyncio.to_thread(self._recognize, content)
        except sr.UnknownValueError:
            logger.warning(f"Speech recognizer could not understand {filename}")
            return empty_transcript(filename), False
        except (sr.RequestError, ValueError, OSError) as e:
            logger.error(f"Speech-to-text Error: {e}")
            return empty_transcript(filename), False

        if not transcript.strip():
            return empty_transcript(filename), False
        return transcript, True

    def _recognize(self, content: bytes) -> str:
        with sr.AudioFile(io.BytesIO(content)) as source:
            audio_data = self.recognizer.record(source)
        # show_all=False returns only the final best transcript
        return self.recognizer.recognize_google(audio_data, language=self.language)
