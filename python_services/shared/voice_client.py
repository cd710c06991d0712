"""TTS client utilities for narration.

Defines the speech-synthesizer interface the narration controller drives, and a
gTTS implementation that renders each utterance to an mp3 under the audio
storage directory, then paces playback for the utterance's estimated duration.
"""

from __future__ import annotations

import asyncio
import io
import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from gtts import gTTS

from .config import get_settings
from .models import Utterance

logger = logging.getLogger(__name__)

# gTTS picks the accent from the Google domain
_TLD_BY_REGION = {
    "IN": "co.in",
    "US": "com",
    "GB": "co.uk",
    "AU": "com.au",
    "CA": "ca",
}

SECONDS_PER_WORD = 0.6


class SpeechSynthesisError(Exception):
    """Raised when an utterance could not be spoken."""


class SpeechInterrupted(SpeechSynthesisError):
    """Raised when an utterance was cancelled before it finished."""


class SpeechSynthesizer(ABC):
    """Speaks one utterance at a time.

    ``speak`` returns once the utterance has finished and raises
    ``SpeechSynthesisError`` on failure (``SpeechInterrupted`` after ``cancel``).
    Synthesizers that render to files expose the utterance being played as
    ``current_audio_path``.
    """

    current_audio_path: Optional[Path] = None

    @abstractmethod
    async def speak(self, utterance: Utterance) -> None:
        pass

    @abstractmethod
    def cancel(self) -> None:
        """Stop the utterance in progress, if any. Best effort."""
        pass

    def cleanup(self) -> None:
        """Release any rendered audio."""
        pass


def estimate_duration(text: str, rate: float = 1.0) -> float:
    """Rough speaking time in seconds for ``text`` at ``rate``."""
    words = len(text.split())
    return words * SECONDS_PER_WORD / max(rate, 0.1)


def _ensure_audio_dir(audio_dir: Optional[str] = None) -> Path:
    path = Path(audio_dir or get_settings().audio_output_dir)
    path.mkdir(parents=True, exist_ok=True)
    return path


def gtts_language(lang: str) -> tuple[str, str]:
    """Split a tag like ``en-IN`` into gTTS ``(lang, tld)``."""
    base, _, region = lang.replace("_", "-").partition("-")
    return base.lower() or "en", _TLD_BY_REGION.get(region.upper(), "com")


class GTTSSynthesizer(SpeechSynthesizer):
    """Google Text-to-Speech backed synthesizer.

    Every utterance is saved as an mp3 under ``audio_dir``; the files stay
    until ``cleanup`` is called.
    """

    def __init__(self, audio_dir: Optional[str] = None, filename_prefix: str = "narration") -> None:
        self.audio_dir = _ensure_audio_dir(audio_dir)
        self.filename_prefix = filename_prefix
        self.current_audio_path: Optional[Path] = None
        self._files: List[Path] = []
        self._interrupt: Optional[asyncio.Event] = None

    async def speak(self, utterance: Utterance) -> None:
        interrupt = asyncio.Event()
        self._interrupt = interrupt
        self.current_audio_path = None
        try:
            logger.info(f"🌐 Synthesizing with gTTS: {utterance.text[:50]}...")
            try:
                audio_data = await asyncio.get_running_loop().run_in_executor(
                    None, self._render, utterance
                )
            except Exception as e:
                logger.error(f"❌ gTTS synthesis failed: {str(e)}")
                raise SpeechSynthesisError(f"gTTS synthesis failed: {str(e)}") from e

            if interrupt.is_set():
                raise SpeechInterrupted("utterance cancelled before playback")

            self.current_audio_path = self._save(audio_data)
            duration = estimate_duration(utterance.text, utterance.rate)
            logger.info(f"✅ gTTS synthesis complete: {len(audio_data)} bytes, ~{duration:.1f}s")

            try:
                await asyncio.wait_for(interrupt.wait(), timeout=duration)
            except asyncio.TimeoutError:
                return
            raise SpeechInterrupted("utterance cancelled during playback")
        finally:
            if self._interrupt is interrupt:
                self._interrupt = None

    def cancel(self) -> None:
        if self._interrupt is not None:
            self._interrupt.set()

    def cleanup(self) -> None:
        """Delete every mp3 this synthesizer has saved."""
        for path in self._files:
            path.unlink(missing_ok=True)
        if self._files:
            logger.info(f"🧹 Removed {len(self._files)} narration audio files ({self.filename_prefix})")
        self._files = []
        self.current_audio_path = None

    @staticmethod
    def _render(utterance: Utterance) -> bytes:
        lang, tld = gtts_language(utterance.lang)
        tts = gTTS(
            text=utterance.text,
            lang=lang,
            tld=tld,
            slow=utterance.rate < 0.8
        )
        audio_buffer = io.BytesIO()
        tts.write_to_fp(audio_buffer)
        return audio_buffer.getvalue()

    def _save(self, audio_data: bytes) -> Path:
        ts = int(time.time() * 1000)
        file_path = self.audio_dir / f"{self.filename_prefix}_{ts}_{len(self._files)}.mp3"
        with open(file_path, "wb") as f:
            f.write(audio_data)
        self._files.append(file_path)
        return file_path
