"""Sequential narration of a lesson: intro, explaining, conclusion.

The controller is the only writer of narration state. Each playback session
runs as one asyncio task that awaits the phases in order and submits
transition requests; requests from a session that is no longer current are
dropped, so a cancelled session can never overwrite a newer one.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from shared.config import get_settings
from shared.models import NarrationPhase, NarrationStatus, Utterance
from shared.voice_client import SpeechSynthesisError, SpeechSynthesizer

from .scripts import (
    HEADLINES,
    IDLE_CAPTION,
    PLAYING_CAPTION,
    NarrationScript,
    expression_for,
)

logger = logging.getLogger(__name__)

PHASE_SEQUENCE = (
    NarrationPhase.INTRO,
    NarrationPhase.EXPLAINING,
    NarrationPhase.CONCLUSION,
)

StatusListener = Callable[[NarrationStatus], None]


@dataclass
class _Session:
    id: int
    cancelled: asyncio.Event = field(default_factory=asyncio.Event)


class NarrationController:
    """Drives a speech synthesizer through the narration phases.

    ``start`` must be called from a running event loop.
    """

    _ids = itertools.count(1)

    def __init__(
        self,
        synthesizer: SpeechSynthesizer,
        script: NarrationScript,
        *,
        session_id: Optional[str] = None,
        phase_delay: Optional[float] = None,
        rate: Optional[float] = None,
        pitch: Optional[float] = None,
        volume: Optional[float] = None,
        lang: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.synthesizer = synthesizer
        self.script = script
        self.session_id = session_id
        self.phase_delay = settings.narration_phase_delay if phase_delay is None else phase_delay
        self.rate = rate if rate is not None else settings.speech_rate
        self.pitch = pitch if pitch is not None else settings.speech_pitch
        self.volume = volume if volume is not None else settings.speech_volume
        self.lang = lang or settings.speech_language

        self._phase = NarrationPhase.INTRO
        self._playing = False
        self._muted = False
        self._session: Optional[_Session] = None
        self._task: Optional[asyncio.Task] = None
        self._listeners: List[StatusListener] = []

    # -- observable state -------------------------------------------------

    @property
    def phase(self) -> NarrationPhase:
        return self._phase

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def is_muted(self) -> bool:
        return self._muted

    @property
    def state(self) -> NarrationPhase:
        return self._phase if self._playing else NarrationPhase.IDLE

    def status(self) -> NarrationStatus:
        state = self.state
        audio_path = self.audio_path()
        return NarrationStatus(
            session_id=self.session_id,
            phase=self._phase,
            state=state,
            is_playing=self._playing,
            is_muted=self._muted,
            expression=expression_for(self._phase),
            headline=HEADLINES[state],
            caption=PLAYING_CAPTION if self._playing else IDLE_CAPTION,
            current_text=self.script.text_for(self._phase) if self._playing else None,
            audio_id=audio_path.stem if audio_path is not None else None,
        )

    def audio_path(self) -> Optional[Path]:
        """File of the sentence being spoken, when the synthesizer renders one."""
        if not self._playing:
            return None
        return self.synthesizer.current_audio_path

    def subscribe(self, listener: StatusListener) -> None:
        self._listeners.append(listener)

    # -- user operations --------------------------------------------------

    def start(self) -> None:
        """Begin narrating at intro, or cancel the narration in progress."""
        if self._playing:
            self.stop()
            return

        session = _Session(id=next(self._ids))
        self._session = session
        self._playing = True
        self._phase = NarrationPhase.INTRO
        self._notify()
        self._task = asyncio.get_running_loop().create_task(self._run(session))

    def stop(self) -> None:
        """Cancel any narration and reset to intro."""
        session = self._session
        if session is not None:
            session.cancelled.set()
            self.synthesizer.cancel()
        self._session = None
        self._playing = False
        self._phase = NarrationPhase.INTRO
        self._notify()

    def toggle_mute(self) -> bool:
        """Flip the mute flag. Muting while playing ends the session, even between phases."""
        self._muted = not self._muted
        if self._muted and self._playing:
            self.stop()
        else:
            self._notify()
        return self._muted

    async def join(self) -> None:
        """Wait for the most recent session task to finish."""
        if self._task is not None:
            await self._task

    # -- session task -----------------------------------------------------

    def _utterance(self, phase: NarrationPhase) -> Utterance:
        return Utterance(
            text=self.script.text_for(phase),
            rate=self.rate,
            pitch=self.pitch,
            volume=self.volume,
            lang=self.lang,
        )

    def _request(self, session: _Session, target: NarrationPhase) -> bool:
        """Apply a transition for ``session``. Returns False if the session is stale."""
        if self._session is not session or session.cancelled.is_set():
            return False
        if target == NarrationPhase.IDLE:
            self._session = None
            self._playing = False
            self._phase = NarrationPhase.INTRO
        else:
            self._phase = target
        self._notify()
        return True

    async def _run(self, session: _Session) -> None:
        try:
            for index, phase in enumerate(PHASE_SEQUENCE):
                if session.cancelled.is_set():
                    return
                if index:
                    try:
                        await asyncio.wait_for(session.cancelled.wait(), timeout=self.phase_delay)
                        return
                    except asyncio.TimeoutError:
                        pass
                if self._muted:
                    logger.info("Narration muted; ending session")
                    return
                if not self._request(session, phase):
                    return
                try:
                    await self.synthesizer.speak(self._utterance(phase))
                except SpeechSynthesisError as e:
                    logger.warning(f"Speech synthesis stopped during {phase.value}: {e}")
                    return
                except Exception:
                    logger.exception(f"Unexpected speech synthesis failure during {phase.value}")
                    return
        finally:
            self._request(session, NarrationPhase.IDLE)

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.status()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Narration status listener failed")
