from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from shared.models import NarrationStatus
from shared.voice_client import GTTSSynthesizer, SpeechSynthesizer

from .controller import NarrationController
from .scripts import build_script

logger = logging.getLogger(__name__)


def log_transition(status: NarrationStatus) -> None:
    muted = " (muted)" if status.is_muted else ""
    logger.info(f"🎙️ Narration {status.session_id}: {status.state.value}{muted}")


class NarrationRegistry:
    """In-memory narration controllers keyed by session id.

    Nothing survives a restart; one controller per session. Rendered audio
    is deleted when a session is reloaded or discarded.
    """

    def __init__(self, synthesizer_factory: Optional[Callable[[str], SpeechSynthesizer]] = None) -> None:
        self._controllers: Dict[str, NarrationController] = {}
        self._synthesizer_factory = synthesizer_factory or (
            lambda session_id: GTTSSynthesizer(filename_prefix=f"narration_{session_id}")
        )

    def load(self, session_id: str, content: str, subject: str, class_level: str) -> NarrationController:
        """Create the session's controller, or swap its script (stopping playback)."""
        script = build_script(content, subject, class_level)
        controller = self._controllers.get(session_id)
        if controller is None:
            controller = NarrationController(
                self._synthesizer_factory(session_id),
                script,
                session_id=session_id,
            )
            controller.subscribe(log_transition)
            self._controllers[session_id] = controller
        else:
            controller.stop()
            controller.synthesizer.cleanup()
            controller.script = script
        return controller

    def get(self, session_id: str) -> Optional[NarrationController]:
        return self._controllers.get(session_id)

    def discard(self, session_id: str) -> None:
        controller = self._controllers.pop(session_id, None)
        if controller is not None:
            controller.stop()
            controller.synthesizer.cleanup()

    def __len__(self) -> int:
        return len(self._controllers)


narration_registry = NarrationRegistry()
