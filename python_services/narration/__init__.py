"""Narration of a lesson pack by the animated AI teacher.

Playback runs through three phases (intro, explaining, conclusion), one
utterance each, with a short pause between them. The FastAPI router is
exposed via `get_router()` in `api.py`.
"""

from .api import get_router
from .controller import NarrationController, PHASE_SEQUENCE
from .scripts import NarrationScript, build_script

__all__ = ["get_router", "NarrationController", "PHASE_SEQUENCE", "NarrationScript", "build_script"]
