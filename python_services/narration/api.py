from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse
from pydantic import BaseModel, ConfigDict, Field

from shared.models import NarrationStatus

from .controller import NarrationController
from .state import NarrationRegistry, narration_registry

logger = logging.getLogger(__name__)

class LoadNarrationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: str = ""
    subject: str
    class_level: str = Field(..., alias="classLevel")

def get_router(registry: NarrationRegistry = narration_registry) -> APIRouter:
    router = APIRouter(prefix="/narration", tags=["narration"])

    def _controller(session_id: str) -> NarrationController:
        controller = registry.get(session_id)
        if controller is None:
            raise HTTPException(status_code=404, detail=f"No narration loaded for session {session_id}")
        return controller

    @router.post("/{session_id}/load", response_model=NarrationStatus)
    async def load(session_id: str, req: LoadNarrationRequest):
        return registry.load(session_id, req.content, req.subject, req.class_level).status()

    @router.post("/{session_id}/start", response_model=NarrationStatus)
    async def start(session_id: str):
        controller = _controller(session_id)
        controller.start()
        return controller.status()

    @router.post("/{session_id}/stop", response_model=NarrationStatus)
    async def stop(session_id: str):
        controller = _controller(session_id)
        controller.stop()
        return controller.status()

    @router.post("/{session_id}/mute", response_model=NarrationStatus)
    async def mute(session_id: str):
        controller = _controller(session_id)
        controller.toggle_mute()
        return controller.status()

    @router.get("/{session_id}/status", response_model=NarrationStatus)
    async def status(session_id: str):
        return _controller(session_id).status()

    @router.get("/{session_id}/audio")
    async def audio(session_id: str):
        """Serve the rendered audio of the sentence being spoken."""
        try:
            path = _controller(session_id).audio_path()
            if path is None or not path.exists():
                raise HTTPException(status_code=404, detail="No narration audio playing")
            logger.info(f"🎵 Serving narration audio {path.stem} for session {session_id}")
            return FileResponse(path, media_type="audio/mpeg", filename=path.name)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"❌ Audio retrieval error: {str(e)}")
            raise HTTPException(status_code=500, detail=f"Audio retrieval failed: {str(e)}")

    @router.delete("/{session_id}")
    async def discard(session_id: str):
        _controller(session_id)
        registry.discard(session_id)
        return {"message": "narration discarded", "sessionId": session_id}

    return router
