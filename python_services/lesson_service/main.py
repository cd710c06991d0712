"""
Lesson Service - ASman Learning AI teacher assistant
Lesson pack generation, upload text extraction and narration control
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
from datetime import datetime
from contextlib import asynccontextmanager

# Import our custom modules
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).parent.parent))

from shared.config import get_settings, debug_settings
from shared.llm_client import get_llm_client
from shared.models import HealthCheck
import document_processor.api
import lesson_pack
import narration
from narration.state import narration_registry

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

SERVICE_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown events"""
    debug_settings()
    if get_llm_client() is None:
        logger.warning("⚠️ No Gemini API key configured - lesson packs will use the mock generator")
    else:
        logger.info("✅ Gemini lesson generation enabled")
    logger.info("Lesson Service started successfully")

    yield

    # Shutdown
    logger.info("Shutting down Lesson Service")


# Initialize FastAPI app with lifespan
app = FastAPI(
    title="Lesson Service",
    description="AI teacher lesson pack generation and narration for NCERT classes",
    version=SERVICE_VERSION,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(lesson_pack.get_router())
app.include_router(document_processor.api.get_router())
app.include_router(narration.get_router())


@app.get("/")
async def root():
    """Basic service info"""
    return {
        "service": "Lesson Service",
        "status": "healthy",
        "version": SERVICE_VERSION,
        "llm_configured": bool(settings.google_api_key),
        "narration_sessions": len(narration_registry),
        "timestamp": datetime.utcnow().isoformat()
    }


@app.get("/health", response_model=HealthCheck)
async def health_check():
    """Health check for orchestration"""
    return HealthCheck(service=settings.service_name, version=SERVICE_VERSION)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.service_host,
        port=settings.service_port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
