#!/usr/bin/env python3
"""
📚 Lesson Service Launcher
Starts the ASman Learning lesson service (lesson packs, uploads, narration)
"""

import os
import sys
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.append(str(project_root))

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def setup_environment():
    """🔧 Set up environment variables for the lesson service"""

    # Service configuration
    os.environ.setdefault("LESSON_SERVICE_PORT", "8010")
    os.environ.setdefault("LESSON_SERVICE_HOST", "0.0.0.0")

    # Gemini (lesson generation)
    if not os.getenv("GOOGLE_AI_KEY"):
        logger.warning("⚠️ GOOGLE_AI_KEY not set - lesson packs will come from the mock generator")
        logger.info("💡 Get a Gemini API key from: https://makersuite.google.com/app/apikey")
    else:
        logger.info("✅ Gemini API key configured")

    # Narration voice
    os.environ.setdefault("SPEECH_LANGUAGE", "en-IN")
    os.environ.setdefault("NARRATION_PHASE_DELAY", "1.0")

    logger.info("🔧 Environment configured for Lesson Service")


def check_dependencies():
    """🔍 Check if required and optional dependencies are available"""
    required_available = True

    # Core dependencies
    try:
        import fastapi
        import uvicorn
        import multipart
        logger.info("✅ Core dependencies (FastAPI, Uvicorn, python-multipart) available")
    except ImportError as e:
        logger.error(f"❌ Missing core dependency: {e}")
        required_available = False

    try:
        import google.generativeai
        logger.info("✅ google-generativeai available")
    except ImportError:
        logger.error("❌ google-generativeai not available - install with: pip install google-generativeai")
        required_available = False

    try:
        from gtts import gTTS
        logger.info("✅ gTTS available for narration")
    except ImportError:
        logger.error("❌ gTTS not available - install with: pip install gTTS")
        required_available = False

    try:
        import speech_recognition
        logger.info("✅ SpeechRecognition available")
    except ImportError:
        logger.error("❌ SpeechRecognition not available - install with: pip install SpeechRecognition")
        required_available = False

    return required_available


def start_service():
    """🚀 Start the lesson service"""
    try:
        logger.info("📚 Starting Lesson Service...")

        # Setup environment
        setup_environment()

        # Check dependencies
        if not check_dependencies():
            logger.error("❌ Missing required dependencies")
            return False

        # Get service configuration
        port = os.getenv("LESSON_SERVICE_PORT", "8010")
        host = os.getenv("LESSON_SERVICE_HOST", "0.0.0.0")

        logger.info(f"📚 Lesson Service starting on {host}:{port}")

        # Import and run the service
        import uvicorn

        uvicorn.run(
            "lesson_service.main:app",
            host=host,
            port=int(port),
            log_level="info",
            reload=os.getenv("DEBUG", "false").lower() == "true"
        )

    except KeyboardInterrupt:
        logger.info("🛑 Lesson Service stopped by user")
    except Exception as e:
        logger.error(f"❌ Lesson Service failed to start: {str(e)}")
        logger.exception("Full error details:")
        return False

    return True


if __name__ == "__main__":
    logger.info("📚 ASman Learning Lesson Service Launcher")

    success = start_service()

    if not success:
        logger.error("❌ Service failed to start")
        sys.exit(1)

    logger.info("✅ Service completed")
