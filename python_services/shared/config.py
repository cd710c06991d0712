"""
Shared configuration for the lesson services.
"""

import logging
from typing import Optional
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv, find_dotenv

logger = logging.getLogger(__name__)

base_dir = Path(__file__).resolve().parents[1]  # points to python_services/
dotenv_path = base_dir / ".env"
example_path = base_dir / "env.example"

if dotenv_path.exists():
    # Override any stale OS env vars with the ones in .env
    load_dotenv(dotenv_path, override=True)
    logger.info(f"Loaded environment variables from {dotenv_path}")
else:
    # Fallback: search upwards from CWD, then the sample file (never overriding real env values)
    discovered = find_dotenv(usecwd=True)
    if discovered:
        load_dotenv(discovered, override=True)
        logger.info(f"Loaded environment variables from {discovered}")
    elif example_path.exists():
        load_dotenv(example_path, override=False)
        logger.info(f"Loaded environment variables from sample {example_path}")


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,  # Allow both field name and alias
        extra="ignore",
    )

    # Generative model
    google_api_key: Optional[str] = Field(default=None, alias='GOOGLE_AI_KEY')
    gemini_model: str = Field(default="gemini-1.5-flash", alias='GEMINI_MODEL')
    llm_max_tokens: int = Field(default=4096, alias='LLM_MAX_TOKENS')
    llm_temperature: float = Field(default=0.7, alias='LLM_TEMPERATURE')
    # None means the SDK's own timeout behaviour applies
    llm_timeout_seconds: Optional[float] = Field(default=None, alias='LLM_TIMEOUT_SECONDS')

    # OCR.space (free tier key used by the demo front end)
    ocr_api_url: str = Field(default="https://api.ocr.space/parse/image", alias='OCR_API_URL')
    ocr_api_key: str = Field(default="K87899142388957", alias='OCR_API_KEY')
    ocr_language: str = Field(default="eng", alias='OCR_LANGUAGE')

    # Speech synthesis / narration
    speech_language: str = Field(default="en-IN", alias='SPEECH_LANGUAGE')
    speech_rate: float = Field(default=0.8, alias='SPEECH_RATE')
    speech_pitch: float = Field(default=1.1, alias='SPEECH_PITCH')
    speech_volume: float = Field(default=1.0, alias='SPEECH_VOLUME')
    narration_phase_delay: float = Field(default=1.0, alias='NARRATION_PHASE_DELAY')
    audio_output_dir: str = Field(default="./storage/generated_audio", alias='AUDIO_OUTPUT_DIR')

    # Speech recognition
    transcription_enabled: bool = Field(default=False, alias='TRANSCRIPTION_ENABLED')
    transcription_demo_delay: float = Field(default=3.0, alias='TRANSCRIPTION_DEMO_DELAY')

    # Service Configuration
    service_name: str = Field(default="lesson-service", alias='SERVICE_NAME')
    service_host: str = Field(default="0.0.0.0", alias='LESSON_SERVICE_HOST')
    service_port: int = Field(default=8010, alias='LESSON_SERVICE_PORT')
    debug: bool = Field(default=False, alias='DEBUG')

    # Logging
    log_level: str = Field(default="INFO", alias='LOG_LEVEL')


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the current settings instance."""
    return settings


def debug_settings():
    """Log a summary of the current settings."""
    settings = get_settings()
    logger.info("🔍 Current Settings:")
    logger.info(f"  Google API Key: {'✅ Set' if settings.google_api_key else '❌ Not set (mock lessons)'}")
    logger.info(f"  Gemini Model: {settings.gemini_model}")
    logger.info(f"  Speech Language: {settings.speech_language}")
    logger.info(f"  Live Transcription: {settings.transcription_enabled}")
    logger.info(f"  Service: {settings.service_name} on {settings.service_host}:{settings.service_port}")
    logger.info(f"  Debug Mode: {settings.debug}")
    logger.info(f"  Log Level: {settings.log_level}")
