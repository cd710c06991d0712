"""
Shared Pydantic models for the lesson services.
"""

from datetime import datetime
from typing import Optional, Dict, Any, List
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum


class MessageRole(str, Enum):
    """Roles for conversation messages."""
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ConversationMessage(BaseModel):
    """A single message in a conversation."""
    role: MessageRole
    content: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    metadata: Optional[Dict[str, Any]] = None


class LLMProvider(str, Enum):
    """Supported LLM providers."""
    GOOGLE = "google"


class HealthCheck(BaseModel):
    """Health check response model."""
    service: str
    status: str = "healthy"
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    version: str = "0.1.0"


# Lesson-related models
class UploadType(str, Enum):
    """Kinds of content a teacher can upload."""
    TEXT = "text"
    PDF = "pdf"
    AUDIO = "audio"


class LessonInput(BaseModel):
    """One lesson generation request. Field values are passed through unvalidated."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    subject: str = Field(..., description="Subject key, e.g. mathematics")
    class_level: str = Field(..., alias="classLevel", description="Class 1-5")
    global_module: str = Field("auto", alias="globalModule", description="auto, china, japan, us, europe")
    upload_type: UploadType = Field(UploadType.TEXT, alias="uploadType")
    text: str = Field("", description="Extracted upload content")


class QuestionAnswer(BaseModel):
    """A question with its answer."""
    model_config = ConfigDict(frozen=True)

    q: str
    a: str


class LessonOutput(BaseModel):
    """A generated lesson pack. Q&A order is presentation order."""
    model_config = ConfigDict(frozen=True)

    simplified_explanation: str
    practical_activity: str
    questions_and_answers: List[QuestionAnswer]
    global_module_used: str


class GenerationSource(str, Enum):
    """Where a lesson pack came from."""
    MODEL = "model"
    MOCK = "mock"


class FallbackReason(str, Enum):
    """Why a mock lesson pack was returned instead of model output."""
    NO_CREDENTIALS = "no_credentials"
    NO_JSON_FOUND = "no_json_found"
    INVALID_JSON = "invalid_json"
    INVALID_SHAPE = "invalid_shape"
    REQUEST_FAILED = "request_failed"


class GenerationResult(BaseModel):
    """Lesson pack plus provenance, so callers can tell real output from fallback."""
    output: LessonOutput
    source: GenerationSource
    fallback_reason: Optional[FallbackReason] = None
    detail: Optional[str] = Field(None, description="Diagnostic message for fallbacks")
    provider_used: Optional[LLMProvider] = None
    processing_time_ms: int = 0

    @property
    def is_fallback(self) -> bool:
        return self.source == GenerationSource.MOCK


# Narration-related models
class NarrationPhase(str, Enum):
    """Narration states. IDLE is terminal; the others run strictly forward."""
    IDLE = "idle"
    INTRO = "intro"
    EXPLAINING = "explaining"
    CONCLUSION = "conclusion"


class Utterance(BaseModel):
    """One piece of speech and its voice settings."""
    model_config = ConfigDict(frozen=True)

    text: str
    rate: float = Field(0.8, gt=0.0, description="Speaking rate multiplier")
    pitch: float = Field(1.1, ge=0.0)
    volume: float = Field(1.0, ge=0.0, le=1.0)
    lang: str = Field("en-IN", description="BCP 47 language tag")


class NarrationStatus(BaseModel):
    """Snapshot of a narration session for rendering the animated teacher."""
    session_id: Optional[str] = None
    phase: NarrationPhase
    state: NarrationPhase = Field(..., description="idle when not playing, otherwise the phase")
    is_playing: bool
    is_muted: bool
    expression: str
    headline: str
    caption: str
    current_text: Optional[str] = Field(None, description="Sentence being spoken; None when idle")
    audio_id: Optional[str] = Field(None, description="Rendered audio of the current sentence, if any")


class ContentSource(str, Enum):
    """How the text of an upload was obtained."""
    DIRECT = "direct"
    OCR = "ocr"
    TRANSCRIPT = "transcript"
    PLACEHOLDER = "placeholder"


class ExtractedContent(BaseModel):
    """Text extracted from an uploaded file."""
    filename: str
    upload_type: UploadType
    text: str
    source: ContentSource
