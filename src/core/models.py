"""
Pydantic v2 models shared by the analyzer, session controller, and API layer.
"""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    """GET /health response."""

    status: str = "ok"
    version: str = "0.1.0"
    timestamp: datetime


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------


class AnalysisResult(BaseModel):
    """Metrics derived from one transcript."""

    model_config = ConfigDict(frozen=True)

    question_count: int = Field(default=0, ge=0)
    talking_time_percentage: int = Field(default=0, ge=0, le=100)
    check_understanding_count: int = Field(default=0, ge=0)

    @classmethod
    def empty(cls) -> "AnalysisResult":
        """Zeroed result used on reset and on transcription failure."""
        return cls()


class AnalyzeRequest(BaseModel):
    """POST /api/v1/analysis request body."""

    transcript: str = ""


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


class Screen(StrEnum):
    """Screens of the single-session flow."""

    home = "home"
    recording = "recording"
    results = "results"


class FeedbackRating(StrEnum):
    """Two-valued rating of the feedback explanation."""

    positive = "positive"
    negative = "negative"


class RecordingHandle(BaseModel):
    """The one in-flight capture of a session."""

    model_config = ConfigDict(frozen=True)

    recording_id: str
    started_at: datetime


class SessionState(BaseModel):
    """Immutable snapshot of the session; each transition yields a new one."""

    model_config = ConfigDict(frozen=True)

    screen: Screen = Screen.home
    recording: RecordingHandle | None = None
    transcript: str = ""
    analysis: AnalysisResult = Field(default_factory=AnalysisResult.empty)
    error: str | None = None

    @property
    def is_recording(self) -> bool:
        return self.recording is not None


class FeedbackRequest(BaseModel):
    """POST /api/v1/session/feedback request body."""

    rating: FeedbackRating


class FeedbackResponse(BaseModel):
    """Acknowledgement for a feedback rating (nothing is stored)."""

    rating: FeedbackRating
    message: str


# ---------------------------------------------------------------------------
# Transcription
# ---------------------------------------------------------------------------


class DeepgramAlternative(BaseModel):
    """One recognition hypothesis for a channel."""

    model_config = ConfigDict(extra="ignore")

    transcript: str | None = None
    confidence: float = 0.0


class DeepgramChannel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    alternatives: list[DeepgramAlternative] = Field(default_factory=list)


class DeepgramResults(BaseModel):
    model_config = ConfigDict(extra="ignore")

    channels: list[DeepgramChannel] = Field(default_factory=list)


class DeepgramMetadata(BaseModel):
    model_config = ConfigDict(extra="ignore")

    duration: float | None = None


class DeepgramResponse(BaseModel):
    """Subset of the Deepgram ``/v1/listen`` response body.

    Every level is optional so that a well-formed but empty response
    validates and is reported as "no transcript" instead of an error.
    """

    model_config = ConfigDict(extra="ignore")

    metadata: DeepgramMetadata | None = None
    results: DeepgramResults | None = None

    def first_alternative(self) -> DeepgramAlternative | None:
        """Return the first alternative of the first channel, if any."""
        if self.results is None or not self.results.channels:
            return None
        alternatives = self.results.channels[0].alternatives
        return alternatives[0] if alternatives else None


class TranscriptionResult(BaseModel):
    """Provider-agnostic transcription outcome.

    ``transcript`` is ``None`` when the provider answered but recognized
    nothing usable.
    """

    transcript: str | None = None
    confidence: float = 0.0
    duration: float | None = None


# ---------------------------------------------------------------------------
# Error
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Standard error envelope returned by the API."""

    detail: str
    code: str
    timestamp: str
