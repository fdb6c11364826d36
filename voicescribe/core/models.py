"""
Pydantic v2 models shared by the gateway API and the recorder clients.
"""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    """GET /health response."""

    status: str = "ok"
    version: str = "0.1.0"
    timestamp: datetime


# ---------------------------------------------------------------------------
# Error
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Error envelope returned by the gateway (``{"error": ...}``)."""

    error: str


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------


class RecorderStatus(StrEnum):
    """Possible states of the recorder state machine."""

    idle = "idle"
    recording = "recording"
    processing = "processing"


class CaptureConstraints(BaseModel):
    """Microphone settings requested when a recording starts."""

    model_config = ConfigDict(frozen=True)

    channel_count: int = 1
    sample_rate: int = 16000
    echo_cancellation: bool = True
    noise_suppression: bool = True


# Every recording requests the same capture configuration.
DEFAULT_CONSTRAINTS = CaptureConstraints()


class RecorderSnapshot(BaseModel):
    """Read-only view of the recorder, rendered by the UI after each action."""

    model_config = ConfigDict(frozen=True)

    status: RecorderStatus
    error: str = ""
    transcript: str = ""
    word_count: int = 0
    character_count: int = 0
    fragment_count: int = 0
