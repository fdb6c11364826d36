"""
VoiceScribe exception hierarchy.

All application-specific exceptions inherit from VoiceScribeError,
enabling centralized error handling in the API middleware layer and a
single catch point in the recorder state machine.
"""

from datetime import UTC, datetime


class VoiceScribeError(Exception):
    """Base exception for all VoiceScribe errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "VOICESCRIBE_ERROR",
        status_code: int = 500,
    ) -> None:
        self.detail = detail
        self.code = code
        self.status_code = status_code
        self.timestamp = datetime.now(UTC).isoformat()
        super().__init__(detail)


class ConfigurationError(VoiceScribeError):
    """Raised when the transcription-service credential is missing."""

    def __init__(self, detail: str = "API key not configured") -> None:
        super().__init__(
            detail=detail,
            code="CONFIGURATION_ERROR",
            status_code=500,
        )


class TranscriptionFailedError(VoiceScribeError):
    """Raised when the outbound transcription call fails for any reason."""

    def __init__(self, detail: str = "Transcription failed") -> None:
        super().__init__(
            detail=detail,
            code="TRANSCRIPTION_FAILED",
            status_code=500,
        )


class MicrophoneAccessError(VoiceScribeError):
    """Raised when the capture device is denied or unavailable."""

    def __init__(self, detail: str = "Microphone unavailable") -> None:
        super().__init__(
            detail=detail,
            code="MICROPHONE_ACCESS_ERROR",
            status_code=503,
        )


class GatewayError(VoiceScribeError):
    """Client-side failure talking to the transcription gateway.

    Categories: "connection", "timeout", "http", "network", "decode".
    """

    def __init__(self, detail: str, category: str = "network") -> None:
        self.category = category
        super().__init__(
            detail=detail,
            code="GATEWAY_ERROR",
            status_code=502,
        )
