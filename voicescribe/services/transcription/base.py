"""
Abstract base class for transcription gateways.

A gateway accepts one finalized audio payload and relays the speech
service's response, so the API layer stays provider-agnostic.
"""

from abc import ABC, abstractmethod


class BaseGateway(ABC):
    """Interface that every transcription gateway must implement."""

    @abstractmethod
    async def transcribe(self, audio: bytes, api_key: str | None) -> dict:
        """Forward one audio payload and return the parsed service response.

        Args:
            audio: Raw audio bytes, passed through untouched.
            api_key: Credential for the speech service, supplied per call.

        Returns:
            The service's JSON response body, relayed verbatim.

        Raises:
            ConfigurationError: If ``api_key`` is missing.
            TranscriptionFailedError: If the outbound call fails.
        """
