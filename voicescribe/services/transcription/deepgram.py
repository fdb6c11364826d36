"""Deepgram transcription gateway.

Relays a single pre-recorded audio payload to Deepgram's ``/v1/listen``
endpoint and hands the parsed JSON back to the caller unchanged. The
credential is supplied per call so the gateway itself holds no global
state; upstream failure details are logged and never returned.
"""

import logging

import httpx

from voicescribe.core.config import Settings, get_settings
from voicescribe.core.exceptions import ConfigurationError, TranscriptionFailedError
from voicescribe.services.transcription.base import BaseGateway

logger = logging.getLogger(__name__)


class DeepgramGateway(BaseGateway):
    """Forward-and-relay gateway for Deepgram pre-recorded transcription.

    Args:
        settings: Optional Settings instance (defaults to get_settings()).
        client: Optional ``httpx.AsyncClient``; injected by tests with a
            mock transport. When omitted a client is created per call.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._client = client

    @property
    def listen_url(self) -> str:
        return f"{self._settings.deepgram_base_url.rstrip('/')}/v1/listen"

    @property
    def query_params(self) -> dict[str, str]:
        """Fixed query configuration sent with every request."""
        return {
            "model": self._settings.deepgram_model,
            "language": self._settings.deepgram_language,
            "smart_format": "true" if self._settings.deepgram_smart_format else "false",
        }

    def _headers(self, api_key: str) -> dict[str, str]:
        return {
            "Authorization": f"Token {api_key}",
            "Content-Type": self._settings.deepgram_content_type,
        }

    async def transcribe(self, audio: bytes, api_key: str | None) -> dict:
        if not api_key:
            logger.error("Deepgram API key is not configured")
            raise ConfigurationError()

        try:
            if self._client is not None:
                response = await self._post(self._client, audio, api_key)
            else:
                async with httpx.AsyncClient(timeout=self._settings.deepgram_timeout) as client:
                    response = await self._post(client, audio, api_key)
            result = response.json()
        except Exception as exc:
            logger.error("Deepgram API error: %s", exc)
            raise TranscriptionFailedError() from exc

        if not isinstance(result, dict):
            logger.error("Deepgram returned a non-object body: %r", type(result).__name__)
            raise TranscriptionFailedError()

        if response.is_error:
            logger.warning("Deepgram responded with HTTP %d", response.status_code)

        return result

    async def _post(self, client: httpx.AsyncClient, audio: bytes, api_key: str) -> httpx.Response:
        logger.debug("Forwarding %d audio bytes to Deepgram", len(audio))
        return await client.post(
            self.listen_url,
            params=self.query_params,
            headers=self._headers(api_key),
            content=audio,
            timeout=self._settings.deepgram_timeout,
        )
