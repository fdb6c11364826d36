"""
Asynchronous HTTP client for the VoiceScribe gateway.

Uses ``httpx.AsyncClient`` because the recorder state machine runs on an
asyncio event loop; the Streamlit page drives it through ``asyncio.run``.
"""

import logging

import httpx

from voicescribe.core.config import get_settings
from voicescribe.core.exceptions import GatewayError

logger = logging.getLogger(__name__)


class GatewayClient:
    """Thin async wrapper around httpx for calling the transcription gateway.

    All methods return parsed JSON dicts or raise ``GatewayError`` with a
    category the recorder can log.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: Base URL of the gateway (falls back to settings).
            timeout: Request timeout in seconds (falls back to settings).
            transport: Optional httpx transport, used by tests.
        """
        settings = get_settings()
        self._base_url = (base_url or settings.api_base_url).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout if timeout is not None else settings.client_timeout,
            transport=transport,
        )

    async def _request(self, method: str, path: str, **kwargs) -> dict:
        """Execute an HTTP request and decode its JSON body.

        Raises:
            GatewayError: On connection, timeout, HTTP status, network, or
                decoding errors.
        """
        try:
            resp = await self._client.request(method, path, **kwargs)
            resp.raise_for_status()
            return resp.json()
        except httpx.ConnectError:
            raise GatewayError(
                f"Gateway is not reachable at {self._base_url}",
                category="connection",
            ) from None
        except httpx.TimeoutException:
            raise GatewayError("Gateway request timed out", category="timeout") from None
        except httpx.HTTPStatusError as exc:
            try:
                detail = exc.response.json().get("error", exc.response.text)
            except Exception:
                detail = exc.response.text or str(exc)
            raise GatewayError(str(detail), category="http") from None
        except httpx.HTTPError as exc:
            raise GatewayError(f"Network error: {exc}", category="network") from None
        except ValueError as exc:
            raise GatewayError(f"Malformed response: {exc}", category="decode") from None

    # -- health --

    async def health_check(self) -> dict:
        return await self._request("GET", "/health")

    async def check_connection(self) -> tuple[bool, str]:
        """Check if the gateway is reachable. Returns (ok, message)."""
        try:
            await self.health_check()
            return True, "Connected"
        except GatewayError as exc:
            return False, exc.detail

    # -- transcription --

    async def transcribe(self, audio: bytes) -> dict:
        """POST one finalized recording to the gateway."""
        logger.debug("Sending %d audio bytes to %s", len(audio), self._base_url)
        return await self._request(
            "POST",
            "/api/deepgram",
            content=audio,
            headers={"Content-Type": "audio/wav"},
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "GatewayClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
