"""Integration test fixtures for VoiceScribe.

Wires the real FastAPI gateway to a mocked Deepgram API
(``httpx.MockTransport``) and exposes an async HTTP client for it.
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from voicescribe.api.app import create_app
from voicescribe.services.transcription.deepgram import DeepgramGateway


class FakeDeepgram:
    """Stand-in for the Deepgram listen endpoint; counts outbound calls."""

    def __init__(self, body: dict) -> None:
        self.body = body
        self.requests: list[httpx.Request] = []
        self.exc: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(200, json=self.body)


@pytest.fixture
def fake_deepgram(deepgram_response):
    return FakeDeepgram(deepgram_response)


def _build_app(settings, fake_deepgram):
    upstream = httpx.AsyncClient(transport=httpx.MockTransport(fake_deepgram))
    gateway = DeepgramGateway(settings=settings, client=upstream)
    return create_app(settings=settings, gateway=gateway)


@pytest.fixture
def app(settings, fake_deepgram):
    """Gateway application with a configured credential."""
    return _build_app(settings, fake_deepgram)


@pytest.fixture
def app_without_key(settings_without_key, fake_deepgram):
    """Gateway application with no credential configured."""
    return _build_app(settings_without_key, fake_deepgram)


@pytest.fixture
async def async_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
