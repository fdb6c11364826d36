"""Shared pytest fixtures for the VoiceScribe test suite.

Provides settings with an injected credential, Deepgram-shaped response
bodies, and mock capture devices for driving the recorder state machine.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from voicescribe.core.config import Settings
from voicescribe.services.audio.capture import CaptureDevice, CaptureStream

# ---------------------------------------------------------------------------
# Settings Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings():
    """Settings with a test credential; the .env file is ignored."""
    return Settings(
        _env_file=None,
        deepgram_api_key="test-key",
        deepgram_base_url="https://deepgram.test",
    )


@pytest.fixture
def settings_without_key():
    """Settings with no transcription credential configured."""
    return Settings(
        _env_file=None,
        deepgram_api_key="",
        deepgram_base_url="https://deepgram.test",
    )


# ---------------------------------------------------------------------------
# Deepgram response Fixtures
# ---------------------------------------------------------------------------


def make_deepgram_response(transcript: str) -> dict:
    """Build a minimal pre-recorded response carrying ``transcript``."""
    return {
        "metadata": {"request_id": "req-1", "channels": 1},
        "results": {
            "channels": [
                {
                    "alternatives": [
                        {"transcript": transcript, "confidence": 0.98, "words": []}
                    ]
                }
            ]
        },
    }


@pytest.fixture
def make_response():
    """Factory fixture wrapping ``make_deepgram_response``."""
    return make_deepgram_response


@pytest.fixture
def deepgram_response():
    """Successful response body containing ``"hello world"``."""
    return make_deepgram_response("hello world")


# ---------------------------------------------------------------------------
# Capture Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def capture_stream():
    """Mock capture stream that concatenates fragments on finalize.

    Tests push fragments through the callback passed to ``start``.
    """
    stream = MagicMock(spec=CaptureStream)
    stream.stop = AsyncMock()
    stream.finalize.side_effect = lambda fragments: b"".join(fragments)
    return stream


@pytest.fixture
def capture_device(capture_stream):
    """Mock capture device returning ``capture_stream`` from every open."""
    device = AsyncMock(spec=CaptureDevice)
    device.open.return_value = capture_stream
    return device


@pytest.fixture
def sample_fragments():
    """Three small audio chunks as a recorder would receive them."""
    return [b"RIFF", b"\x01\x02\x03", b"\x04\x05"]
