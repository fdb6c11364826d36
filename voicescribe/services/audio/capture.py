"""Capture device abstraction feeding the recorder state machine.

A ``CaptureDevice`` hands out one ``CaptureStream`` per recording. The
stream pushes audio fragments to a callback on the event loop thread,
stops on request, and must have its tracks released on every exit from
recording.

``ClipCaptureDevice`` covers browser capture: the Streamlit page records
with ``st.audio_input`` and the finished clip is delivered as a single
fragment on stop, the way a MediaRecorder flushes its data. The local
microphone lives in ``voicescribe.services.audio.microphone``.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from voicescribe.core.exceptions import MicrophoneAccessError
from voicescribe.core.models import CaptureConstraints

logger = logging.getLogger(__name__)

FragmentCallback = Callable[[bytes], None]


class CaptureStream(ABC):
    """One acquired capture session on a device."""

    @abstractmethod
    def start(self, on_fragment: FragmentCallback) -> None:
        """Begin delivering fragments to ``on_fragment``."""

    @abstractmethod
    async def stop(self) -> None:
        """Stop capturing; any final fragment is delivered before returning."""

    @abstractmethod
    def release(self) -> None:
        """Release every acquired media track. Safe to call more than once."""

    def finalize(self, fragments: list[bytes]) -> bytes:
        """Concatenate buffered fragments into a single audio payload."""
        return b"".join(fragments)


class CaptureDevice(ABC):
    """Source of capture streams."""

    @abstractmethod
    async def open(self, constraints: CaptureConstraints) -> CaptureStream:
        """Acquire the device.

        Raises:
            MicrophoneAccessError: If access is denied or no device exists.
        """


class ClipStream(CaptureStream):
    """Replays a finished browser recording as a single fragment on stop."""

    def __init__(self, clip: bytes) -> None:
        self._clip = clip
        self._on_fragment: FragmentCallback | None = None

    def start(self, on_fragment: FragmentCallback) -> None:
        self._on_fragment = on_fragment

    async def stop(self) -> None:
        if self._on_fragment is not None:
            self._on_fragment(self._clip)

    def release(self) -> None:
        self._on_fragment = None


class ClipCaptureDevice(CaptureDevice):
    """Capture device backed by audio the browser has already recorded."""

    def __init__(self) -> None:
        self._clip: bytes | None = None

    def load(self, clip: bytes) -> None:
        """Queue the next browser clip to be handed out by ``open``."""
        self._clip = clip

    async def open(self, constraints: CaptureConstraints) -> CaptureStream:
        if self._clip is None:
            raise MicrophoneAccessError("No audio captured by the browser")
        clip, self._clip = self._clip, None
        logger.debug("Browser clip acquired (%d bytes)", len(clip))
        return ClipStream(clip)
