"""Recorder state machine: idle -> recording -> processing -> idle.

Owns microphone acquisition, fragment buffering for the active
``RecordingSession``, and the single transcription request issued when a
recording stops. Every failure is converted into a user-facing ``error``
string; no exception leaves the public operations.
"""

import logging
import uuid
from collections.abc import Awaitable, Callable

from voicescribe.core.models import (
    DEFAULT_CONSTRAINTS,
    CaptureConstraints,
    RecorderSnapshot,
    RecorderStatus,
)
from voicescribe.core.utils import extract_transcript
from voicescribe.services.audio.capture import CaptureDevice, CaptureStream
from voicescribe.services.transcript import TranscriptBuffer

logger = logging.getLogger(__name__)

MICROPHONE_ERROR = "Failed to access microphone. Please allow microphone permissions."
TRANSCRIPTION_ERROR = "Failed to transcribe audio. Please try again."

TranscribeFn = Callable[[bytes], Awaitable[dict]]


class RecordingSession:
    """Ordered, append-only fragments captured during one record/stop cycle."""

    def __init__(self) -> None:
        self.id = uuid.uuid4().hex
        self._fragments: list[bytes] = []

    @property
    def fragments(self) -> list[bytes]:
        return list(self._fragments)

    @property
    def fragment_count(self) -> int:
        return len(self._fragments)

    @property
    def size_bytes(self) -> int:
        return sum(len(f) for f in self._fragments)

    def append(self, fragment: bytes) -> None:
        """Buffer one captured chunk. Empty chunks are discarded."""
        if not fragment:
            return
        self._fragments.append(bytes(fragment))

    def clear(self) -> None:
        self._fragments.clear()


class RecorderStateMachine:
    """Toggle-driven recorder feeding a transcript buffer.

    Args:
        device: Capture device opened at the start of each recording.
        transcribe: Coroutine function posting one audio payload to the
            gateway and returning its JSON body (e.g. ``GatewayClient.transcribe``).
        buffer: Transcript buffer to append recognised text to.
        constraints: Capture configuration requested from the device.
    """

    def __init__(
        self,
        device: CaptureDevice,
        transcribe: TranscribeFn,
        buffer: TranscriptBuffer | None = None,
        constraints: CaptureConstraints = DEFAULT_CONSTRAINTS,
    ) -> None:
        self._device = device
        self._transcribe = transcribe
        self._buffer = buffer if buffer is not None else TranscriptBuffer()
        self._constraints = constraints
        self._status = RecorderStatus.idle
        self._error = ""
        self._session: RecordingSession | None = None
        self._stream: CaptureStream | None = None
        self._acquiring = False

    @property
    def status(self) -> RecorderStatus:
        return self._status

    @property
    def error(self) -> str:
        return self._error

    @property
    def session(self) -> RecordingSession | None:
        return self._session

    @property
    def transcript(self) -> TranscriptBuffer:
        return self._buffer

    def snapshot(self) -> RecorderSnapshot:
        return RecorderSnapshot(
            status=self._status,
            error=self._error,
            transcript=self._buffer.text,
            word_count=self._buffer.word_count,
            character_count=self._buffer.character_count,
            fragment_count=self._session.fragment_count if self._session else 0,
        )

    # -- transitions --

    async def toggle(self) -> bool:
        """Start when idle, stop when recording; rejected while processing.

        Returns:
            True if the toggle was accepted.
        """
        if self._status is RecorderStatus.recording:
            return await self.stop()
        if self._status is RecorderStatus.idle:
            return await self.start()
        logger.warning("Toggle ignored while a transcription is in flight")
        return False

    async def start(self) -> bool:
        """Acquire the capture device and begin buffering a new session.

        Overlapping starts are rejected rather than queued.
        """
        if self._status is not RecorderStatus.idle or self._acquiring:
            logger.warning("Start rejected: recorder is %s", self._status)
            return False

        self._acquiring = True
        self._error = ""
        if self._session is not None:
            self._session.clear()
        session = RecordingSession()
        self._session = session

        stream: CaptureStream | None = None
        try:
            stream = await self._device.open(self._constraints)
            stream.start(session.append)
        except Exception as exc:
            logger.error("Error starting recording: %s", exc)
            if stream is not None:
                self._release(stream)
            self._error = MICROPHONE_ERROR
            return False
        finally:
            self._acquiring = False

        self._stream = stream
        self._status = RecorderStatus.recording
        logger.info("Recording started (session %s)", session.id)
        return True

    async def stop(self) -> bool:
        """Stop capture, release the device, and transcribe the session once."""
        if self._status is not RecorderStatus.recording:
            logger.warning("Stop rejected: recorder is %s", self._status)
            return False

        stream, self._stream = self._stream, None
        session = self._session
        self._status = RecorderStatus.processing

        audio: bytes | None = None
        try:
            await stream.stop()
            audio = stream.finalize(session.fragments)
        except Exception as exc:
            logger.error("Error stopping recording: %s", exc)
            self._error = TRANSCRIPTION_ERROR
        finally:
            self._release(stream)

        try:
            if audio is not None:
                logger.info(
                    "Recording stopped (session %s, %d fragments, %d bytes)",
                    session.id,
                    session.fragment_count,
                    len(audio),
                )
                await self._request_transcript(session, audio)
        finally:
            self._status = RecorderStatus.idle
        return True

    def clear_transcript(self) -> None:
        """Empty the transcript buffer; recording status is untouched."""
        self._buffer.clear()

    def edit_transcript(self, text: str) -> None:
        """Replace the transcript with user-edited text."""
        self._buffer.set(text)

    def discard_session(self) -> bool:
        """Drop the current session's fragments unless a recording is live
        or the capture device is still being acquired for it.

        A transcription still in flight for the discarded session is
        ignored when it returns.
        """
        if self._status is RecorderStatus.recording or self._acquiring:
            logger.warning("Discard rejected: stop the recording first")
            return False
        if self._session is not None:
            self._session.clear()
            self._session = None
        return True

    # -- internals --

    async def _request_transcript(self, session: RecordingSession, audio: bytes) -> None:
        try:
            result = await self._transcribe(audio)
        except Exception as exc:
            logger.error("Transcription error: %s", exc)
            if self._session is session:
                self._error = TRANSCRIPTION_ERROR
            return

        if self._session is not session:
            logger.warning("Dropping transcription for inactive session %s", session.id)
            return

        text = extract_transcript(result)
        if text is None:
            logger.info("No transcript in response for session %s", session.id)
            return
        self._buffer.append(text)

    def _release(self, stream: CaptureStream) -> None:
        try:
            stream.release()
        except Exception as exc:
            logger.error("Error releasing capture device: %s", exc)
