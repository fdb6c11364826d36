"""Local microphone capture via ``sounddevice``.

PCM fragments arrive on the PortAudio thread and are marshalled onto the
event loop with ``call_soon_threadsafe``; ``finalize`` wraps them into a
16-bit WAV container with ``soundfile`` so the payload matches the
content type the gateway declares upstream.
"""

import asyncio
import io
import logging

import numpy as np
import sounddevice as sd
import soundfile as sf

from voicescribe.core.exceptions import MicrophoneAccessError
from voicescribe.core.models import CaptureConstraints
from voicescribe.services.audio.capture import CaptureDevice, CaptureStream, FragmentCallback

logger = logging.getLogger(__name__)


class SoundDeviceStream(CaptureStream):
    """``sounddevice.InputStream`` wrapper delivering int16 PCM fragments."""

    DTYPE = "int16"

    def __init__(self, constraints: CaptureConstraints, device: int | str | None = None) -> None:
        self._constraints = constraints
        self._device = device
        self._stream: sd.InputStream | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._on_fragment: FragmentCallback | None = None

    def _audio_callback(self, indata: np.ndarray, frames: int, time_info, status) -> None:
        """PortAudio callback; runs on the audio thread."""
        if status:
            logger.warning("Audio callback status: %s", status)
        if self._loop is None or self._on_fragment is None:
            return
        # indata is reused by PortAudio, so copy before handing off
        self._loop.call_soon_threadsafe(self._on_fragment, indata.copy().tobytes())

    def start(self, on_fragment: FragmentCallback) -> None:
        self._loop = asyncio.get_running_loop()
        self._on_fragment = on_fragment
        try:
            self._stream = sd.InputStream(
                samplerate=self._constraints.sample_rate,
                channels=self._constraints.channel_count,
                dtype=self.DTYPE,
                device=self._device,
                callback=self._audio_callback,
                blocksize=1024,
            )
            self._stream.start()
        except sd.PortAudioError as exc:
            raise MicrophoneAccessError(f"Cannot open input device: {exc}") from exc

    async def stop(self) -> None:
        if self._stream is not None and self._stream.active:
            self._stream.stop()
        # Let fragments queued by the audio thread reach the session
        await asyncio.sleep(0)

    def release(self) -> None:
        if self._stream is None:
            return
        self._stream.close()
        self._stream = None
        self._on_fragment = None

    def finalize(self, fragments: list[bytes]) -> bytes:
        """Wrap raw PCM fragments into a 16-bit WAV file."""
        pcm = np.frombuffer(b"".join(fragments), dtype=np.int16)
        channels = self._constraints.channel_count
        if channels > 1:
            pcm = pcm.reshape(-1, channels)
        buf = io.BytesIO()
        sf.write(buf, pcm, self._constraints.sample_rate, format="WAV", subtype="PCM_16")
        return buf.getvalue()


class SoundDeviceMicrophone(CaptureDevice):
    """Local microphone input.

    PortAudio offers no echo-cancellation or noise-suppression controls, so
    those constraints are only honoured by browser capture.
    """

    def __init__(self, device: int | str | None = None) -> None:
        self._device = device

    async def open(self, constraints: CaptureConstraints) -> CaptureStream:
        try:
            sd.check_input_settings(
                device=self._device,
                channels=constraints.channel_count,
                samplerate=constraints.sample_rate,
                dtype=SoundDeviceStream.DTYPE,
            )
        except (sd.PortAudioError, ValueError) as exc:
            raise MicrophoneAccessError(f"Microphone unavailable: {exc}") from exc
        logger.debug(
            "Input device ok (rate=%d, channels=%d)",
            constraints.sample_rate,
            constraints.channel_count,
        )
        return SoundDeviceStream(constraints, device=self._device)
