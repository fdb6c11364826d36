"""
Audio module - Capture devices and the recorder state machine.
"""

from .capture import CaptureDevice, CaptureStream, ClipCaptureDevice
from .recorder import RecorderStateMachine, RecordingSession

__all__ = [
    "CaptureDevice",
    "CaptureStream",
    "ClipCaptureDevice",
    "RecorderStateMachine",
    "RecordingSession",
    "create_microphone",
]


def create_microphone(device: int | str | None = None) -> CaptureDevice:
    """Factory for the local sounddevice microphone.

    Imported lazily: ``sounddevice`` needs the PortAudio shared library.
    """
    from .microphone import SoundDeviceMicrophone

    return SoundDeviceMicrophone(device=device)
