"""
Recorder component: renders the record control and drives the state machine.

The browser records through ``st.audio_input``; each finished clip is
loaded into a ``ClipCaptureDevice`` and run through one full
idle -> recording -> processing -> idle cycle.
"""

import asyncio
import logging

import streamlit as st

from voicescribe.core.models import RecorderStatus
from voicescribe.services.audio import ClipCaptureDevice, RecorderStateMachine
from voicescribe.ui.api_client import GatewayClient

logger = logging.getLogger(__name__)

_STATUS_BADGES = {
    RecorderStatus.idle: "⚪ Ready",
    RecorderStatus.recording: "\U0001f534 Recording...",
    RecorderStatus.processing: "⚡ Processing...",
}


async def _transcribe(audio: bytes) -> dict:
    """Post one clip to the gateway with a client bound to the current loop."""
    async with GatewayClient(base_url=st.session_state.api_base_url) as client:
        return await client.transcribe(audio)


async def _check_gateway(base_url: str) -> tuple[bool, str]:
    async with GatewayClient(base_url=base_url) as client:
        return await client.check_connection()


def gateway_status(base_url: str) -> tuple[bool, str]:
    """Check gateway reachability for the sidebar. Returns (ok, message)."""
    return asyncio.run(_check_gateway(base_url))


def get_recorder() -> RecorderStateMachine:
    """Return the page's recorder, creating it on first use."""
    if "recorder" not in st.session_state:
        st.session_state.clip_device = ClipCaptureDevice()
        st.session_state.recorder = RecorderStateMachine(
            device=st.session_state.clip_device,
            transcribe=_transcribe,
        )
    return st.session_state.recorder


async def _run_cycle(recorder: RecorderStateMachine) -> None:
    """Start, then stop: the clip is delivered on stop and transcribed once."""
    if await recorder.toggle():
        await recorder.toggle()


def _process_clip(audio_bytes: bytes) -> None:
    recorder = get_recorder()
    st.session_state.clip_device.load(audio_bytes)
    asyncio.run(_run_cycle(recorder))
    # New widget key resets st.audio_input so the clip is not resubmitted
    st.session_state.audio_key += 1


def render_recorder() -> None:
    """Render the record control, status badge, and error banner."""
    recorder = get_recorder()
    pending = st.session_state.pop("_pending_audio", None)

    st.subheader("\U0001f3a4 Voice Transcription")
    st.caption("Record, then stop to transcribe")

    if pending is not None:
        st.markdown(f"**{_STATUS_BADGES[RecorderStatus.processing]}**")
        with st.spinner("Processing audio..."):
            _process_clip(pending)
        st.rerun()
        return

    audio = st.audio_input("Record audio", key=f"audio_{st.session_state.audio_key}")
    st.markdown(f"**{_STATUS_BADGES[recorder.status]}**")

    if recorder.error:
        st.error(recorder.error)

    if audio is not None:
        st.session_state._pending_audio = audio.getvalue()
        st.rerun()
