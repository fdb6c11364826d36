"""
VoiceScribe Streamlit UI: main entry point.

Run with: ``streamlit run voicescribe/ui/app.py`` (the gateway must be
running, e.g. ``voicescribe-server``).
"""

import streamlit as st

from voicescribe.core.config import get_settings
from voicescribe.core.utils import configure_logging
from voicescribe.ui.components.recorder import gateway_status, get_recorder, render_recorder
from voicescribe.ui.components.transcript_view import render_transcript

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Voice Transcriber",
    page_icon="\U0001f399️",
    layout="centered",
)

settings = get_settings()

# ---------------------------------------------------------------------------
# Session state defaults
# ---------------------------------------------------------------------------
_DEFAULTS = {
    "api_base_url": settings.api_base_url,
    "audio_key": 0,
}

for key, value in _DEFAULTS.items():
    if key not in st.session_state:
        st.session_state[key] = value

if "logging_configured" not in st.session_state:
    configure_logging(settings.log_level)
    st.session_state.logging_configured = True

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
st.title("Voice Transcriber")
st.caption("Powered by Deepgram • Speech-to-text")

with st.sidebar:
    st.session_state.api_base_url = st.text_input(
        "Gateway URL", value=st.session_state.api_base_url
    )

    # Connection status indicator
    _conn_ok, _conn_msg = gateway_status(st.session_state.api_base_url)
    if _conn_ok:
        st.success(f"Gateway: {_conn_msg}")
    else:
        st.error(f"Gateway: {_conn_msg}")

render_recorder()
st.divider()
render_transcript(get_recorder())
