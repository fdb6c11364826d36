"""Transcript component: editable text area, Clear button, and counters."""

import streamlit as st

from voicescribe.services.audio import RecorderStateMachine


def render_transcript(recorder: RecorderStateMachine) -> None:
    """Render the transcript buffer owned by ``recorder``."""
    st.subheader("Transcription")
    st.caption("Your speech will appear here after processing")

    edited = st.text_area(
        "Transcript",
        value=recorder.transcript.text,
        height=300,
        placeholder="Record your voice and click stop to see transcription here...",
        label_visibility="collapsed",
    )
    if edited != recorder.transcript.text:
        recorder.edit_transcript(edited)

    col_words, col_chars, col_clear = st.columns([2, 2, 1])
    col_words.markdown(f"Words: **{recorder.transcript.word_count}**")
    col_chars.markdown(f"Characters: **{recorder.transcript.character_count}**")

    if recorder.transcript and col_clear.button("\U0001f5d1️ Clear"):
        recorder.clear_transcript()
        st.rerun()
