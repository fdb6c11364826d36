"""Shared utility functions for VoiceScribe."""

import logging
import re

_WHITESPACE = re.compile(r"\s+")


def extract_transcript(result: object) -> str | None:
    """Return the transcript at ``results.channels[0].alternatives[0].transcript``.

    Any missing key, empty list, wrong container type, or empty string
    yields ``None``; a response without text is not an error.
    """
    try:
        transcript = result["results"]["channels"][0]["alternatives"][0]["transcript"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(transcript, str) or not transcript:
        return None
    return transcript


def count_words(text: str) -> int:
    """Count whitespace-separated words (runs of whitespace collapse)."""
    return len([word for word in _WHITESPACE.split(text.strip()) if word])


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for a process entry point."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
