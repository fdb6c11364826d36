"""VoiceScribe: browser voice recorder with a Deepgram transcription gateway."""

__version__ = "0.1.0"
