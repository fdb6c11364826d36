"""
Application configuration via pydantic-settings.

Loads values from .env file with sensible defaults for local development.
Use ``get_settings()`` to obtain the cached singleton instance.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """VoiceScribe application settings loaded from environment / .env file.

    All settings can be overridden via environment variables or a `.env` file.
    Field names map directly to env var names (case-insensitive).

    Attributes:
        deepgram_api_key: Server-held Deepgram credential (``DEEPGRAM_API_KEY``).
        deepgram_base_url: Deepgram API host the gateway forwards audio to.
        api_base_url: Gateway URL used by the recorder clients.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore unrecognized env vars
    )

    # --- Deepgram (transcription service) ---
    deepgram_api_key: str = ""  # Empty = gateway answers with a configuration error
    deepgram_base_url: str = "https://api.deepgram.com"
    deepgram_model: str = "nova-2"
    deepgram_language: str = "en"
    deepgram_smart_format: bool = True
    deepgram_content_type: str = "audio/wav"  # Declared type; payload is not transcoded
    deepgram_timeout: float = 60.0  # Seconds for the single outbound call

    # --- Application ---
    app_host: str = "0.0.0.0"  # Bind address for the FastAPI server
    app_port: int = 8000
    log_level: str = "INFO"  # Python logging level
    cors_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:8501",  # Streamlit
            "http://localhost:3000",  # Dev frontend
        ]
    )

    # --- Recorder clients ---
    api_base_url: str = "http://localhost:8000"
    client_timeout: float = 60.0


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings singleton.

    Uses ``functools.lru_cache`` so the .env file is read only once.
    Subsequent calls return the same ``Settings`` instance.

    Returns:
        Settings: The application-wide configuration object.
    """
    return Settings()
