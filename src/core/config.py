"""
Application configuration via pydantic-settings.

Loads values from .env file with sensible defaults for local development.
Use ``get_settings()`` to obtain the cached singleton instance.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Coral application settings loaded from environment / .env file.

    All settings can be overridden via environment variables or a `.env` file.
    Field names map directly to env var names (case-insensitive).

    Attributes:
        stt_provider: Speech-to-text backend ("deepgram").
        deepgram_api_key: Static API token sent as ``Authorization: Token ...``.
        recordings_dir: Scratch directory for finished captures.
        haptics_enabled: Fire a tactile pulse when questions are detected.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore unrecognized env vars
    )

    # --- Speech-to-text ---
    stt_provider: str = "deepgram"
    deepgram_api_key: str = ""
    deepgram_base_url: str = "https://api.deepgram.com"
    deepgram_punctuate: bool = True  # Sentence punctuation drives question counting
    deepgram_timeout: float = 30.0
    audio_content_type: str = "audio/m4a"

    # --- Haptics ---
    haptics_enabled: bool = True

    # --- Application ---
    app_host: str = "0.0.0.0"  # Bind address for the FastAPI server
    app_port: int = 8000
    log_level: str = "INFO"  # Python logging level

    # --- Storage ---
    # Captures live here only between stop and transcription
    recordings_dir: str = "data/recordings"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings singleton.

    Uses ``functools.lru_cache`` so the .env file is read only once.
    Subsequent calls return the same ``Settings`` instance.

    Returns:
        Settings: The application-wide configuration object.
    """
    return Settings()
