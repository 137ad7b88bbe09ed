"""Application configuration."""
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from .env and environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="MANGAMOTION_")

    min_frame_count: int = 4
    max_frame_count: int = 16
    default_frame_count: int = 8
    min_motion_intensity: float = 10
    max_motion_intensity: float = 100
    default_motion_intensity: float = 50
    default_effect: str = "pan-zoom"
    playback_interval_ms: int = 100  # client repaint timer
    export_filename_prefix: str = "manga-animation"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000


settings = Settings()
