"""Configuration for RawSync, read from ``RAWSYNC_*`` environment variables."""
from pathlib import Path
from typing import Literal, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scan and logging settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RAWSYNC_",
        extra="ignore",
    )

    # Scan
    root: Path = Path("e:\\Sync\\")
    pattern: str = "*.NEF"
    raw_dir_name: str = "raw"
    jpeg_extensions: Tuple[str, ...] = (".JPG",)  # JSON list in the environment

    # Logging
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
