"""Configuration management."""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORPUS_DIR = Path(__file__).parent / "data" / "corpus"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """Sidecar settings from CHAT_CLASSIFIER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CHAT_CLASSIFIER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    corpus_dir: Path = Field(default=DEFAULT_CORPUS_DIR, description="Directory with <category>.txt files")
    log_level: LogLevel = Field(default="INFO", description="Root logging level")
    max_message_chars: int = Field(default=500, gt=0, description="Message prefix length passed to the classifier")

    @field_validator("log_level", mode="before")
    @classmethod
    def _uppercase_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
