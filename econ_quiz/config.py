"""
Configuration settings for econ-quiz.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ECON_QUIZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Storage
    # ========================================
    data_dir: Path = Field(
        default=Path.home() / ".econ_quiz",
        description="Directory holding the progress marker",
    )
    progress_file: str = Field(
        default="progress.json",
        description="File name of the last-session progress record",
    )
    question_bank_path: Path | None = Field(
        default=None,
        description="Question bank JSON file (packaged sample bank when unset)",
    )

    # ========================================
    # Session
    # ========================================
    levels: list[int] = Field(
        default=[1, 2, 3],
        description="Difficulty levels offered in the menu",
    )
    default_level: int = Field(default=1, ge=1)
    random_seed: int | None = Field(
        default=None,
        description="Seed for question order (random when unset)",
    )

    # ========================================
    # Presentation & Logging
    # ========================================
    feedback_delay_seconds: float = Field(
        default=0.8,
        ge=0,
        description="Pause after feedback before the next question is shown",
    )
    log_level: str = Field(default="WARNING")

    @property
    def progress_path(self) -> Path:
        return self.data_dir / self.progress_file


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
