"""Environment-based settings for job_scout."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .sources.weworkremotely import FEED_URL, USER_AGENT

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """
    Configuration for a scout run. Every field can be set through a
    JOB_SCOUT_* environment variable or the project's .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="JOB_SCOUT_",
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Feed
    feed_url: str = FEED_URL
    user_agent: str = USER_AGENT
    timeout_s: float = 20.0  # seconds, bounds the whole fetch

    # Storage
    storage_path: Path = BASE_DIR / "data" / "jobs.json"

    # Logging
    log_level: str = "INFO"
