"""Application settings powered by Pydantic BaseSettings."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from picshare.constants import (
    DEFAULT_FEED_URL,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)
from picshare.fetch.config import FeedConfig


class AppSettings(BaseSettings):
    """Centralized environment configuration.

    Every field can be set with a ``PICSHARE_`` prefixed variable, e.g.
    ``PICSHARE_FEED_URL``.
    """

    model_config = SettingsConfigDict(
        env_prefix="PICSHARE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    feed_url: str = DEFAULT_FEED_URL
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, ge=1.0, le=300.0)
    user_agent: str = DEFAULT_USER_AGENT
    log_json: bool = True
    log_level: str = "INFO"

    def to_feed_config(self) -> FeedConfig:
        """Build the fetcher configuration."""
        return FeedConfig(
            feed_url=self.feed_url,
            timeout_seconds=self.timeout_seconds,
            user_agent=self.user_agent,
        )

    def logging_level(self) -> int:
        """Resolve ``log_level`` to a logging module constant."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
