"""Configuration model for the feed fetcher."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from picshare.constants import (
    DEFAULT_FEED_URL,
    DEFAULT_MAX_RESPONSE_SIZE_BYTES,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    VALID_URL_SCHEMES,
)


class FeedConfig(BaseModel):
    """Configuration for loading the photo feed.

    The feed URL is fixed for the lifetime of the application; there is no
    retry policy because a failed load is terminal.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    feed_url: Annotated[str, Field(min_length=1)] = DEFAULT_FEED_URL
    timeout_seconds: Annotated[float, Field(ge=1.0, le=300.0)] = (
        DEFAULT_TIMEOUT_SECONDS
    )
    user_agent: Annotated[str, Field(min_length=1, max_length=500)] = (
        DEFAULT_USER_AGENT
    )
    max_response_size_bytes: Annotated[int, Field(ge=1024, le=100 * 1024 * 1024)] = (
        DEFAULT_MAX_RESPONSE_SIZE_BYTES
    )

    @field_validator("feed_url")
    @classmethod
    def validate_scheme(cls, v: str) -> str:
        """Ensure the feed URL is http or https."""
        if not v.startswith(VALID_URL_SCHEMES):
            msg = f"Feed URL must start with http:// or https://, got {v!r}"
            raise ValueError(msg)
        return v
