"""Application state model."""

from enum import Enum, auto

from pydantic import BaseModel, ConfigDict

from picshare.feed.errors import ErrorInfo
from picshare.feed.models import Feed


class FeedPhase(Enum):
    """Phase of the feed as seen by the view.

    Derived from ApplicationState rather than stored:
        LOADING: No feed and no error yet
        ERROR: The last load failed
        LOADED: A feed is present and no error is pending
    """

    LOADING = auto()
    ERROR = auto()
    LOADED = auto()


class ApplicationState(BaseModel):
    """The single state value held by the store.

    Attributes:
        feed: Loaded feed, or None while loading.
        last_error: Error from the most recent failed load, if any.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    feed: Feed | None = None
    last_error: ErrorInfo | None = None

    @property
    def phase(self) -> FeedPhase:
        """Get the derived feed phase."""
        if self.last_error is not None:
            return FeedPhase.ERROR
        if self.feed is None:
            return FeedPhase.LOADING
        return FeedPhase.LOADED

    @property
    def is_loading(self) -> bool:
        """Check if the feed is still loading."""
        return self.phase == FeedPhase.LOADING
