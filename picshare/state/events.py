"""Events consumed by the reducer.

This is the entire inbound message surface of the application: the feed
load result plus three per-photo user interactions.
"""

from dataclasses import dataclass

from picshare.feed.models import FeedResult


@dataclass(frozen=True)
class FeedLoaded:
    """The feed fetch finished."""

    result: FeedResult


@dataclass(frozen=True)
class ToggleLike:
    """The like button of a photo was clicked."""

    photo_id: int


@dataclass(frozen=True)
class DraftCommentChanged:
    """The comment input of a photo changed."""

    photo_id: int
    text: str


@dataclass(frozen=True)
class SubmitComment:
    """The comment form of a photo was submitted."""

    photo_id: int


Event = FeedLoaded | ToggleLike | DraftCommentChanged | SubmitComment

PhotoEvent = ToggleLike | DraftCommentChanged | SubmitComment
