"""Application state: model, events, reducer, and store."""

from picshare.state.events import (
    DraftCommentChanged,
    Event,
    FeedLoaded,
    PhotoEvent,
    SubmitComment,
    ToggleLike,
)
from picshare.state.models import ApplicationState, FeedPhase
from picshare.state.reducer import (
    reduce,
    set_draft_comment,
    submit_comment,
    toggle_like,
    update_photo_by_id,
)
from picshare.state.store import StateListener, StateStore


__all__ = [
    # Models
    "ApplicationState",
    "FeedPhase",
    # Events
    "DraftCommentChanged",
    "Event",
    "FeedLoaded",
    "PhotoEvent",
    "SubmitComment",
    "ToggleLike",
    # Reducer
    "reduce",
    "set_draft_comment",
    "submit_comment",
    "toggle_like",
    "update_photo_by_id",
    # Store
    "StateListener",
    "StateStore",
]
