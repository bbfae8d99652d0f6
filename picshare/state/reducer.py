"""Pure state transitions.

``reduce`` is the only place where state changes are computed. It never
mutates its input: nested values are replaced with updated copies, and when
an event changes nothing the original state object is returned as-is.
"""

from collections.abc import Callable

from picshare.feed.models import Feed, FeedOk, Photo
from picshare.state.events import (
    DraftCommentChanged,
    Event,
    FeedLoaded,
    SubmitComment,
    ToggleLike,
)
from picshare.state.models import ApplicationState


def toggle_like(photo: Photo) -> Photo:
    """Flip the liked flag of a photo."""
    return photo.model_copy(update={"liked": not photo.liked})


def set_draft_comment(photo: Photo, text: str) -> Photo:
    """Replace the draft comment verbatim."""
    if photo.draft_comment == text:
        return photo
    return photo.model_copy(update={"draft_comment": text})


def submit_comment(photo: Photo) -> Photo:
    """Append the trimmed draft to the comments and clear the draft.

    A draft that is empty after trimming leaves the photo unchanged.
    """
    comment = photo.draft_comment.strip()
    if not comment:
        return photo
    return photo.model_copy(
        update={"comments": (*photo.comments, comment), "draft_comment": ""}
    )


def update_photo_by_id(
    feed: Feed,
    photo_id: int,
    update: Callable[[Photo], Photo],
) -> Feed:
    """Apply an update to the photo with the given id.

    Ids are unique within a feed, so at most one photo is touched.

    Args:
        feed: Feed to update.
        photo_id: Id of the photo to update.
        update: Function producing the updated photo.

    Returns:
        New feed with the photo replaced, or the same feed object when no
        photo has that id or the update changed nothing.
    """
    for index, photo in enumerate(feed.photos):
        if photo.id != photo_id:
            continue
        updated = update(photo)
        if updated is photo:
            return feed
        photos = (*feed.photos[:index], updated, *feed.photos[index + 1 :])
        return feed.model_copy(update={"photos": photos})
    return feed


def _photo_update(event: Event) -> Callable[[Photo], Photo]:
    if isinstance(event, ToggleLike):
        return toggle_like
    if isinstance(event, DraftCommentChanged):
        text = event.text
        return lambda photo: set_draft_comment(photo, text)
    if isinstance(event, SubmitComment):
        return submit_comment
    msg = f"Unsupported event: {event!r}"
    raise TypeError(msg)


def reduce(state: ApplicationState, event: Event) -> ApplicationState:
    """Compute the next state for an event.

    Args:
        state: Current state.
        event: Event to apply.

    Returns:
        Next state. Photo events that target a missing feed or an unknown
        id return ``state`` itself.

    Raises:
        TypeError: If ``event`` is not one of the known event types.
    """
    if isinstance(event, FeedLoaded):
        result = event.result
        if isinstance(result, FeedOk):
            return state.model_copy(update={"feed": result.feed, "last_error": None})
        return state.model_copy(update={"last_error": result.error})

    update = _photo_update(event)
    if state.feed is None:
        return state

    feed = update_photo_by_id(state.feed, event.photo_id, update)
    if feed is state.feed:
        return state
    return state.model_copy(update={"feed": feed})
