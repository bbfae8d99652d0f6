"""Boundary between the view and the event stream."""

from collections.abc import Callable
from typing import Final

from picshare.renderer.html_renderer import HtmlRenderer
from picshare.state.events import (
    DraftCommentChanged,
    Event,
    PhotoEvent,
    SubmitComment,
    ToggleLike,
)
from picshare.state.models import ApplicationState


# Values of the data-event attribute emitted by the template
UI_TOGGLE_LIKE: Final[str] = "toggle-like"
UI_DRAFT_COMMENT_CHANGED: Final[str] = "draft-comment-changed"
UI_SUBMIT_COMMENT: Final[str] = "submit-comment"

Dispatch = Callable[[Event], None]


def event_from_ui(name: str, photo_id: int, value: str | None = None) -> PhotoEvent:
    """Translate a UI interaction into an event.

    Args:
        name: data-event attribute of the element.
        photo_id: data-photo-id attribute of the element.
        value: Current input value, for input changes.

    Returns:
        The matching event.

    Raises:
        ValueError: If the interaction is unknown.
    """
    if name == UI_TOGGLE_LIKE:
        return ToggleLike(photo_id=photo_id)
    if name == UI_DRAFT_COMMENT_CHANGED:
        return DraftCommentChanged(photo_id=photo_id, text=value or "")
    if name == UI_SUBMIT_COMMENT:
        return SubmitComment(photo_id=photo_id)
    msg = f"Unknown UI event: {name!r}"
    raise ValueError(msg)


class Renderer:
    """Pairs the HTML renderer with a dispatch callback.

    The renderer only reads state snapshots; interactions go back through
    ``dispatch`` and never touch state directly.
    """

    def __init__(
        self,
        dispatch: Dispatch,
        html_renderer: HtmlRenderer | None = None,
    ) -> None:
        self._dispatch = dispatch
        self._html = html_renderer or HtmlRenderer()
        self._last_html: str | None = None

    @property
    def last_html(self) -> str | None:
        """Get the most recently rendered page."""
        return self._last_html

    def render(self, state: ApplicationState) -> str:
        """Render a state snapshot and remember the output."""
        self._last_html = self._html.render(state)
        return self._last_html

    def on_event(self, name: str, photo_id: int, value: str | None = None) -> None:
        """Forward a UI interaction to the event stream."""
        self._dispatch(event_from_ui(name, photo_id, value))
