"""Feed view: state projection and HTML rendering."""

from picshare.renderer.html_renderer import HtmlRenderer
from picshare.renderer.messages import (
    LOAD_ERROR_MESSAGE,
    LOADING_MESSAGE,
    PROCESS_ERROR_MESSAGE,
    error_message_for,
)
from picshare.renderer.models import FeedView, PhotoView, build_view
from picshare.renderer.renderer import (
    UI_DRAFT_COMMENT_CHANGED,
    UI_SUBMIT_COMMENT,
    UI_TOGGLE_LIKE,
    Dispatch,
    Renderer,
    event_from_ui,
)


__all__ = [
    "Dispatch",
    "FeedView",
    "HtmlRenderer",
    "LOADING_MESSAGE",
    "LOAD_ERROR_MESSAGE",
    "PROCESS_ERROR_MESSAGE",
    "PhotoView",
    "Renderer",
    "UI_DRAFT_COMMENT_CHANGED",
    "UI_SUBMIT_COMMENT",
    "UI_TOGGLE_LIKE",
    "build_view",
    "error_message_for",
    "event_from_ui",
]
