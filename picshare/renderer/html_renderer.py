"""HTML renderer using Jinja2 templates."""

import time

import structlog
from jinja2 import Environment, PackageLoader, select_autoescape

from picshare.constants import COMPONENT_RENDERER
from picshare.renderer.messages import LOADING_MESSAGE
from picshare.renderer.models import FeedView, build_view
from picshare.state.models import ApplicationState


logger = structlog.get_logger()

FEED_TEMPLATE = "feed.html"


class HtmlRenderer:
    """Renders the feed page from a state snapshot.

    Templates are loaded from picshare/renderer/templates/ with auto-escaping
    enabled, since captions and comments are user content.
    """

    def __init__(self) -> None:
        """Initialize the renderer and its Jinja2 environment."""
        self._log = logger.bind(component=COMPONENT_RENDERER)
        self._env = Environment(
            loader=PackageLoader("picshare.renderer", "templates"),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, state: ApplicationState) -> str:
        """Render the page for a state.

        Args:
            state: State snapshot.

        Returns:
            Rendered HTML.
        """
        return self.render_view(build_view(state))

    def render_view(self, view: FeedView) -> str:
        """Render the page for an already projected view.

        Args:
            view: Feed view.

        Returns:
            Rendered HTML.
        """
        start_time = time.perf_counter()
        template = self._env.get_template(FEED_TEMPLATE)
        html = template.render(view=view, loading_message=LOADING_MESSAGE)

        duration_ms = (time.perf_counter() - start_time) * 1000
        self._log.debug(
            "html_render_complete",
            phase=view.phase.name,
            photos=len(view.photos),
            bytes=len(html),
            duration_ms=round(duration_ms, 2),
        )
        return html
