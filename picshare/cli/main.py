"""CLI commands for Picshare."""

import asyncio
import sys

import click
import structlog
from pydantic import ValidationError

from picshare import __version__
from picshare.constants import COMPONENT_CLI
from picshare.feed.models import FeedErr
from picshare.fetch.client import FeedFetcher
from picshare.fetch.config import FeedConfig
from picshare.fetch.metrics import FetchMetrics
from picshare.observability.logging import configure_logging, session_context
from picshare.program import Program
from picshare.renderer.renderer import Renderer
from picshare.settings import get_settings


logger = structlog.get_logger()


def _describe(error: ValidationError) -> str:
    """Summarize the first validation error as ``field: message``."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}" if location else first["msg"]


def _setup(feed_url: str | None, json_logs: bool | None, verbose: bool) -> FeedConfig:
    """Configure logging and build the fetcher configuration.

    Args:
        feed_url: Feed URL override from the command line.
        json_logs: Log format override from the command line.
        verbose: Enable debug logging.

    Returns:
        Fetcher configuration.

    Raises:
        click.UsageError: If a PICSHARE_ variable holds an invalid value.
        click.BadParameter: If --feed-url is not an http(s) URL.
    """
    try:
        settings = get_settings()
        config = settings.to_feed_config()
    except ValidationError as e:
        raise click.UsageError(f"Invalid PICSHARE_ setting: {_describe(e)}") from e

    configure_logging(settings, verbose=verbose, json_logs=json_logs)

    if feed_url:
        try:
            config = FeedConfig.model_validate(
                {**config.model_dump(), "feed_url": feed_url}
            )
        except ValidationError as e:
            raise click.BadParameter(_describe(e), param_hint="--feed-url") from e
    return config


async def _run_once(config: FeedConfig) -> tuple[Program, Renderer]:
    program = Program(
        FeedFetcher(config),
        on_render=lambda state: renderer.render(state),
    )
    renderer = Renderer(program.dispatch)
    await program.run_until_loaded()
    program.close()
    return program, renderer


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Picshare photo feed."""


_feed_url_option = click.option(
    "--feed-url",
    default=None,
    help="Feed endpoint (defaults to PICSHARE_FEED_URL or the built-in URL)",
)
_json_logs_option = click.option(
    "--json-logs/--console-logs",
    default=None,
    help="Log format (defaults to PICSHARE_LOG_JSON)",
)
_verbose_option = click.option(
    "-v", "--verbose", is_flag=True, default=False, help="Enable debug logging"
)


@cli.command()
@_feed_url_option
@_json_logs_option
@_verbose_option
def show(feed_url: str | None, json_logs: bool | None, verbose: bool) -> None:
    """Load the feed once and print the rendered page."""
    config = _setup(feed_url, json_logs, verbose)
    log = logger.bind(component=COMPONENT_CLI, command="show")

    with session_context():
        _, renderer = asyncio.run(_run_once(config))
        log.info("show_complete", metrics=FetchMetrics.get_instance().to_dict())
    click.echo(renderer.last_html or "")


@cli.command()
@_feed_url_option
@_json_logs_option
@_verbose_option
def check(feed_url: str | None, json_logs: bool | None, verbose: bool) -> None:
    """Load the feed once and report whether it decoded."""
    config = _setup(feed_url, json_logs, verbose)
    log = logger.bind(component=COMPONENT_CLI, command="check")

    with session_context():
        result = FeedFetcher(config).fetch()
        if isinstance(result, FeedErr):
            log.info("check_failed", kind=result.error.kind.value)
            click.echo(
                f"Feed failed: {result.error.kind.value}: {result.error.message}",
                err=True,
            )
            sys.exit(1)

    click.echo(f"Feed OK: {len(result.feed)} photos")
    for photo in result.feed.photos:
        click.echo(f"  [{photo.id}] {photo.caption} ({len(photo.comments)} comments)")


def main() -> None:
    """Entry point for the picshare script."""
    cli()
