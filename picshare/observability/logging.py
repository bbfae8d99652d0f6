"""Structured logging for picshare commands.

Every component logs through structlog with a ``component`` key bound on its
logger. ``configure_logging`` picks the renderer and level from ``AppSettings``
so the CLI and tests share one setup path. ``session_context`` tags all log
lines of one command invocation with the same ``session_id``.
"""

import logging
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

import structlog

from picshare.settings import AppSettings


SESSION_ID_LENGTH = 12

# Loggers of the HTTP stack; each request is already logged as a fetch event.
_QUIET_STDLIB_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    settings: AppSettings,
    *,
    verbose: bool = False,
    json_logs: bool | None = None,
    output: TextIO | None = None,
) -> int:
    """Configure structlog from the application settings.

    Args:
        settings: Source of ``log_level`` and ``log_json``.
        verbose: Force DEBUG regardless of ``log_level``.
        json_logs: Override ``log_json`` (None keeps the setting).
        output: Stream to write to (default: stderr at call time).

    Returns:
        The effective logging level.
    """
    level = logging.DEBUG if verbose else settings.logging_level()
    json_format = settings.log_json if json_logs is None else json_logs
    stream = output if output is not None else sys.stderr

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=stream, level=level)
    for name in _QUIET_STDLIB_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    return level


@contextmanager
def session_context(session_id: str | None = None) -> Iterator[str]:
    """Bind a session id to every log line emitted inside the block.

    Args:
        session_id: Id to bind; a random one is generated when omitted.

    Yields:
        The bound session id.
    """
    if session_id is None:
        session_id = uuid.uuid4().hex[:SESSION_ID_LENGTH]
    with structlog.contextvars.bound_contextvars(session_id=session_id):
        yield session_id
