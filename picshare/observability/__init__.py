"""Observability module for logging."""

from picshare.observability.logging import configure_logging, session_context


__all__ = [
    "configure_logging",
    "session_context",
]
