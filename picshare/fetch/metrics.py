"""Metrics collection for feed fetching."""

from dataclasses import dataclass, field
from typing import ClassVar

from picshare.feed.errors import ErrorKind


@dataclass
class FetchMetrics:
    """Metrics for feed fetch operations.

    Singleton class that tracks request counts, failures by kind,
    bytes received, and total duration.
    """

    feed_requests_total: int = 0
    feed_status_codes: dict[int, int] = field(default_factory=dict)
    feed_failures_total: dict[str, int] = field(default_factory=dict)
    feed_bytes_total: int = 0
    feed_duration_ms_total: float = 0.0

    _instance: ClassVar["FetchMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "FetchMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_request(self, status_code: int, bytes_received: int) -> None:
        """Record a completed HTTP exchange.

        Args:
            status_code: HTTP status code.
            bytes_received: Number of body bytes received.
        """
        self.feed_requests_total += 1
        self.feed_status_codes[status_code] = (
            self.feed_status_codes.get(status_code, 0) + 1
        )
        self.feed_bytes_total += bytes_received

    def record_failure(self, kind: ErrorKind) -> None:
        """Record a failed feed load.

        Args:
            kind: Classification of the failure.
        """
        key = kind.value
        self.feed_failures_total[key] = self.feed_failures_total.get(key, 0) + 1

    def record_duration(self, duration_ms: float) -> None:
        """Record fetch duration.

        Args:
            duration_ms: Duration in milliseconds.
        """
        self.feed_duration_ms_total += duration_ms

    def to_dict(self) -> dict[str, int | float | dict[str, int] | dict[int, int]]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of all metrics.
        """
        return {
            "feed_requests_total": self.feed_requests_total,
            "feed_status_codes": dict(self.feed_status_codes),
            "feed_failures_total": dict(self.feed_failures_total),
            "feed_bytes_total": self.feed_bytes_total,
            "feed_duration_ms_total": round(self.feed_duration_ms_total, 2),
        }
