"""Feed fetch layer: one GET of the feed resource per application start."""

from picshare.fetch.client import FeedFetcher, ResponseSizeExceededError
from picshare.fetch.config import FeedConfig
from picshare.fetch.metrics import FetchMetrics
from picshare.fetch.redact import redact_url_credentials


__all__ = [
    "FeedConfig",
    "FeedFetcher",
    "FetchMetrics",
    "ResponseSizeExceededError",
    "redact_url_credentials",
]
