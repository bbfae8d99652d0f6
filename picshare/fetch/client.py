"""HTTP client that loads the photo feed exactly once per call."""

import time
from io import BytesIO

import httpx
import structlog

from picshare.constants import COMPONENT_FETCH, HTTP_STATUS_OK_MAX, HTTP_STATUS_OK_MIN
from picshare.feed.decoder import decode_feed_bytes
from picshare.feed.errors import ErrorInfo, PayloadDecodeError
from picshare.feed.models import FeedErr, FeedOk, FeedResult
from picshare.fetch.config import FeedConfig
from picshare.fetch.metrics import FetchMetrics
from picshare.fetch.redact import redact_url_credentials


logger = structlog.get_logger()

DEFAULT_CHUNK_SIZE = 8192


class ResponseSizeExceededError(Exception):
    """Raised when the response body exceeds the configured limit."""


class FeedFetcher:
    """Loads the photo feed from the configured endpoint.

    Each call to ``fetch`` issues exactly one GET. There is no retry,
    polling, or cancellation. Network problems, non-2xx statuses and
    undecodable payloads all resolve to ``FeedErr`` instead of raising.
    """

    def __init__(
        self,
        config: FeedConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            config: Feed configuration.
            transport: Optional httpx transport (used by tests).
        """
        self._config = config
        self._transport = transport
        self._metrics = FetchMetrics.get_instance()
        self._log = logger.bind(
            component=COMPONENT_FETCH,
            url=redact_url_credentials(config.feed_url),
        )

    @property
    def config(self) -> FeedConfig:
        """Get the fetcher configuration."""
        return self._config

    def fetch(self) -> FeedResult:
        """Fetch and decode the feed.

        Returns:
            FeedOk with the decoded feed, or FeedErr describing the failure.
        """
        start_time_ns = time.perf_counter_ns()
        self._log.info("feed_fetch_started")

        result = self._load()

        duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000
        self._metrics.record_duration(duration_ms)

        if isinstance(result, FeedErr):
            self._metrics.record_failure(result.error.kind)
            self._log.warning(
                "feed_fetch_failed",
                kind=result.error.kind.value,
                error=result.error.message,
                status_code=result.error.status_code,
                duration_ms=round(duration_ms, 2),
            )
        else:
            self._log.info(
                "feed_fetch_complete",
                photos=len(result.feed),
                duration_ms=round(duration_ms, 2),
            )

        return result

    def _build_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self._config.user_agent,
            "Accept": "application/json",
        }

    def _load(self) -> FeedResult:
        """Execute the request and decode the body.

        Returns:
            Result of the single load attempt.
        """
        url = self._config.feed_url
        try:
            with (
                httpx.Client(
                    timeout=self._config.timeout_seconds,
                    follow_redirects=True,
                    transport=self._transport,
                ) as client,
                client.stream("GET", url, headers=self._build_headers()) as response,
            ):
                status_code = response.status_code
                if not HTTP_STATUS_OK_MIN <= status_code < HTTP_STATUS_OK_MAX:
                    self._metrics.record_request(status_code, 0)
                    return FeedErr(
                        ErrorInfo.transport(
                            f"Unexpected HTTP status {status_code}",
                            status_code=status_code,
                        )
                    )
                body = self._read_body_with_limit(response)

        except ResponseSizeExceededError as e:
            return FeedErr(ErrorInfo.transport(str(e)))

        except httpx.TimeoutException as e:
            return FeedErr(ErrorInfo.transport(f"Request timed out: {e}"))

        except httpx.ConnectError as e:
            return FeedErr(ErrorInfo.transport(f"Connection failed: {e}"))

        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            return FeedErr(ErrorInfo.transport(f"Request failed: {e}"))

        self._metrics.record_request(status_code, len(body))

        try:
            feed = decode_feed_bytes(body)
        except PayloadDecodeError as e:
            self._log.debug("feed_decode_failed", **e.to_dict())
            return FeedErr(e.error)

        return FeedOk(feed)

    def _read_body_with_limit(self, response: httpx.Response) -> bytes:
        """Read response body with size limit.

        Args:
            response: Streaming HTTP response.

        Returns:
            Response body bytes.

        Raises:
            ResponseSizeExceededError: If the body exceeds the limit.
        """
        max_size = self._config.max_response_size_bytes

        content_length = response.headers.get("content-length")
        if (
            content_length
            and content_length.isdigit()
            and int(content_length) > max_size
        ):
            msg = f"Response size {content_length} exceeds limit {max_size}"
            raise ResponseSizeExceededError(msg)

        buffer = BytesIO()
        total_read = 0
        for chunk in response.iter_bytes(chunk_size=DEFAULT_CHUNK_SIZE):
            total_read += len(chunk)
            if total_read > max_size:
                msg = (
                    f"Response size exceeded limit of {max_size} bytes "
                    f"(read {total_read} bytes)"
                )
                raise ResponseSizeExceededError(msg)
            buffer.write(chunk)

        return buffer.getvalue()
