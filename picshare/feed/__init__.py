"""Photo feed domain: models, error values, and the wire decoder."""

from picshare.feed.decoder import (
    PhotoPayload,
    decode_feed,
    decode_feed_bytes,
    decode_photo,
)
from picshare.feed.errors import ErrorInfo, ErrorKind, PayloadDecodeError
from picshare.feed.models import (
    Feed,
    FeedErr,
    FeedOk,
    FeedResult,
    Photo,
    find_duplicate_ids,
)


__all__ = [
    # Models
    "Feed",
    "FeedErr",
    "FeedOk",
    "FeedResult",
    "Photo",
    "find_duplicate_ids",
    # Errors
    "ErrorInfo",
    "ErrorKind",
    "PayloadDecodeError",
    # Decoder
    "PhotoPayload",
    "decode_feed",
    "decode_feed_bytes",
    "decode_photo",
]
