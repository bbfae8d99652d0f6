"""Decoder for the photo feed wire format.

The feed endpoint returns a JSON array of objects shaped like::

    {"id": 1, "url": "https://...", "caption": "...", "liked": false,
     "comments": ["..."]}

Decoding is all-or-nothing: any missing field or type mismatch anywhere in
the payload fails the whole decode and no partial photo or feed is returned.
Fields are validated strictly, so ``true`` is not an integer and ``1`` is not
a boolean. Unknown fields are ignored, including any ``draftComment`` key;
draft comments always start empty.
"""

import json

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from picshare.feed.errors import ErrorInfo, ErrorKind, PayloadDecodeError
from picshare.feed.models import Feed, Photo, find_duplicate_ids


class PhotoPayload(BaseModel):
    """Wire representation of a photo."""

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    id: int
    url: str
    caption: str
    liked: bool
    comments: list[str]

    def to_photo(self) -> Photo:
        """Convert to a domain photo with an empty draft comment."""
        return Photo(
            id=self.id,
            image_url=self.url,
            caption=self.caption,
            liked=self.liked,
            comments=tuple(self.comments),
        )


_FEED_ADAPTER: TypeAdapter[list[PhotoPayload]] = TypeAdapter(
    list[PhotoPayload], config=ConfigDict(strict=True)
)


def _format_location(loc: tuple[int | str, ...], root: str) -> str:
    """Render a pydantic error location as a readable path.

    Args:
        loc: Location tuple from a pydantic error.
        root: Name of the top-level value.

    Returns:
        Path such as ``feed[2].comments[0]``.
    """
    path = root
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}"
    return path


def _to_decode_error(exc: ValidationError, root: str) -> PayloadDecodeError:
    """Convert a pydantic validation error into a decode error.

    Only the first problem is reported; the payload is rejected either way.

    Args:
        exc: Validation error raised for the payload.
        root: Name of the top-level value.

    Returns:
        PayloadDecodeError of kind MALFORMED_PAYLOAD.
    """
    first = exc.errors()[0]
    field = _format_location(tuple(first["loc"]), root)
    problems = exc.error_count()
    message = f"{field}: {first['msg']}"
    if problems > 1:
        message += f" (and {problems - 1} more)"
    return PayloadDecodeError(ErrorInfo.malformed(message), field=field)


def decode_photo(value: object) -> Photo:
    """Decode a single photo object.

    Args:
        value: Untyped JSON value.

    Returns:
        Decoded photo with an empty draft comment.

    Raises:
        PayloadDecodeError: If any required field is missing or mistyped.
    """
    try:
        payload = PhotoPayload.model_validate(value)
    except ValidationError as e:
        raise _to_decode_error(e, "photo") from e
    return payload.to_photo()


def decode_feed(value: object) -> Feed:
    """Decode a feed (JSON array of photo objects).

    Args:
        value: Untyped JSON value.

    Returns:
        Decoded feed in payload order.

    Raises:
        PayloadDecodeError: MALFORMED_PAYLOAD if the value is not an array
            of valid photos, DUPLICATE_ID if two photos share an id.
    """
    try:
        payloads = _FEED_ADAPTER.validate_python(value)
    except ValidationError as e:
        raise _to_decode_error(e, "feed") from e

    photos = tuple(payload.to_photo() for payload in payloads)

    duplicates = find_duplicate_ids(photos)
    if duplicates:
        error = ErrorInfo(
            kind=ErrorKind.DUPLICATE_ID,
            message=f"Duplicate photo ids in feed: {duplicates}",
        )
        raise PayloadDecodeError(error, field="feed")

    return Feed(photos=photos)


def decode_feed_bytes(body: bytes) -> Feed:
    """Parse a JSON response body and decode it as a feed.

    Args:
        body: Raw response body.

    Returns:
        Decoded feed.

    Raises:
        PayloadDecodeError: If the body is not valid JSON or not a valid feed.
    """
    try:
        value = json.loads(body)
    # JSONDecodeError and UnicodeDecodeError are ValueErrors too; oversized
    # integer literals raise a plain ValueError and deep nesting a RecursionError.
    except (ValueError, RecursionError) as e:
        raise PayloadDecodeError(
            ErrorInfo.malformed(f"Response body is not valid JSON: {e}")
        ) from e
    return decode_feed(value)
