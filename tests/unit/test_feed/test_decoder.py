"""Unit tests for the feed decoder."""

import json

import pytest

from picshare.feed.decoder import decode_feed, decode_feed_bytes, decode_photo
from picshare.feed.errors import ErrorKind, PayloadDecodeError
from picshare.feed.models import Feed, Photo


def make_payload(**overrides: object) -> dict[str, object]:
    """Create a valid photo payload with optional overrides."""
    payload: dict[str, object] = {
        "id": 1,
        "url": "https://programming-elm.com/1.jpg",
        "caption": "Surfing",
        "liked": False,
        "comments": ["Cowabunga, dude!"],
    }
    payload.update(overrides)
    return payload


class TestDecodePhoto:
    """Tests for decode_photo."""

    def test_decodes_valid_payload(self) -> None:
        """All fields are mapped onto the photo."""
        photo = decode_photo(make_payload())

        assert photo == Photo(
            id=1,
            image_url="https://programming-elm.com/1.jpg",
            caption="Surfing",
            liked=False,
            comments=("Cowabunga, dude!",),
            draft_comment="",
        )

    def test_draft_comment_always_empty(self) -> None:
        """A draftComment key in the payload is never read."""
        photo = decode_photo(make_payload(draftComment="sneaky"))

        assert photo.draft_comment == ""

    def test_extra_fields_ignored(self) -> None:
        """Unknown fields do not fail the decode."""
        photo = decode_photo(make_payload(author="elm"))

        assert photo.id == 1

    def test_empty_comments(self) -> None:
        """An empty comment list is valid."""
        photo = decode_photo(make_payload(comments=[]))

        assert photo.comments == ()

    @pytest.mark.parametrize("field", ["id", "url", "caption", "liked", "comments"])
    def test_missing_field_is_malformed(self, field: str) -> None:
        """Every required field must be present."""
        payload = make_payload()
        del payload[field]

        with pytest.raises(PayloadDecodeError) as exc_info:
            decode_photo(payload)

        assert exc_info.value.kind == ErrorKind.MALFORMED_PAYLOAD
        assert exc_info.value.field == f"photo.{field}"

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("id", "1"),
            ("id", True),
            ("id", 1.5),
            ("url", 42),
            ("caption", None),
            ("liked", "false"),
            ("liked", 0),
            ("comments", "nice"),
            ("comments", [1, 2]),
        ],
    )
    def test_wrong_type_is_malformed(self, field: str, value: object) -> None:
        """Type mismatches are rejected."""
        with pytest.raises(PayloadDecodeError) as exc_info:
            decode_photo(make_payload(**{field: value}))

        assert exc_info.value.kind == ErrorKind.MALFORMED_PAYLOAD

    def test_non_object_is_malformed(self) -> None:
        """A bare list is not a photo."""
        with pytest.raises(PayloadDecodeError) as exc_info:
            decode_photo([1, 2, 3])

        assert exc_info.value.kind == ErrorKind.MALFORMED_PAYLOAD


class TestDecodeFeed:
    """Tests for decode_feed."""

    def test_decodes_in_payload_order(self) -> None:
        """Photos keep the order of the payload."""
        feed = decode_feed(
            [make_payload(id=3), make_payload(id=1), make_payload(id=2)]
        )

        assert isinstance(feed, Feed)
        assert feed.ids() == [3, 1, 2]
        assert all(photo.draft_comment == "" for photo in feed.photos)

    def test_empty_array(self) -> None:
        """An empty array is an empty feed."""
        assert len(decode_feed([])) == 0

    def test_object_instead_of_array(self) -> None:
        """The top-level value must be an array."""
        with pytest.raises(PayloadDecodeError) as exc_info:
            decode_feed(make_payload())

        assert exc_info.value.kind == ErrorKind.MALFORMED_PAYLOAD

    def test_one_bad_entry_fails_everything(self) -> None:
        """No partial feed is produced when one entry is malformed."""
        bad = make_payload(id=2)
        del bad["caption"]

        with pytest.raises(PayloadDecodeError) as exc_info:
            decode_feed([make_payload(id=1), bad, make_payload(id=3)])

        assert exc_info.value.kind == ErrorKind.MALFORMED_PAYLOAD
        assert exc_info.value.field == "feed[1].caption"
        assert "feed[1].caption" in exc_info.value.error.message

    def test_duplicate_ids_rejected(self) -> None:
        """Two entries sharing an id fail with DUPLICATE_ID."""
        with pytest.raises(PayloadDecodeError) as exc_info:
            decode_feed([make_payload(id=1), make_payload(id=2), make_payload(id=1)])

        assert exc_info.value.kind == ErrorKind.DUPLICATE_ID
        assert "[1]" in exc_info.value.error.message


class TestDecodeFeedBytes:
    """Tests for decode_feed_bytes."""

    def test_decodes_json_body(self) -> None:
        """A JSON array body decodes into a feed."""
        body = json.dumps([make_payload()]).encode()

        feed = decode_feed_bytes(body)

        assert feed.ids() == [1]

    def test_invalid_json(self) -> None:
        """Invalid JSON is a malformed payload."""
        with pytest.raises(PayloadDecodeError) as exc_info:
            decode_feed_bytes(b"<html>oops</html>")

        assert exc_info.value.kind == ErrorKind.MALFORMED_PAYLOAD
        assert exc_info.value.field is None

    def test_to_dict(self) -> None:
        """Decode errors serialize for logging."""
        with pytest.raises(PayloadDecodeError) as exc_info:
            decode_feed_bytes(b'{"id": 1}')

        data = exc_info.value.to_dict()
        assert data["kind"] == "MALFORMED_PAYLOAD"
        assert data["field"] == "feed"

    def test_integer_literal_too_long(self) -> None:
        """An id beyond the int conversion limit is a malformed payload."""
        body = b'[{"id": ' + b"1" * 5000 + b', "url": "u", "caption": "c"}]'

        with pytest.raises(PayloadDecodeError) as exc_info:
            decode_feed_bytes(body)

        assert exc_info.value.kind == ErrorKind.MALFORMED_PAYLOAD

    def test_deeply_nested_body(self) -> None:
        """Nesting deeper than the parser can follow is a malformed payload."""
        body = b"[" * 100_000 + b"]" * 100_000

        with pytest.raises(PayloadDecodeError) as exc_info:
            decode_feed_bytes(body)

        assert exc_info.value.kind == ErrorKind.MALFORMED_PAYLOAD
        assert "not valid JSON" in str(exc_info.value)
