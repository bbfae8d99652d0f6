"""Domain models for photos and the photo feed."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, model_validator

from picshare.feed.errors import ErrorInfo


class Photo(BaseModel):
    """A single photo in the feed.

    Attributes:
        id: Stable identifier assigned by the feed source.
        image_url: Location of the image.
        caption: Caption shown under the image.
        liked: Whether the viewer liked the photo.
        comments: Submitted comments, oldest first.
        draft_comment: Comment text being composed. Never read from or
            sent to the feed source.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int
    image_url: str
    caption: str
    liked: bool = False
    comments: tuple[str, ...] = ()
    draft_comment: str = ""


def find_duplicate_ids(photos: Iterable[Photo]) -> list[int]:
    """Find photo ids that appear more than once.

    Args:
        photos: Photos to check.

    Returns:
        Sorted list of duplicated ids (empty when all ids are unique).
    """
    counts = Counter(photo.id for photo in photos)
    return sorted(photo_id for photo_id, count in counts.items() if count > 1)


class Feed(BaseModel):
    """Ordered collection of photos in source order.

    No two photos share an id; constructing a feed that violates this
    raises a validation error.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    photos: tuple[Photo, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "Feed":
        """Reject feeds with repeated photo ids."""
        duplicates = find_duplicate_ids(self.photos)
        if duplicates:
            msg = f"Duplicate photo ids in feed: {duplicates}"
            raise ValueError(msg)
        return self

    def __len__(self) -> int:
        return len(self.photos)

    def ids(self) -> list[int]:
        """Get photo ids in feed order."""
        return [photo.id for photo in self.photos]

    def get(self, photo_id: int) -> Photo | None:
        """Look up a photo by id.

        Args:
            photo_id: Id to look up.

        Returns:
            The matching photo, or None if the id is not in the feed.
        """
        for photo in self.photos:
            if photo.id == photo_id:
                return photo
        return None


@dataclass(frozen=True)
class FeedOk:
    """Successful feed load."""

    feed: Feed


@dataclass(frozen=True)
class FeedErr:
    """Failed feed load."""

    error: ErrorInfo


FeedResult = FeedOk | FeedErr
