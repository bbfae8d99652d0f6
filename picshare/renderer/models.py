"""View models projected from the application state."""

from pydantic import BaseModel, ConfigDict, Field

from picshare.feed.models import Photo
from picshare.renderer.messages import error_message_for
from picshare.state.models import ApplicationState, FeedPhase


class PhotoView(BaseModel):
    """Everything the template needs to show one photo.

    Attributes:
        id: Photo id, used to address events.
        image_url: Image location.
        caption: Caption text.
        liked: Whether the like toggle is on.
        comments: Comments in submission order.
        draft_comment: Current value of the comment input.
        can_submit_comment: False exactly when the trimmed draft is empty.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int
    image_url: str
    caption: str
    liked: bool
    comments: tuple[str, ...]
    draft_comment: str
    can_submit_comment: bool

    @classmethod
    def from_photo(cls, photo: Photo) -> "PhotoView":
        """Build a view for a photo."""
        return cls(
            id=photo.id,
            image_url=photo.image_url,
            caption=photo.caption,
            liked=photo.liked,
            comments=photo.comments,
            draft_comment=photo.draft_comment,
            can_submit_comment=bool(photo.draft_comment.strip()),
        )


class FeedView(BaseModel):
    """Read-only projection of the application state."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    phase: FeedPhase
    error_message: str | None = None
    photos: tuple[PhotoView, ...] = Field(default_factory=tuple)

    @property
    def loading(self) -> bool:
        """Check if the loading indicator should be shown."""
        return self.phase == FeedPhase.LOADING


def build_view(state: ApplicationState) -> FeedView:
    """Project the application state into a view.

    Args:
        state: State snapshot.

    Returns:
        FeedView for the current phase.
    """
    phase = state.phase
    if phase == FeedPhase.ERROR and state.last_error is not None:
        return FeedView(
            phase=phase,
            error_message=error_message_for(state.last_error.kind),
        )
    if phase == FeedPhase.LOADED and state.feed is not None:
        return FeedView(
            phase=phase,
            photos=tuple(PhotoView.from_photo(photo) for photo in state.feed.photos),
        )
    return FeedView(phase=FeedPhase.LOADING)
