"""Error values for feed loading.

Errors that reach the application state are plain values (``ErrorInfo``).
``PayloadDecodeError`` only crosses the decoder/fetcher boundary and is
converted into a value before it gets anywhere near the reducer.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Classification of feed loading errors.

    - MALFORMED_PAYLOAD: Body is not JSON or does not match the photo schema
    - TRANSPORT_FAILURE: Network error, timeout, or non-2xx HTTP status
    - DUPLICATE_ID: Two photos in the payload share the same id
    """

    MALFORMED_PAYLOAD = "MALFORMED_PAYLOAD"
    TRANSPORT_FAILURE = "TRANSPORT_FAILURE"
    DUPLICATE_ID = "DUPLICATE_ID"


class ErrorInfo(BaseModel):
    """Tagged error used to select a user-facing message.

    Carries no retry state: a failed load is terminal for that attempt.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ErrorKind = Field(description="Classification of the error")
    message: Annotated[str, Field(min_length=1, description="Diagnostic message")]
    status_code: int | None = Field(
        default=None, description="HTTP status code if available"
    )

    @classmethod
    def malformed(cls, message: str) -> "ErrorInfo":
        """Build a MALFORMED_PAYLOAD error."""
        return cls(kind=ErrorKind.MALFORMED_PAYLOAD, message=message)

    @classmethod
    def transport(cls, message: str, status_code: int | None = None) -> "ErrorInfo":
        """Build a TRANSPORT_FAILURE error."""
        return cls(
            kind=ErrorKind.TRANSPORT_FAILURE,
            message=message,
            status_code=status_code,
        )


class PayloadDecodeError(Exception):
    """Raised by the decoder when a payload cannot be turned into a feed.

    Decoding is all-or-nothing, so this never carries a partial result.
    """

    def __init__(self, error: ErrorInfo, field: str | None = None) -> None:
        """Initialize the decode error.

        Args:
            error: Error value describing the failure.
            field: Dotted path of the offending field, if known.
        """
        super().__init__(error.message)
        self.error = error
        self.field = field

    @property
    def kind(self) -> ErrorKind:
        """Get the error classification."""
        return self.error.kind

    def to_dict(self) -> dict[str, str | int | None]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "kind": self.error.kind.value,
            "message": self.error.message,
            "field": self.field,
        }
