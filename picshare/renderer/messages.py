"""User-facing messages for the feed view."""

from typing import Final

from picshare.feed.errors import ErrorKind


LOADING_MESSAGE: Final[str] = "Loading Feed..."

PROCESS_ERROR_MESSAGE: Final[str] = (
    "Sorry, we couldn't process your feed at this time. We're working on it!"
)
LOAD_ERROR_MESSAGE: Final[str] = (
    "Sorry, we couldn't load your feed at this time. Please try again later."
)

ERROR_MESSAGES: Final[dict[ErrorKind, str]] = {
    ErrorKind.MALFORMED_PAYLOAD: PROCESS_ERROR_MESSAGE,
    ErrorKind.DUPLICATE_ID: PROCESS_ERROR_MESSAGE,
    ErrorKind.TRANSPORT_FAILURE: LOAD_ERROR_MESSAGE,
}


def error_message_for(kind: ErrorKind) -> str:
    """Get the message shown for an error kind.

    Args:
        kind: Error classification.

    Returns:
        Static user-facing message.
    """
    return ERROR_MESSAGES.get(kind, LOAD_ERROR_MESSAGE)
