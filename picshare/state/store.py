"""Holder of the single application state value."""

from collections.abc import Callable

import structlog

from picshare.constants import COMPONENT_STORE
from picshare.state.events import Event, FeedLoaded
from picshare.state.models import ApplicationState
from picshare.state.reducer import reduce


logger = structlog.get_logger()

StateListener = Callable[[ApplicationState], None]


class StateStore:
    """Holds exactly one ApplicationState at a time.

    ``apply`` is the only way to change the state. Calls are expected to
    come from one sequential stream of events (see ``Program``), so no
    locking is done here.
    """

    def __init__(self, initial: ApplicationState | None = None) -> None:
        """Initialize the store.

        Args:
            initial: Starting state. Defaults to an empty, loading state.
        """
        self._state = initial if initial is not None else ApplicationState()
        self._listeners: list[StateListener] = []
        self._log = logger.bind(component=COMPONENT_STORE)

    def current(self) -> ApplicationState:
        """Get the current state snapshot."""
        return self._state

    def apply(self, event: Event) -> ApplicationState:
        """Reduce an event into the state and notify listeners on change.

        Args:
            event: Event to apply.

        Returns:
            The state after the event.
        """
        old_state = self._state
        new_state = reduce(old_state, event)
        event_name = type(event).__name__

        if new_state is old_state:
            self._log.debug(
                "event_ignored",
                event_type=event_name,
                photo_id=getattr(event, "photo_id", None),
                phase=old_state.phase.name,
            )
            return old_state

        self._state = new_state
        self._log.info(
            "state_transition",
            event_type=event_name,
            from_phase=old_state.phase.name,
            to_phase=new_state.phase.name,
            error_kind=(
                new_state.last_error.kind.value
                if isinstance(event, FeedLoaded) and new_state.last_error
                else None
            ),
        )

        for listener in list(self._listeners):
            listener(new_state)

        return new_state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called after every state change.

        Args:
            listener: Callback receiving the new state.

        Returns:
            Function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
