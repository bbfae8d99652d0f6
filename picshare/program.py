"""Application runtime: one store, one fetch, one serialized event stream.

All state changes happen on the asyncio event loop thread, one event at a
time. The feed fetch is the only operation that suspends; it runs in a
worker thread and its result re-enters the same queue as a ``FeedLoaded``
event, so it never races with user interactions.
"""

import asyncio
from collections.abc import Callable

import structlog

from picshare.constants import COMPONENT_PROGRAM
from picshare.feed.models import FeedErr
from picshare.fetch.client import FeedFetcher
from picshare.state.events import Event, FeedLoaded
from picshare.state.models import ApplicationState
from picshare.state.store import StateStore


logger = structlog.get_logger()

RenderCallback = Callable[[ApplicationState], None]


class ProgramStateError(Exception):
    """Raised when the program is used outside its lifecycle."""


class _Shutdown:
    """Queue marker put by ``close`` to end ``run``."""


_SHUTDOWN = _Shutdown()


class Program:
    """Wires the fetcher, the store, and the view together.

    The fetch is launched exactly once, by the first ``start`` call.
    Events are queued by ``dispatch`` and applied in order, either
    continuously by ``run`` or in batches by ``process_pending``; the render
    callback runs after every change.
    """

    def __init__(
        self,
        fetcher: FeedFetcher,
        store: StateStore | None = None,
        on_render: RenderCallback | None = None,
    ) -> None:
        """Initialize the program.

        Args:
            fetcher: Fetcher used for the single feed load.
            store: State store. Defaults to a fresh, loading store.
            on_render: Called with each new state (and once on start).
        """
        self._fetcher = fetcher
        self._store = store or StateStore()
        self._on_render = on_render
        self._queue: asyncio.Queue[Event | _Shutdown] = asyncio.Queue()
        self._fetch_task: asyncio.Task[None] | None = None
        self._closed = False
        self._log = logger.bind(component=COMPONENT_PROGRAM)

        if on_render is not None:
            self._store.subscribe(on_render)

    @property
    def store(self) -> StateStore:
        """Get the state store."""
        return self._store

    @property
    def started(self) -> bool:
        """Check if the feed fetch has been launched."""
        return self._fetch_task is not None

    def current(self) -> ApplicationState:
        """Get the current state snapshot."""
        return self._store.current()

    def dispatch(self, event: Event) -> None:
        """Queue an event for the reducer.

        Args:
            event: Event to queue.

        Raises:
            ProgramStateError: If the program has been closed.
        """
        if self._closed:
            msg = f"Cannot dispatch {type(event).__name__}: program is closed"
            raise ProgramStateError(msg)
        self._queue.put_nowait(event)

    def start(self) -> None:
        """Render the initial state and launch the feed fetch.

        Must be called from a running event loop. Calling it again does
        not fetch a second time.
        """
        if self._fetch_task is not None:
            self._log.warning("program_already_started")
            return

        self._log.info("program_started", feed_url=self._fetcher.config.feed_url)
        if self._on_render is not None:
            self._on_render(self._store.current())
        self._fetch_task = asyncio.get_running_loop().create_task(self._load_feed())

    async def _load_feed(self) -> None:
        result = await asyncio.to_thread(self._fetcher.fetch)
        if isinstance(result, FeedErr):
            self._log.info("feed_load_failed", kind=result.error.kind.value)
        if not self._closed:
            self.dispatch(FeedLoaded(result))

    def process_pending(self) -> int:
        """Apply all queued events in order.

        Returns:
            Number of events applied.
        """
        applied = 0
        while True:
            try:
                event = self._queue.get_nowait()
            except asyncio.QueueEmpty:
                return applied
            if isinstance(event, _Shutdown):
                self._queue.put_nowait(event)
                return applied
            self._store.apply(event)
            applied += 1

    async def run(self) -> ApplicationState:
        """Apply events as they arrive until ``close`` is called.

        Starts the program if needed. Events dispatched later, e.g. by
        ``Renderer.on_event``, are applied without calling
        ``process_pending``.

        Returns:
            State after the last event before ``close``.
        """
        if self._fetch_task is None:
            self.start()
        while True:
            event = await self._queue.get()
            if isinstance(event, _Shutdown):
                break
            self._store.apply(event)
        self._log.info("program_stopped")
        return self._store.current()

    async def wait_for_feed(self) -> None:
        """Wait until the feed fetch has delivered its result.

        Raises:
            ProgramStateError: If the program was never started.
        """
        if self._fetch_task is None:
            msg = "Program has not been started"
            raise ProgramStateError(msg)
        await self._fetch_task

    async def run_until_loaded(self) -> ApplicationState:
        """Start, wait for the feed result, and apply every queued event.

        Returns:
            State after the feed result (and any earlier events) applied.
        """
        if self._fetch_task is None:
            self.start()
        await self.wait_for_feed()
        self.process_pending()
        return self._store.current()

    def close(self) -> None:
        """Stop accepting events and end ``run`` once the queue is drained."""
        if self._closed:
            return
        self._closed = True
        self._log.info("program_closed", pending_events=self._queue.qsize())
        self._queue.put_nowait(_SHUTDOWN)
