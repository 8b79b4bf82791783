"""Home page component: loads the greeting document once per mount."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

from greeting_app.domain.entities import GreetingDocument
from greeting_app.infrastructure.home_api_client import (
    GENERIC_FAILURE_MESSAGE,
    HomeApiClient,
    HomeApiError,
)
from greeting_app.interfaces.web.states import (
    DisplayItem,
    Failed,
    HomePageState,
    Idle,
    Loaded,
    Loading,
)

logger = logging.getLogger(__name__)

LOADING_TEXT = "Loading..."

StateListener = Callable[[HomePageState], None]


class HomePage:
    """Fetch the home document on mount and expose the resulting display state.

    The page goes ``Idle -> Loading`` on :meth:`mount` and then settles on
    either ``Loaded`` or ``Failed``. Unmounting (or mounting again) cancels the
    in-flight fetch; a cancelled fetch never changes the state.
    """

    def __init__(self, client: HomeApiClient) -> None:
        self._client = client
        self._state: HomePageState = Idle()
        self._task: asyncio.Task[None] | None = None
        self._generation = 0
        self._mounted = False
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> HomePageState:
        return self._state

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` after every state transition.

        Returns a function that removes the listener.
        """

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def mount(self) -> asyncio.Task[None]:
        """Start loading the document. Must run inside an event loop."""

        loop = asyncio.get_running_loop()
        self._cancel_in_flight()
        self._generation += 1
        self._mounted = True
        self._set_state(Loading())
        self._task = loop.create_task(self._load(self._generation))
        return self._task

    def unmount(self) -> None:
        self._mounted = False
        self._generation += 1
        self._cancel_in_flight()

    @asynccontextmanager
    async def mounted(self) -> AsyncIterator[asyncio.Task[None]]:
        """Keep the page mounted for the duration of the ``async with`` block."""

        task = self.mount()
        try:
            yield task
        finally:
            self.unmount()

    def render(self) -> tuple[DisplayItem, ...]:
        state = self._state
        if isinstance(state, Loading):
            return (DisplayItem("loading", LOADING_TEXT),)
        if isinstance(state, Failed):
            return (DisplayItem("error", f"Error: {state.error_message}"),)
        if isinstance(state, Loaded):
            # People are never reordered, so the position is a stable key.
            return (
                DisplayItem("message", state.message),
                *(DisplayItem(index, person) for index, person in enumerate(state.people)),
            )
        return ()

    async def _load(self, generation: int) -> None:
        try:
            document = await self._client.fetch_home()
        except asyncio.CancelledError:
            logger.debug("Home page fetch cancelled")
            raise
        except HomeApiError as exc:
            self._settle(generation, Failed(str(exc)))
        except Exception as exc:
            logger.exception("Unexpected error while loading the home page")
            self._settle(generation, Failed(_describe(exc)))
        else:
            self._settle(generation, _loaded(document))

    def _settle(self, generation: int, state: HomePageState) -> None:
        if not self._mounted or generation != self._generation:
            logger.debug("Discarding result of a superseded home page fetch")
            return
        if not isinstance(self._state, Loading):
            return
        self._set_state(state)

    def _set_state(self, state: HomePageState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Home page listener failed on %s", type(state).__name__)

    def _cancel_in_flight(self) -> None:
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()


def _loaded(document: GreetingDocument) -> Loaded:
    return Loaded(message=document.message, people=document.people)


def _describe(exc: Exception) -> str:
    return str(exc).strip() or GENERIC_FAILURE_MESSAGE


__all__ = ["HomePage", "LOADING_TEXT", "StateListener"]
