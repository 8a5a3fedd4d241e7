"""Observable search state driven by one fetch per user action."""

from __future__ import annotations

import asyncio
from typing import Callable

from recipe_finder.domain.models import Item, SessionState
from recipe_finder.logging import logger
from recipe_finder.services.exceptions import FetchFailure
from recipe_finder.services.meal_search import MealSearchClient

DEFAULT_ERROR_MESSAGE = "An error occurred"
CANCELLED_MESSAGE = "Search was cancelled"

Subscriber = Callable[[SessionState], None]


class SearchSession:
    """Owns the screen state: results, loading flag and error message.

    Only the session writes state. Each transition replaces the whole
    :class:`SessionState` snapshot and notifies subscribers, so readers never
    observe a half-updated state.

    ``search`` must be called from the thread running the event loop. It
    resets state synchronously and leaves the network call to a task.
    Overlapping searches are not cancelled; the last one to finish wins unless
    ``ignore_stale_results`` is set, in which case only the newest call may
    settle the state.
    """

    def __init__(self, client: MealSearchClient, *, ignore_stale_results: bool = False) -> None:
        self._client = client
        self._ignore_stale_results = ignore_stale_results
        self._state = SessionState()
        self._subscribers: list[Subscriber] = []
        self._pending: set[asyncio.Task[None]] = set()
        self._sequence = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def results(self) -> tuple[Item, ...] | None:
        return self._state.results

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error_message(self) -> str | None:
        return self._state.error_message

    @property
    def in_flight(self) -> int:
        return len(self._pending)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for every state change; returns an unsubscribe function."""

        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def search(self, query: str) -> None:
        loop = asyncio.get_running_loop()
        self._sequence += 1
        sequence = self._sequence
        self._set_state(SessionState(results=None, loading=True, error_message=None))
        logger.info("search_started", query=query, sequence=sequence)

        task = loop.create_task(self._fetch(query, sequence))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def wait_idle(self) -> None:
        """Wait until every fetch started so far has settled."""

        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def aclose(self) -> None:
        await self.wait_idle()
        self._subscribers.clear()

    async def _fetch(self, query: str, sequence: int) -> None:
        results: tuple[Item, ...] | None = None
        error_message: str | None = None
        try:
            items = await self._client.find_items(query)
            results = tuple(items)
        except asyncio.CancelledError:
            error_message = CANCELLED_MESSAGE
            logger.info("search_cancelled", query=query, sequence=sequence)
            raise
        except FetchFailure as exc:
            error_message = str(exc) or DEFAULT_ERROR_MESSAGE
            logger.warning("search_failed", query=query, sequence=sequence, error=error_message)
        except Exception as exc:
            error_message = str(exc) or DEFAULT_ERROR_MESSAGE
            logger.exception("search_crashed", query=query, sequence=sequence)
        finally:
            self._settle(sequence, results, error_message)

    def _settle(
        self,
        sequence: int,
        results: tuple[Item, ...] | None,
        error_message: str | None,
    ) -> None:
        if self._ignore_stale_results and sequence != self._sequence:
            logger.info("stale_result_ignored", sequence=sequence, latest=self._sequence)
            return
        if error_message is not None:
            results = None
        self._set_state(SessionState(results=results, loading=False, error_message=error_message))
        logger.info(
            "search_settled",
            sequence=sequence,
            count=None if results is None else len(results),
            failed=error_message is not None,
        )

    def _set_state(self, state: SessionState) -> None:
        self._state = state
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception:
                logger.exception("subscriber_failed", callback=getattr(callback, "__qualname__", repr(callback)))


__all__ = ["SearchSession", "Subscriber", "CANCELLED_MESSAGE", "DEFAULT_ERROR_MESSAGE"]
