"""Search screen: the contract between the UI layer and the search core."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from loguru import logger

from moviesearch.config.schema import Config
from moviesearch.omdb.client import OmdbClient
from moviesearch.reactive import BehaviorSubject, CompositeSubscription, Subscription, observe_on
from moviesearch.search.pipeline import SearchPipeline, ViewState
from moviesearch.search.store import ResultCollection, ResultStore

RenderCallback = Callable[[ViewState], None]


def results_header(count: int) -> str:
    """Section header shown above the result list."""
    return f"{count} results found"


class SearchScreen:
    """
    Wires a result store and a search pipeline for one screen lifetime.

    The UI calls ``ready()`` once, ``set_filter_text()`` on every edit, and
    receives lists through the callbacks passed to ``subscribe()``. With a
    ``consumer_loop`` every render runs on that loop; without one, renders run
    on whichever thread produced the change.
    """

    def __init__(
        self,
        store: ResultStore,
        *,
        consumer_loop: asyncio.AbstractEventLoop | None = None,
    ):
        self.store = store
        self.consumer_loop = consumer_loop
        self._filter_text: BehaviorSubject[str | None] = BehaviorSubject(None)
        self.pipeline = SearchPipeline(store.collection, self._filter_text)
        self._subscriptions = CompositeSubscription()
        self._fetch_task: asyncio.Task[ResultCollection] | None = None

    @classmethod
    def from_config(
        cls,
        config: Config,
        *,
        consumer_loop: asyncio.AbstractEventLoop | None = None,
    ) -> "SearchScreen":
        store = ResultStore(OmdbClient(config.omdb))
        return cls(store, consumer_loop=consumer_loop)

    @property
    def filter_text(self) -> str | None:
        return self._filter_text.value

    def subscribe(self, render: RenderCallback) -> Subscription:
        """Deliver every view state to ``render`` until released or closed."""
        source = self.pipeline.view_state
        if self.consumer_loop is not None:
            source = observe_on(source, self.consumer_loop)
        return self._subscriptions.add(source.subscribe(render))

    def ready(self) -> asyncio.Task[ResultCollection]:
        """Signal that the screen is ready; starts the fetch once."""
        if self._fetch_task is None:
            logger.info("Search screen ready")
            self._fetch_task = asyncio.create_task(self.store.trigger_fetch())
            self._fetch_task.add_done_callback(self._on_fetch_done)
        return self._fetch_task

    def set_filter_text(self, text: str | None) -> None:
        """Replace the filter text. Safe to call from any thread."""
        self._filter_text.emit(text)

    async def close(self) -> None:
        """Release every subscription and cancel an unfinished fetch."""
        self._subscriptions.dispose()
        await self.store.close()
        if self._fetch_task and not self._fetch_task.done():
            self._fetch_task.cancel()
            try:
                await self._fetch_task
            except asyncio.CancelledError:
                pass
        logger.info("Search screen closed")

    def _on_fetch_done(self, task: asyncio.Task[ResultCollection]) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Result fetch failed: {}", error)
