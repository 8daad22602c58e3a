"""Result store: bulk-fetches every result page and publishes the merge."""

from __future__ import annotations

import asyncio
from itertools import chain

from loguru import logger

from moviesearch.omdb.client import OmdbClient
from moviesearch.omdb.errors import MovieSearchError, PageFetchError
from moviesearch.omdb.models import Movie
from moviesearch.reactive import BehaviorSubject, Observable, PublishSubject

ResultCollection = tuple[Movie, ...]


class ResultStore:
    """
    Owns the authoritative result collection for one search screen.

    ``trigger_fetch`` requests every page concurrently and publishes the
    successful pages as one replacement collection once all of them have
    finished. Failed pages are logged, reported on ``failures`` and left out
    of the merge.
    """

    def __init__(self, client: OmdbClient, *, page_count: int | None = None):
        self.client = client
        self.page_count = page_count if page_count is not None else client.page_count
        if self.page_count < 1:
            raise ValueError("page_count must be >= 1")
        self._collection: BehaviorSubject[ResultCollection] = BehaviorSubject(())
        self._failures: PublishSubject[PageFetchError] = PublishSubject()
        self._task: asyncio.Task[ResultCollection] | None = None
        self._closed = False

    @property
    def collection(self) -> Observable[ResultCollection]:
        """Replay-latest view of the current collection; starts empty."""
        return self._collection

    @property
    def failures(self) -> Observable[PageFetchError]:
        """Page failures as they happen. Not replayed."""
        return self._failures

    @property
    def movies(self) -> ResultCollection:
        return self._collection.value

    @property
    def closed(self) -> bool:
        return self._closed

    async def trigger_fetch(self) -> ResultCollection:
        """
        Fetch all pages once and publish the merged collection.

        Concurrent callers share the same in-flight fetch; callers after it
        has finished get the current collection without a new request.
        Raises ``asyncio.CancelledError`` if the store is closed mid-fetch.
        """
        if self._closed:
            raise MovieSearchError("result store is closed")
        if self._task is None:
            self._task = asyncio.create_task(self._fetch_all())
        return await asyncio.shield(self._task)

    async def close(self) -> None:
        """Cancel in-flight page requests and discard their partial results."""
        if self._closed:
            return
        self._closed = True
        task = self._task
        if task and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
            logger.debug("Result fetch cancelled on close")

    async def _fetch_all(self) -> ResultCollection:
        self.client.require_api_key()
        pages = range(1, self.page_count + 1)
        logger.info("Fetching {} pages for '{}'", self.page_count, self.client.search_term)

        partials = await asyncio.gather(*(self._fetch_page(page) for page in pages))

        succeeded = [items for items in partials if items is not None]
        failed = len(partials) - len(succeeded)
        if not succeeded:
            logger.error("All {} pages failed; keeping the current collection", len(partials))
            return self._collection.value
        if self._closed:
            return self._collection.value

        merged: ResultCollection = tuple(chain.from_iterable(succeeded))
        logger.info(
            "Fetched {} results from {} pages ({} failed)",
            len(merged),
            len(succeeded),
            failed,
        )
        self._collection.emit(merged)
        return merged

    async def _fetch_page(self, page: int) -> list[Movie] | None:
        try:
            decoded = await self.client.fetch_page(page)
        except PageFetchError as e:
            logger.warning("Dropping result page {}: {}", page, e.reason)
            self._failures.emit(e)
            return None
        return decoded.results
