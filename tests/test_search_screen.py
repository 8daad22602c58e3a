import asyncio

import pytest

from moviesearch.config.schema import Config, OmdbConfig
from moviesearch.omdb.client import OmdbClient
from moviesearch.omdb.models import Movie, MoviesPage
from moviesearch.search.screen import SearchScreen, results_header
from moviesearch.search.store import ResultStore

PAGES = {
    1: [Movie(title="Iron Man"), Movie(title="Thor")],
    2: [Movie(title="Iron Fist")],
}


class StubOmdbClient(OmdbClient):
    def __init__(self, gate: asyncio.Event | None = None):
        super().__init__(OmdbConfig(api_key="test-key", page_count=2))
        self.gate = gate
        self.calls = 0

    async def fetch_page(self, page: int) -> MoviesPage:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        return MoviesPage(results=PAGES[page])


def _titles(view) -> list[str]:
    return [movie.title for movie in view]


@pytest.mark.asyncio
async def test_ready_fetches_once_and_renders_merged_results() -> None:
    client = StubOmdbClient()
    screen = SearchScreen(ResultStore(client))
    renders: list[list[str]] = []
    screen.subscribe(lambda view: renders.append(_titles(view)))

    first = screen.ready()
    second = screen.ready()
    await first

    assert first is second
    assert client.calls == 2
    assert renders == [[], ["Iron Man", "Thor", "Iron Fist"]]

    await screen.close()


@pytest.mark.asyncio
async def test_filter_text_updates_render() -> None:
    screen = SearchScreen(ResultStore(StubOmdbClient()))
    renders: list[list[str]] = []
    screen.subscribe(lambda view: renders.append(_titles(view)))
    await screen.ready()

    screen.set_filter_text("iron")
    screen.set_filter_text("IRON")
    screen.set_filter_text(None)

    assert screen.filter_text is None
    assert renders[-3:] == [
        ["Iron Man", "Iron Fist"],
        ["Iron Man", "Iron Fist"],
        ["Iron Man", "Thor", "Iron Fist"],
    ]

    await screen.close()


@pytest.mark.asyncio
async def test_filter_before_results_applies_when_they_arrive() -> None:
    screen = SearchScreen(ResultStore(StubOmdbClient()))
    renders: list[list[str]] = []
    screen.subscribe(lambda view: renders.append(_titles(view)))

    screen.set_filter_text("thor")
    await screen.ready()

    assert renders == [[], [], ["Thor"]]

    await screen.close()


@pytest.mark.asyncio
async def test_consumer_loop_delivery() -> None:
    loop = asyncio.get_running_loop()
    screen = SearchScreen(ResultStore(StubOmdbClient()), consumer_loop=loop)
    renders: list[list[str]] = []
    screen.subscribe(lambda view: renders.append(_titles(view)))

    assert renders == []
    await screen.ready()
    await asyncio.sleep(0)

    assert renders == [[], ["Iron Man", "Thor", "Iron Fist"]]

    await screen.close()


@pytest.mark.asyncio
async def test_close_stops_renders_and_cancels_fetch() -> None:
    gate = asyncio.Event()
    screen = SearchScreen(ResultStore(StubOmdbClient(gate=gate)))
    renders: list[list[str]] = []
    screen.subscribe(lambda view: renders.append(_titles(view)))

    task = screen.ready()
    await asyncio.sleep(0)
    await screen.close()
    gate.set()
    screen.set_filter_text("iron")

    assert task.cancelled()
    assert renders == [[]]
    assert screen.store.closed is True


@pytest.mark.asyncio
async def test_subscription_can_be_released_early() -> None:
    screen = SearchScreen(ResultStore(StubOmdbClient()))
    renders: list[list[str]] = []
    subscription = screen.subscribe(lambda view: renders.append(_titles(view)))

    subscription.dispose()
    await screen.ready()

    assert renders == [[]]

    await screen.close()


def test_from_config_uses_omdb_settings() -> None:
    config = Config()
    config.omdb.page_count = 4

    screen = SearchScreen.from_config(config)

    assert screen.store.page_count == 4
    assert screen.store.client.config is config.omdb


def test_results_header() -> None:
    assert results_header(0) == "0 results found"
    assert results_header(12) == "12 results found"


@pytest.mark.asyncio
async def test_released_render_handles_are_not_retained() -> None:
    screen = SearchScreen(ResultStore(StubOmdbClient()))

    for _ in range(10):
        screen.subscribe(lambda view: None).dispose()
    screen.subscribe(lambda view: None)

    assert len(screen._subscriptions) == 1

    await screen.close()
    assert len(screen._subscriptions) == 0
