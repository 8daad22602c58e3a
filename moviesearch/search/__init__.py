"""Search screen core: result store, filter pipeline and screen wiring."""

from moviesearch.search.pipeline import SearchPipeline, ViewState, filter_movies
from moviesearch.search.screen import RenderCallback, SearchScreen, results_header
from moviesearch.search.store import ResultCollection, ResultStore

__all__ = [
    "RenderCallback",
    "ResultCollection",
    "ResultStore",
    "SearchPipeline",
    "SearchScreen",
    "ViewState",
    "filter_movies",
    "results_header",
]
