"""Reactive filter over the result collection."""

from __future__ import annotations

from collections.abc import Sequence

from moviesearch.omdb.models import Movie
from moviesearch.reactive import Observable, combine_latest, map_values

ViewState = tuple[Movie, ...]


def filter_movies(items: Sequence[Movie], text: str | None) -> ViewState:
    """
    Keep the movies whose title contains ``text``, ignoring case.

    ``None`` and ``""`` both mean no filter. Whitespace is significant.
    Matches keep their original relative order.
    """
    if not text:
        return tuple(items)
    needle = text.lower()
    return tuple(item for item in items if needle in item.title.lower())


class SearchPipeline:
    """Combines the latest collection and filter text into the view state."""

    def __init__(
        self,
        collection: Observable[Sequence[Movie]],
        filter_text: Observable[str | None],
    ):
        self.collection = collection
        self.filter_text = filter_text
        self.view_state: Observable[ViewState] = map_values(
            combine_latest(collection, filter_text),
            lambda latest: filter_movies(*latest),
        )
