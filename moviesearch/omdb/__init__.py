"""OMDb search API access."""

from moviesearch.omdb.client import OmdbClient, decode_page
from moviesearch.omdb.errors import (
    FetchDecodeError,
    FetchTransportError,
    MovieSearchError,
    PageFetchError,
)
from moviesearch.omdb.models import Movie, MoviesPage

__all__ = [
    "FetchDecodeError",
    "FetchTransportError",
    "Movie",
    "MovieSearchError",
    "MoviesPage",
    "OmdbClient",
    "PageFetchError",
    "decode_page",
]
