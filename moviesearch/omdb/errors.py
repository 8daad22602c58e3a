"""Errors raised while fetching search results."""


class MovieSearchError(Exception):
    """Raised when the search screen cannot be set up or driven."""


class PageFetchError(MovieSearchError):
    """A single result page could not be fetched."""

    def __init__(self, page: int, reason: str):
        super().__init__(f"page {page}: {reason}")
        self.page = page
        self.reason = reason


class FetchTransportError(PageFetchError):
    """Network or HTTP status failure for one page."""


class FetchDecodeError(PageFetchError):
    """Malformed or unexpected response body for one page."""
