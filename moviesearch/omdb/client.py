"""OMDb search API client."""

import os
from typing import Any

import httpx
from pydantic import ValidationError

from moviesearch.config.schema import OmdbConfig
from moviesearch.omdb.errors import FetchDecodeError, FetchTransportError, MovieSearchError
from moviesearch.omdb.models import MoviesPage


class OmdbClient:
    """Fetches single pages of OMDb search results."""

    _ENV_KEY = "OMDB_API_KEY"

    def __init__(self, config: OmdbConfig | None = None):
        self.config = config or OmdbConfig()

    @property
    def search_term(self) -> str:
        return self.config.search_term

    @property
    def page_count(self) -> int:
        return self.config.page_count

    def require_api_key(self) -> str:
        """Return the configured API key, falling back to the environment."""
        api_key = self.config.api_key or os.environ.get(self._ENV_KEY, "")
        if not api_key:
            raise MovieSearchError(
                f"omdb api key not configured (set omdb.apiKey or {self._ENV_KEY})"
            )
        return api_key

    def build_params(self, page: int) -> dict[str, Any]:
        return {
            "s": self.config.search_term,
            "apikey": self.require_api_key(),
            "page": page,
        }

    async def fetch_page(self, page: int) -> MoviesPage:
        """
        Fetch and decode one result page.

        Raises:
            FetchTransportError: the request failed or returned an error status.
            FetchDecodeError: the body is not a valid search page.
        """
        params = self.build_params(page)
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.config.base_url,
                    params=params,
                    headers={"Accept": "application/json"},
                    timeout=self.config.timeout,
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise FetchTransportError(page, str(e) or type(e).__name__) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise FetchDecodeError(page, f"invalid JSON body: {e}") from e

        return decode_page(page, payload)


def decode_page(page: int, payload: Any) -> MoviesPage:
    """Validate a raw search payload for ``page``."""
    if not isinstance(payload, dict):
        raise FetchDecodeError(page, f"expected a JSON object, got {type(payload).__name__}")
    try:
        decoded = MoviesPage.model_validate(payload)
    except ValidationError as e:
        raise FetchDecodeError(page, f"unexpected payload: {e.error_count()} validation errors") from e
    if not decoded.response:
        raise FetchDecodeError(page, decoded.error or "response flag is False")
    return decoded
