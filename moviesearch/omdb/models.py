"""OMDb search payload models."""

from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    """One search result. Immutable; filtered by ``title`` only."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(alias="Title")
    poster_url: str = Field(default="", alias="Poster")
    year: str = Field(default="", alias="Year")
    imdb_id: str = Field(default="", alias="imdbID")
    kind: str = Field(default="", alias="Type")


class MoviesPage(BaseModel):
    """Decoded body of one search page."""

    model_config = ConfigDict(populate_by_name=True)

    results: list[Movie] = Field(default_factory=list, alias="Search")
    total_results: int = Field(default=0, alias="totalResults")
    response: bool = Field(default=True, alias="Response")
    error: str | None = Field(default=None, alias="Error")
