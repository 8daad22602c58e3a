"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OmdbConfig(Base):
    """OMDb search endpoint configuration."""

    api_key: str = ""  # Falls back to OMDB_API_KEY
    base_url: str = "https://www.omdbapi.com/"
    search_term: str = "marvel"
    page_count: int = Field(default=10, ge=1)
    timeout: float = Field(default=10.0, gt=0)


class LoggingConfig(Base):
    """Log sink configuration."""

    level: str = "INFO"


class Config(Base):
    """Root configuration for moviesearch."""

    omdb: OmdbConfig = Field(default_factory=OmdbConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
