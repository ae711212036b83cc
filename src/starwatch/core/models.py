"""Core data models.

Upstream models (``Repository``, ``BlogPost``) are shaped like the provider
payloads and are never persisted verbatim. Tracked records
(``AnalyzedStar``, ``AnalyzedPost``) are what the dataset files hold.
"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from starwatch.utils.datetime import ensure_aware

# Naive timestamps are taken to be UTC so chronological keys always compare
UTCDateTime = Annotated[datetime, AfterValidator(ensure_aware)]


class Repository(BaseModel):
    """A starred repository as returned by the GitHub API."""

    model_config = ConfigDict(extra="ignore")

    id: int
    full_name: str
    description: str | None = None
    html_url: str
    stargazers_count: int = 0
    language: str | None = None
    topics: list[str] = Field(default_factory=list)
    pushed_at: UTCDateTime | None = None


class BlogPost(BaseModel):
    """A blog post entry."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    url: str
    published_at: UTCDateTime
    content: str | None = None
    excerpt: str | None = None


class AnalyzedStar(BaseModel):
    """Persisted star record.

    ``starred_at`` is the local time the star was first observed, not the
    real star time: the public starred endpoint does not expose it.
    """

    model_config = ConfigDict(extra="allow")

    id: int
    full_name: str
    description: str | None = None
    html_url: str
    stargazers_count: int = 0
    language: str | None = None
    topics: list[str] = Field(default_factory=list)
    starred_at: UTCDateTime
    commentary: str
    analyzed_at: UTCDateTime


class AnalyzedPost(BaseModel):
    """Persisted blog post record."""

    model_config = ConfigDict(extra="allow")

    id: str
    title: str
    url: str
    published_at: UTCDateTime
    content: str | None = None
    excerpt: str | None = None
    summary: str
    ai_analysis: str
    ai_predictions: str
    analyzed_at: UTCDateTime


class LLMResponse(BaseModel):
    """Text completion returned by an LLM provider."""

    content: str
    model: str
    tokens_used: int = 0


__all__ = [
    "Repository",
    "BlogPost",
    "AnalyzedStar",
    "AnalyzedPost",
    "LLMResponse",
]
