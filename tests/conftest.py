"""Shared test doubles and factories."""

from datetime import datetime, timedelta, timezone

import pytest

from starwatch.config.settings import BlogTrackConfig, StarsTrackConfig, SubjectConfig
from starwatch.core.models import BlogPost, LLMResponse, Repository
from starwatch.llm.base import BaseLLMProvider


class FakeLLM(BaseLLMProvider):
    """Scripted LLM provider that records every prompt it receives.

    ``replies`` items are returned in order; an exception instance is raised
    instead of returned.
    """

    def __init__(self, replies=None, default="Witty commentary."):
        self.replies = list(replies or [])
        self.default = default
        self.calls: list[dict] = []

    @property
    def name(self) -> str:
        return "fake"

    def complete(self, prompt, *, model=None, max_tokens=None):
        self.calls.append({"prompt": prompt, "model": model, "max_tokens": max_tokens})
        reply = self.replies.pop(0) if self.replies else self.default
        if isinstance(reply, Exception):
            raise reply
        return LLMResponse(content=reply, model=model or "fake-model", tokens_used=10)


class FakeClock:
    """Deterministic clock advancing one minute per call."""

    def __init__(self, start=datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        current = self.now
        self.now = self.now + timedelta(minutes=1)
        return current


def make_repo(repo_id: int, name: str | None = None, **overrides) -> Repository:
    full_name = name or f"octo/repo-{repo_id}"
    data = {
        "id": repo_id,
        "full_name": full_name,
        "description": f"Description of {full_name}",
        "html_url": f"https://github.com/{full_name}",
        "stargazers_count": 42,
        "language": "Python",
        "topics": ["ai", "tools"],
    }
    data.update(overrides)
    return Repository(**data)


def make_post(post_id: str, published_at: str = "2025-01-01T00:00:00Z", **overrides) -> BlogPost:
    data = {
        "id": post_id,
        "title": f"Post {post_id}",
        "url": f"https://blog.example.com/{post_id}",
        "published_at": published_at,
    }
    data.update(overrides)
    return BlogPost(**data)


@pytest.fixture
def subject() -> SubjectConfig:
    return SubjectConfig(name="Ada Lovelace", short_name="Ada", organization="Analytical Engines", role="CEO")


@pytest.fixture
def stars_config() -> StarsTrackConfig:
    return StarsTrackConfig(delay_ms=1000, max_tokens=200)


@pytest.fixture
def blog_config() -> BlogTrackConfig:
    return BlogTrackConfig(delay_ms=2000, max_tokens=500)
