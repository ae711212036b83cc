"""Upstream data sources."""

from .base import BaseSource
from .blog import CuratedBlogSource
from .github import GitHubStarsSource

__all__ = [
    "BaseSource",
    "GitHubStarsSource",
    "CuratedBlogSource",
]
