"""Blog post source.

The blog blocks automated scraping, so posts come from a manually curated
list in the configuration. The list is treated exactly like a live feed:
new posts are found by identity, never by content.
"""

import logging

from pydantic import ValidationError

from starwatch.config.settings import BlogTrackConfig
from starwatch.core.exceptions import SourceFetchError
from starwatch.core.models import BlogPost

from .base import BaseSource

logger = logging.getLogger(__name__)


class CuratedBlogSource(BaseSource[BlogPost]):
    """Serve blog posts from the curated configuration list."""

    def __init__(self, config: BlogTrackConfig):
        self.config = config

    @property
    def name(self) -> str:
        return "blog"

    def fetch(self) -> list[BlogPost]:
        posts: list[BlogPost] = []
        for entry in self.config.posts:
            if not entry.id:
                logger.warning("Skipping curated post without id: %r", entry.title or entry.url)
                continue
            try:
                posts.append(BlogPost.model_validate(entry.model_dump()))
            except ValidationError as exc:
                raise SourceFetchError(self.name, f"invalid curated post '{entry.id}': {exc}") from exc

        logger.info("Loaded %d curated posts for %s", len(posts), self.config.url)
        return posts


__all__ = ["CuratedBlogSource"]
