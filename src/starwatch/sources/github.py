"""GitHub starred-repositories client.

Uses the public ``/users/{user}/starred`` endpoint with page-number
pagination. The ``Link`` response header signals whether another page
exists.

API docs: https://docs.github.com/en/rest/activity/starring
"""

import logging

import requests
from pydantic import ValidationError

from starwatch.config.settings import GitHubConfig
from starwatch.core.constants import GITHUB_ACCEPT_HEADER
from starwatch.core.exceptions import SourceFetchError
from starwatch.core.models import Repository

from .base import BaseSource

logger = logging.getLogger(__name__)


def _has_next_page(link_header: str | None) -> bool:
    """Check a GitHub ``Link`` header for a ``rel="next"`` entry."""
    if not link_header:
        return False
    return 'rel="next"' in link_header


class GitHubStarsSource(BaseSource[Repository]):
    """Fetch every repository a user has starred."""

    def __init__(self, config: GitHubConfig, session: requests.Session | None = None):
        self.config = config
        self.session = session or requests.Session()

        headers = {
            "Accept": GITHUB_ACCEPT_HEADER,
            "User-Agent": config.user_agent,
        }
        # Unauthenticated access works, with a lower rate limit
        if config.token:
            headers["Authorization"] = f"token {config.token}"
        self.session.headers.update(headers)

    @property
    def name(self) -> str:
        return "github-stars"

    @property
    def url(self) -> str:
        return f"{self.config.api_base.rstrip('/')}/users/{self.config.user}/starred"

    def fetch(self) -> list[Repository]:
        """Fetch all starred repositories across every page.

        Returns:
            Repositories in the order GitHub returns them (most recent star first).

        Raises:
            SourceFetchError: On any transport error or non-200 response.
                Partial snapshots are never returned.
        """
        repos: list[Repository] = []
        page = 1

        while True:
            logger.debug("Fetching starred page %d for %s", page, self.config.user)
            try:
                resp = self.session.get(
                    self.url,
                    params={"page": page, "per_page": self.config.page_size},
                    timeout=self.config.timeout,
                )
            except requests.exceptions.RequestException as exc:
                raise SourceFetchError(self.name, f"request for page {page} failed: {exc}") from exc

            if resp.status_code != 200:
                raise SourceFetchError(
                    self.name,
                    f"GitHub API error on page {page}: {resp.status_code} {resp.reason}",
                )

            try:
                payload = resp.json()
            except ValueError as exc:
                raise SourceFetchError(self.name, f"invalid JSON on page {page}") from exc

            if not isinstance(payload, list):
                raise SourceFetchError(self.name, f"expected a JSON array on page {page}")
            if not payload:
                break

            try:
                repos.extend(Repository.model_validate(raw) for raw in payload)
            except ValidationError as exc:
                raise SourceFetchError(self.name, f"malformed repository on page {page}: {exc}") from exc

            if not _has_next_page(resp.headers.get("Link")):
                break
            page += 1

        logger.info("Fetched %d starred repositories for %s", len(repos), self.config.user)
        return repos


__all__ = ["GitHubStarsSource"]
