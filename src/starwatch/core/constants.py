"""Shared constants."""

DEFAULT_HTTP_TIMEOUT = 30

GITHUB_ACCEPT_HEADER = "application/vnd.github.v3+json"

__all__ = ["DEFAULT_HTTP_TIMEOUT", "GITHUB_ACCEPT_HEADER"]
