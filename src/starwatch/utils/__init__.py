"""Shared utilities."""

from .datetime import ensure_aware, utc_now
from .logging import setup_logging

__all__ = [
    "setup_logging",
    "utc_now",
    "ensure_aware",
]
