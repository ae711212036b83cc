"""Tracked item kinds."""

from .base import FallbackReason, Track
from .blog import BlogTrack
from .stars import StarTrack

__all__ = ["Track", "FallbackReason", "StarTrack", "BlogTrack"]
