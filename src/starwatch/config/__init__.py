"""Configuration loading."""

from .settings import (
    BlogTrackConfig,
    CuratedPost,
    GitHubConfig,
    LLMConfig,
    Settings,
    StarsTrackConfig,
    SubjectConfig,
    TracksConfig,
    load_settings,
)

__all__ = [
    "Settings",
    "load_settings",
    "SubjectConfig",
    "GitHubConfig",
    "LLMConfig",
    "StarsTrackConfig",
    "BlogTrackConfig",
    "CuratedPost",
    "TracksConfig",
]
