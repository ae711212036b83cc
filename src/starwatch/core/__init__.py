"""Core models and exceptions."""

from .exceptions import ConfigurationError, LLMError, SourceFetchError, StarWatchError, StorageError
from .models import AnalyzedPost, AnalyzedStar, BlogPost, LLMResponse, Repository

__all__ = [
    "Repository",
    "BlogPost",
    "AnalyzedStar",
    "AnalyzedPost",
    "LLMResponse",
    "StarWatchError",
    "ConfigurationError",
    "SourceFetchError",
    "LLMError",
    "StorageError",
]
