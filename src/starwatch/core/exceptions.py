"""Exception hierarchy."""


class StarWatchError(Exception):
    """Base class for all starwatch errors."""


class ConfigurationError(StarWatchError):
    """Raised when configuration is missing or invalid."""


class SourceFetchError(StarWatchError):
    """Raised when an upstream source cannot deliver a complete snapshot."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source}: {message}")


class LLMError(StarWatchError):
    """Raised when the language model provider fails to produce a response."""


class StorageError(StarWatchError):
    """Raised when the dataset cannot be written."""


__all__ = [
    "StarWatchError",
    "ConfigurationError",
    "SourceFetchError",
    "LLMError",
    "StorageError",
]
