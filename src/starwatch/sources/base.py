"""Source interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar

ItemT = TypeVar("ItemT")


class BaseSource(ABC, Generic[ItemT]):
    """A provider of the complete current collection of upstream items.

    ``fetch`` is stateless with respect to previously stored data and must
    either return the whole snapshot or raise ``SourceFetchError``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short source name used in logs and errors."""

    @abstractmethod
    def fetch(self) -> Sequence[ItemT]:
        """Fetch the full current snapshot."""


__all__ = ["BaseSource"]
