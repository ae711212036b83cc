"""Per-kind track definitions consumed by the generic tracker pipeline."""

from abc import ABC, abstractmethod
from collections.abc import Hashable
from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel

ItemT = TypeVar("ItemT", bound=BaseModel)
RecordT = TypeVar("RecordT", bound=BaseModel)


class FallbackReason(str, Enum):
    """Why deterministic text replaced model output."""

    UNAVAILABLE = "unavailable"  # no provider configured
    FAILED = "failed"  # provider call failed or returned nothing


class Track(ABC, Generic[ItemT, RecordT]):
    """Everything that differs between tracked item kinds.

    The pipeline itself only fetches, diffs, paces, merges and stores; a
    track supplies identity, prompt, response parsing, fallback text,
    record construction and the chronological sort key.
    """

    name: str
    record_model: type[RecordT]

    def __init__(self, *, delay_s: float, max_tokens: int):
        self.delay_s = delay_s
        self.max_tokens = max_tokens

    def identity(self, obj: ItemT | RecordT) -> Hashable:
        """Stable provider-assigned key shared by items and their records."""
        return obj.id  # type: ignore[attr-defined]

    @abstractmethod
    def label(self, item: ItemT) -> str:
        """Human-readable item name; also embedded in fallback text."""

    @abstractmethod
    def build_prompt(self, item: ItemT) -> str:
        """Prompt sent to the model for ``item``."""

    @abstractmethod
    def parse_response(self, text: str, item: ItemT) -> dict[str, str]:
        """Turn model output into enrichment fields. Must not raise."""

    @abstractmethod
    def fallback(self, item: ItemT, reason: FallbackReason) -> dict[str, str]:
        """Deterministic enrichment fields naming ``item``."""

    @abstractmethod
    def build_record(self, item: ItemT, fields: dict[str, str], now: datetime) -> RecordT:
        """Combine an item with its enrichment into a persisted record."""

    @abstractmethod
    def chrono_key(self, record: RecordT) -> datetime:
        """Timestamp the dataset is sorted by, most recent first."""

    @abstractmethod
    def headline(self, record: RecordT) -> str:
        """Enrichment text shown in the run summary."""


__all__ = ["Track", "FallbackReason"]
