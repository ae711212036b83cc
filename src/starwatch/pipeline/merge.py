"""Merge newly tracked records into the existing dataset."""

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TypeVar

T = TypeVar("T")


def merge_and_sort(
    new_records: Sequence[T],
    existing: Sequence[T],
    chrono_key: Callable[[T], datetime],
) -> list[T]:
    """Combine records and sort them most recent first.

    The relative order of records with identical keys is not part of the
    contract; consumers must not rely on it.
    """
    return sorted([*new_records, *existing], key=chrono_key, reverse=True)


__all__ = ["merge_and_sort"]
