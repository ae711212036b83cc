"""Novelty filter: which fetched items have never been tracked."""

import logging
from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def find_novel(
    fetched: Iterable[T],
    existing_ids: Iterable[Hashable],
    identity: Callable[[T], Hashable],
) -> list[T]:
    """Return fetched items whose identity is not already stored.

    Novelty is decided by identity alone, never by content, so an edited
    description or title never re-triggers enrichment. Fetched order is
    preserved, and an identity repeated within ``fetched`` is kept only
    once (first occurrence).

    Args:
        fetched: Current upstream snapshot.
        existing_ids: Identities already present in the dataset.
        identity: Extracts the stable identity of an item.

    Returns:
        Novel items in fetched order.
    """
    seen: set[Hashable] = set(existing_ids)
    novel: list[T] = []
    for item in fetched:
        key = identity(item)
        if key in seen:
            continue
        seen.add(key)
        novel.append(item)
    return novel


__all__ = ["find_novel"]
