"""Sequential, paced execution of rate-limited calls."""

import logging
import time
from collections.abc import Callable, Sequence
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class RateLimitedSequencer:
    """Run one call per item, in order, with a fixed pause between calls.

    The pause follows every call except the last one. There is no retry and
    no concurrency: a batch of N items takes at least ``(N - 1) * delay_s``.
    """

    def __init__(self, delay_s: float, sleep: Callable[[float], None] = time.sleep):
        if delay_s < 0:
            raise ValueError(f"delay_s must be non-negative, got {delay_s}")
        self.delay_s = delay_s
        self._sleep = sleep

    def run(
        self,
        items: Sequence[T],
        fn: Callable[[int, T], R],
    ) -> list[R]:
        """Call ``fn(index, item)`` for each item and collect the results."""
        results: list[R] = []
        total = len(items)
        for idx, item in enumerate(items):
            results.append(fn(idx, item))
            if idx < total - 1 and self.delay_s > 0:
                logger.debug("Waiting %.1fs before next call", self.delay_s)
                self._sleep(self.delay_s)
        return results


__all__ = ["RateLimitedSequencer"]
