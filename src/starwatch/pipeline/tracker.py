"""Tracker pipeline orchestrator.

One generic engine runs every track:

    load dataset -> fetch snapshot -> find novel items
    -> paced enrichment -> merge and sort -> save dataset

Saving is the last step, so a run that fails part-way leaves the stored
dataset exactly as it was. Concurrent runs against the same dataset are not
guarded against; the scheduler must not overlap them.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic

from starwatch.infrastructure.storage import DatasetStorage
from starwatch.sources.base import BaseSource
from starwatch.tracks.base import ItemT, RecordT, Track
from starwatch.utils.datetime import utc_now

from .enrich import ItemEnricher
from .merge import merge_and_sort
from .novelty import find_novel
from .sequencer import RateLimitedSequencer

logger = logging.getLogger(__name__)


@dataclass
class TrackStats:
    """Statistics from one tracker run."""

    existing: int = 0
    fetched: int = 0
    novel: int = 0
    enriched: int = 0
    fallbacks: int = 0


@dataclass
class TrackResult(Generic[RecordT]):
    """Complete result from one tracker run."""

    track: str
    new_records: list[RecordT] = field(default_factory=list)
    total: int = 0
    saved: bool = False
    stats: TrackStats = field(default_factory=TrackStats)

    @property
    def latest(self) -> RecordT | None:
        """First newly tracked record, in fetched order."""
        return self.new_records[0] if self.new_records else None


class TrackerPipeline(Generic[ItemT, RecordT]):
    """Incremental ingestion and enrichment for a single track."""

    def __init__(
        self,
        track: Track[ItemT, RecordT],
        source: BaseSource[ItemT],
        storage: DatasetStorage[RecordT],
        enricher: ItemEnricher[ItemT],
        sequencer: RateLimitedSequencer | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize tracker pipeline.

        Args:
            track: Per-kind behaviour (identity, prompts, sort key).
            source: Upstream snapshot provider.
            storage: Dataset file for this track.
            enricher: LLM enrichment for novel items.
            sequencer: Pacing for enrichment calls. Defaults to the track's delay.
            clock: Source of "now" for observation and enrichment timestamps.
        """
        self.track = track
        self.source = source
        self.storage = storage
        self.enricher = enricher
        self.sequencer = sequencer or RateLimitedSequencer(track.delay_s)
        self.clock = clock

    def run(
        self,
        on_progress: Callable[[str, str], None] | None = None,
    ) -> TrackResult[RecordT]:
        """Execute one run.

        Args:
            on_progress: Optional callback for progress updates.
                        Called with (stage_name: str, message: str).

        Returns:
            TrackResult with the newly tracked records and statistics.

        Raises:
            SourceFetchError: If the upstream snapshot could not be fetched.
            StorageError: If the dataset could not be written.
        """
        result: TrackResult[RecordT] = TrackResult(track=self.track.name)
        track = self.track
        run_start = time.time()

        def progress(stage: str, msg: str) -> None:
            logger.info("[%s:%s] %s", track.name, stage, msg)
            if on_progress:
                on_progress(stage, msg)

        # 1. Load prior state
        existing = self.storage.load()
        existing_ids = {track.identity(record) for record in existing}
        result.stats.existing = len(existing)
        result.total = len(existing)
        progress("load", f"Found {len(existing)} previously tracked items")

        # 2. Fetch current snapshot (fatal on failure, nothing written yet)
        fetched = self.source.fetch()
        result.stats.fetched = len(fetched)
        progress("fetch", f"Fetched {len(fetched)} items from {self.source.name}")

        # 3. Diff by identity
        novel = find_novel(fetched, existing_ids, track.identity)
        result.stats.novel = len(novel)
        if not novel:
            progress("diff", "No new items to analyze")
            return result
        progress("diff", f"Found {len(novel)} new items to analyze")

        # 4. Paced enrichment, one call per item
        def enrich_one(idx: int, item: ItemT) -> RecordT:
            progress("enrich", f"[{idx + 1}/{len(novel)}] Analyzing {track.label(item)}")
            outcome = self.enricher.enrich(item)
            if outcome.used_fallback:
                result.stats.fallbacks += 1
            else:
                result.stats.enriched += 1
            return track.build_record(item, outcome.fields, self.clock())

        new_records = self.sequencer.run(novel, enrich_one)

        # 5. Merge and persist the whole dataset
        merged = merge_and_sort(new_records, existing, track.chrono_key)
        self.storage.save(merged)

        result.new_records = new_records
        result.total = len(merged)
        result.saved = True
        elapsed = time.time() - run_start
        progress("save", f"Saved {len(merged)} items to {self.storage.path} ({elapsed:.1f}s)")
        return result


__all__ = ["TrackerPipeline", "TrackResult", "TrackStats"]
