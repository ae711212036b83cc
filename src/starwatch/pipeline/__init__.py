"""Processing pipeline components."""

from .enrich import EnrichmentOutcome, ItemEnricher
from .merge import merge_and_sort
from .novelty import find_novel
from .sequencer import RateLimitedSequencer
from .tracker import TrackerPipeline, TrackResult, TrackStats

__all__ = [
    "find_novel",
    "ItemEnricher",
    "EnrichmentOutcome",
    "RateLimitedSequencer",
    "merge_and_sort",
    "TrackerPipeline",
    "TrackResult",
    "TrackStats",
]
