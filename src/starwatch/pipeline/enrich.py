"""Per-item AI enrichment with graceful degradation."""

import logging
from dataclasses import dataclass
from typing import Generic

from starwatch.core.exceptions import LLMError
from starwatch.llm.base import BaseLLMProvider
from starwatch.tracks.base import FallbackReason, ItemT, Track

logger = logging.getLogger(__name__)


@dataclass
class EnrichmentOutcome:
    """Enrichment fields for one item.

    Attributes:
        fields: Field name to text; every field is non-empty.
        used_fallback: True when deterministic text replaced model output.
    """

    fields: dict[str, str]
    used_fallback: bool = False


class ItemEnricher(Generic[ItemT]):
    """Annotate items through an LLM, never failing the run.

    Enrichment is best-effort: a missing provider, a provider error or an
    empty response all produce the track's fallback text for that item.
    """

    def __init__(
        self,
        track: Track[ItemT, object],
        llm: BaseLLMProvider | None,
        model: str | None = None,
    ):
        self.track = track
        self.llm = llm
        self.model = model

    def enrich(self, item: ItemT) -> EnrichmentOutcome:
        label = self.track.label(item)

        if self.llm is None:
            logger.warning("No LLM configured, using fallback text for %s", label)
            return EnrichmentOutcome(self.track.fallback(item, FallbackReason.UNAVAILABLE), used_fallback=True)

        prompt = self.track.build_prompt(item)
        try:
            response = self.llm.complete(prompt, model=self.model, max_tokens=self.track.max_tokens)
            if not response.content.strip():
                raise LLMError("empty response")
        except Exception as exc:
            logger.error("Failed to enrich %s: %s", label, exc)
            return EnrichmentOutcome(self.track.fallback(item, FallbackReason.FAILED), used_fallback=True)

        fields = self.track.parse_response(response.content, item)
        logger.debug("Enriched %s using %s (%d tokens)", label, response.model, response.tokens_used)
        return EnrichmentOutcome(fields)


__all__ = ["ItemEnricher", "EnrichmentOutcome"]
