"""GitHub star track: one satirical commentary per newly starred repo."""

from datetime import datetime

from starwatch.config.settings import StarsTrackConfig, SubjectConfig
from starwatch.core.models import AnalyzedStar, Repository
from starwatch.llm.prompts import STAR_COMMENTARY_PROMPT

from .base import FallbackReason, Track


class StarTrack(Track[Repository, AnalyzedStar]):
    name = "stars"
    record_model = AnalyzedStar

    def __init__(self, subject: SubjectConfig, config: StarsTrackConfig):
        super().__init__(delay_s=config.delay_ms / 1000, max_tokens=config.max_tokens)
        self.subject = subject

    def label(self, item: Repository) -> str:
        return item.full_name

    def build_prompt(self, item: Repository) -> str:
        return STAR_COMMENTARY_PROMPT.format(
            subject_name=self.subject.name,
            organization=self.subject.organization,
            role=self.subject.role,
            full_name=item.full_name,
            description=item.description or "No description",
            topics=", ".join(item.topics) if item.topics else "none",
            language=item.language or "Unknown",
            stargazers_count=item.stargazers_count,
        )

    def parse_response(self, text: str, item: Repository) -> dict[str, str]:
        return {"commentary": text.strip()}

    def fallback(self, item: Repository, reason: FallbackReason) -> dict[str, str]:
        who = self.subject.short_name
        if reason is FallbackReason.UNAVAILABLE:
            return {"commentary": f"{who} has discovered {item.full_name}. Interesting choice."}
        return {
            "commentary": (
                f"{who} has starred {item.full_name}. "
                "The AI commentary gods were not available to interpret this move."
            )
        }

    def build_record(self, item: Repository, fields: dict[str, str], now: datetime) -> AnalyzedStar:
        # The starred endpoint has no per-star timestamp; first observation stands in for it
        return AnalyzedStar(
            id=item.id,
            full_name=item.full_name,
            description=item.description,
            html_url=item.html_url,
            stargazers_count=item.stargazers_count,
            language=item.language,
            topics=list(item.topics),
            starred_at=now,
            commentary=fields["commentary"],
            analyzed_at=now,
        )

    def chrono_key(self, record: AnalyzedStar) -> datetime:
        return record.starred_at

    def headline(self, record: AnalyzedStar) -> str:
        return record.commentary


__all__ = ["StarTrack"]
