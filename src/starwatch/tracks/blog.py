"""Blog track: summary, analysis and predictions per new post."""

from datetime import datetime

from starwatch.config.settings import BlogTrackConfig, SubjectConfig
from starwatch.core.models import AnalyzedPost, BlogPost
from starwatch.llm.prompts import BLOG_ANALYSIS_PROMPT, BLOG_SECTION_LABELS
from starwatch.llm.sections import parse_sections

from .base import FallbackReason, Track

SUMMARY_PLACEHOLDER = "Summary unavailable"
ANALYSIS_PLACEHOLDER = "Analysis unavailable"
PREDICTIONS_PLACEHOLDER = "Predictions unavailable"


class BlogTrack(Track[BlogPost, AnalyzedPost]):
    name = "blog"
    record_model = AnalyzedPost

    def __init__(self, subject: SubjectConfig, config: BlogTrackConfig):
        super().__init__(delay_s=config.delay_ms / 1000, max_tokens=config.max_tokens)
        self.subject = subject

    def label(self, item: BlogPost) -> str:
        return item.title

    def build_prompt(self, item: BlogPost) -> str:
        return BLOG_ANALYSIS_PROMPT.format(
            subject_name=self.subject.name,
            short_name=self.subject.short_name,
            organization=self.subject.organization,
            role=self.subject.role,
            title=item.title,
            url=item.url,
            published_at=item.published_at.isoformat(),
            body=item.excerpt or item.content or "No content available",
        )

    def parse_response(self, text: str, item: BlogPost) -> dict[str, str]:
        sections = parse_sections(text, BLOG_SECTION_LABELS)
        return {
            "summary": sections.get("SUMMARY") or item.excerpt or SUMMARY_PLACEHOLDER,
            "ai_analysis": sections.get("ANALYSIS") or ANALYSIS_PLACEHOLDER,
            "ai_predictions": sections.get("PREDICTIONS") or PREDICTIONS_PLACEHOLDER,
        }

    def fallback(self, item: BlogPost, reason: FallbackReason) -> dict[str, str]:
        summary = item.excerpt or f'A new blog post from {self.subject.name}: "{item.title}".'
        if reason is FallbackReason.UNAVAILABLE:
            return {
                "summary": summary,
                "ai_analysis": f'AI analysis of "{item.title}" unavailable - API key not configured.',
                "ai_predictions": f'Unable to generate predictions for "{item.title}" without API access.',
            }
        return {
            "summary": summary,
            "ai_analysis": f'AI analysis of "{item.title}" failed. The commentary gods were busy.',
            "ai_predictions": f'Crystal ball is cloudy for "{item.title}". Check back later.',
        }

    def build_record(self, item: BlogPost, fields: dict[str, str], now: datetime) -> AnalyzedPost:
        return AnalyzedPost(
            id=item.id,
            title=item.title,
            url=item.url,
            published_at=item.published_at,
            content=item.content,
            excerpt=item.excerpt,
            summary=fields["summary"],
            ai_analysis=fields["ai_analysis"],
            ai_predictions=fields["ai_predictions"],
            analyzed_at=now,
        )

    def chrono_key(self, record: AnalyzedPost) -> datetime:
        return record.published_at

    def headline(self, record: AnalyzedPost) -> str:
        return record.ai_analysis


__all__ = [
    "BlogTrack",
    "SUMMARY_PLACEHOLDER",
    "ANALYSIS_PLACEHOLDER",
    "PREDICTIONS_PLACEHOLDER",
]
