"""LLM provider interface."""

from abc import ABC, abstractmethod

from starwatch.core.models import LLMResponse


class BaseLLMProvider(ABC):
    """Text-in, text-out completion capability.

    Implementations raise ``LLMError`` for every provider-side failure so
    callers only need to handle one exception type.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""

    @abstractmethod
    def complete(
        self,
        prompt: str,
        *,
        model: str | None = None,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        """Complete a single user prompt."""


__all__ = ["BaseLLMProvider"]
