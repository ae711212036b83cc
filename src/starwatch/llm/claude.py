"""Anthropic Claude provider."""

import logging

import anthropic

from starwatch.core.exceptions import LLMError
from starwatch.core.models import LLMResponse

from .base import BaseLLMProvider

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_MAX_TOKENS = 1024


class ClaudeProvider(BaseLLMProvider):
    """Claude via the Anthropic Messages API."""

    def __init__(
        self,
        api_key: str,
        *,
        default_model: str = DEFAULT_MODEL,
        timeout: float = 60.0,
        client: anthropic.Anthropic | None = None,
    ):
        if not api_key and client is None:
            raise LLMError("Anthropic API key is required.")
        self.default_model = default_model
        # Single attempt per call; failures are absorbed by the caller
        self._client = client or anthropic.Anthropic(api_key=api_key, timeout=timeout, max_retries=0)

    @property
    def name(self) -> str:
        return "claude"

    def complete(
        self,
        prompt: str,
        *,
        model: str | None = None,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        model_name = model or self.default_model
        try:
            message = self._client.messages.create(
                model=model_name,
                max_tokens=max_tokens or DEFAULT_MAX_TOKENS,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as exc:
            raise LLMError(f"Claude request failed: {exc}") from exc

        text = "".join(block.text for block in message.content if getattr(block, "type", None) == "text")
        usage = getattr(message, "usage", None)
        tokens = (usage.input_tokens + usage.output_tokens) if usage else 0
        logger.debug("Claude %s returned %d chars (%d tokens)", model_name, len(text), tokens)

        return LLMResponse(content=text, model=getattr(message, "model", model_name), tokens_used=tokens)


__all__ = ["ClaudeProvider"]
