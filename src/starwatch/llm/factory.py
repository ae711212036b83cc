"""LLM client factory."""

import logging

from starwatch.config.settings import LLMConfig

from .base import BaseLLMProvider
from .claude import ClaudeProvider

logger = logging.getLogger(__name__)


def create_llm_client(config: LLMConfig) -> BaseLLMProvider | None:
    """Build the configured provider.

    Returns ``None`` when the LLM is disabled or no API key is set; callers
    then fall back to deterministic text for every item.
    """
    if not config.enabled:
        logger.info("LLM disabled in configuration, using fallback text")
        return None
    if not config.api_key:
        logger.warning("LLM API key not set, using fallback text")
        return None

    if config.provider == "claude":
        return ClaudeProvider(config.api_key, default_model=config.model, timeout=config.timeout)
    raise ValueError(f"Unsupported LLM provider: {config.provider}")


__all__ = ["create_llm_client"]
