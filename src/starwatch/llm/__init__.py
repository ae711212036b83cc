"""LLM providers, prompts and response parsing."""

from .base import BaseLLMProvider
from .claude import ClaudeProvider
from .factory import create_llm_client
from .sections import parse_sections

__all__ = [
    "BaseLLMProvider",
    "ClaudeProvider",
    "create_llm_client",
    "parse_sections",
]
