"""LLM provider adapters."""

from .base import ProviderAdapter, ProviderCredentials, ProviderError, ProviderResult
from .claude_provider import ClaudeAdapter
from .gemini_provider import GeminiAdapter
from .openai_provider import OpenAIAdapter
from .registry import PROVIDER_NAMES, ProviderRegistry

__all__ = [
    "PROVIDER_NAMES",
    "ClaudeAdapter",
    "GeminiAdapter",
    "OpenAIAdapter",
    "ProviderAdapter",
    "ProviderCredentials",
    "ProviderError",
    "ProviderRegistry",
    "ProviderResult",
]
