"""Provider registry: which adapters take part in a request."""

from collections.abc import Iterable

import structlog

from .base import DEFAULT_TIMEOUT, ProviderAdapter, ProviderCredentials
from .claude_provider import ClaudeAdapter
from .gemini_provider import GeminiAdapter
from .openai_provider import OpenAIAdapter

logger = structlog.get_logger()

ADAPTER_CLASSES: dict[str, type[ProviderAdapter]] = {
    "openai": OpenAIAdapter,
    "claude": ClaudeAdapter,
    "gemini": GeminiAdapter,
}

PROVIDER_NAMES = tuple(ADAPTER_CLASSES)


class ProviderRegistry:
    """Holds one adapter per configured provider."""

    def __init__(self, adapters: dict[str, ProviderAdapter]) -> None:
        self._adapters = dict(adapters)

    @classmethod
    def from_credentials(
        cls,
        credentials: ProviderCredentials,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "ProviderRegistry":
        """Build adapters for every provider that has a key."""
        adapters = {
            name: ADAPTER_CLASSES[name](api_key=key, timeout=timeout)
            for name, key in credentials.configured().items()
        }
        return cls(adapters)

    @property
    def configured(self) -> list[str]:
        return list(self._adapters)

    def select(self, names: Iterable[str] | None = None) -> list[ProviderAdapter]:
        """Adapters for the requested providers; all configured ones when none requested.

        Requested providers without a credential are skipped, not an error.
        """
        wanted = [getattr(n, "value", n) for n in names or []]
        if not wanted:
            return list(self._adapters.values())

        skipped = [n for n in wanted if n not in self._adapters]
        if skipped:
            logger.info("providers_not_configured", providers=skipped)
        return [self._adapters[n] for n in dict.fromkeys(wanted) if n in self._adapters]
