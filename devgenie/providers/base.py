"""Provider adapter contract.

Every adapter issues exactly one POST to its provider's completion endpoint and
turns the provider-specific envelope into plain reply text. Failures never
escape ``invoke``; they come back as a ``ProviderResult`` carrying the error.
"""

from abc import ABC, abstractmethod
import asyncio
from dataclasses import dataclass
from typing import Any

import httpx
import structlog

logger = structlog.get_logger()

DEFAULT_TIMEOUT = 30.0
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 2000


class ProviderError(Exception):
    """Raised inside an adapter when a call cannot produce reply text."""

    pass


@dataclass(frozen=True)
class ProviderCredentials:
    """Per-provider API keys. ``None`` disables that provider."""

    openai: str | None = None
    claude: str | None = None
    gemini: str | None = None

    def configured(self) -> dict[str, str]:
        """Provider name -> key, for the providers that have a key."""
        keys = {"openai": self.openai, "claude": self.claude, "gemini": self.gemini}
        return {name: key for name, key in keys.items() if key}


@dataclass(frozen=True)
class ProviderResult:
    """Outcome of one adapter call: reply text or the error that replaced it."""

    source: str
    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.text)

    @classmethod
    def success(cls, source: str, text: str) -> "ProviderResult":
        return cls(source=source, text=text)

    @classmethod
    def failure(cls, source: str, error: str) -> "ProviderResult":
        return cls(source=source, error=error)


class ProviderAdapter(ABC):
    """Base class for one LLM provider.

    Subclasses only describe the wire format: endpoint, headers, body and where
    the text lives in the response. Model, temperature and max tokens are fixed
    per provider.
    """

    name: str = ""
    display_name: str = ""
    model: str = ""
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS

    def __init__(self, api_key: str | None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.api_key = api_key
        self.timeout = timeout

    @abstractmethod
    def build_request(self, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        """Return (url, headers, json body) for one completion call."""
        ...

    @abstractmethod
    def extract_text(self, data: dict[str, Any]) -> str:
        """Pull the first generated text out of the provider envelope.

        Raises:
            KeyError, IndexError, TypeError, AttributeError: When the envelope has an
                unexpected shape.
        """
        ...

    async def invoke(self, prompt: str) -> ProviderResult:
        """Call the provider once, bounded by ``timeout``. Never raises."""
        if not self.api_key:
            return ProviderResult.failure(self.name, "credential_missing")

        try:
            text = await asyncio.wait_for(self._call(prompt), timeout=self.timeout)
        except TimeoutError:
            logger.warning("provider_call_failed", provider=self.name, error_type="timeout")
            return ProviderResult.failure(self.name, f"timed out after {self.timeout}s")
        except httpx.HTTPStatusError as e:
            logger.warning(
                "provider_call_failed",
                provider=self.name,
                error_type="http_status",
                status_code=e.response.status_code,
            )
            return ProviderResult.failure(self.name, f"HTTP {e.response.status_code}")
        except (httpx.HTTPError, ProviderError, ValueError) as e:
            logger.warning(
                "provider_call_failed",
                provider=self.name,
                error_type=type(e).__name__,
                error=str(e),
            )
            return ProviderResult.failure(self.name, str(e) or type(e).__name__)

        return ProviderResult.success(self.name, text)

    async def _call(self, prompt: str) -> str:
        url, headers, body = self.build_request(prompt)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(url, json=body, headers=headers)
            response.raise_for_status()

        data = response.json()
        try:
            text = self.extract_text(data)
        except (KeyError, IndexError, TypeError, AttributeError) as exc:
            logger.error(
                "provider_response_parse_failed",
                provider=self.name,
                response_keys=list(data.keys()) if isinstance(data, dict) else None,
            )
            raise ProviderError(f"Unexpected {self.display_name} response format") from exc

        if not isinstance(text, str) or not text.strip():
            raise ProviderError(f"Empty {self.display_name} reply")
        return text
