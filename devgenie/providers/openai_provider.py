"""OpenAI chat completions adapter."""

from typing import Any

from .base import ProviderAdapter

OPENAI_URL = "https://api.openai.com/v1/chat/completions"


class OpenAIAdapter(ProviderAdapter):
    """OpenAI-shaped provider: bearer auth, ``choices[0].message.content``."""

    name = "openai"
    display_name = "OpenAI"
    model = "gpt-4o-mini"

    def build_request(self, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        body = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }
        return OPENAI_URL, headers, body

    def extract_text(self, data: dict[str, Any]) -> str:
        return data["choices"][0]["message"]["content"]
