"""Anthropic Claude messages adapter."""

from typing import Any

from .base import ProviderAdapter

CLAUDE_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"


class ClaudeAdapter(ProviderAdapter):
    """Claude-shaped provider: ``x-api-key`` auth, ``content[0].text``."""

    name = "claude"
    display_name = "Claude"
    model = "claude-3-5-sonnet-20241022"

    def build_request(self, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        headers = {
            "x-api-key": self.api_key or "",
            "anthropic-version": ANTHROPIC_VERSION,
            "Content-Type": "application/json",
        }
        body = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        return CLAUDE_URL, headers, body

    def extract_text(self, data: dict[str, Any]) -> str:
        # Text blocks may be preceded by other block types
        for block in data["content"]:
            if block.get("type", "text") == "text":
                return block["text"]
        raise KeyError("text")
