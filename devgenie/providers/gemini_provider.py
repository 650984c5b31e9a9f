"""Google Gemini generateContent adapter."""

from typing import Any

from .base import ProviderAdapter

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"


class GeminiAdapter(ProviderAdapter):
    """Gemini-shaped provider: key header, ``candidates[0].content.parts[0].text``."""

    name = "gemini"
    display_name = "Gemini"
    model = "gemini-1.5-flash-latest"

    def build_request(self, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        url = f"{GEMINI_BASE_URL}/{self.model}:generateContent"
        headers = {
            "x-goog-api-key": self.api_key or "",
            "Content-Type": "application/json",
        }
        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_tokens,
            },
        }
        return url, headers, body

    def extract_text(self, data: dict[str, Any]) -> str:
        return data["candidates"][0]["content"]["parts"][0]["text"]
