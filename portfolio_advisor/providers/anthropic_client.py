"""Text-generation providers for optional AI insights."""

from __future__ import annotations

from typing import Any, Protocol

import requests

from portfolio_advisor.providers.errors import ProviderError, map_status_to_code

DISABLED_MESSAGE = "AI analysis is currently disabled."
SYSTEM_PROMPT = (
    "You are a financial analyst assistant. Provide concise, data-driven insights based on the provided "
    "information. Format responses with clear headings and bullet points when appropriate."
)
MESSAGES_URL = "https://api.anthropic.com/v1/messages"
API_VERSION = "2023-06-01"


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str: ...


class DisabledTextGenerator:
    """Default generator used when AI insights are switched off."""

    def generate(self, prompt: str) -> str:
        return DISABLED_MESSAGE


def _extract_text(body: Any, status: int) -> str:
    blocks = body.get("content") if isinstance(body, dict) else None
    if not isinstance(blocks, list):
        raise ProviderError("anthropic", "BAD_RESPONSE", "Anthropic response had no content blocks.", status)
    parts = [
        block["text"]
        for block in blocks
        if isinstance(block, dict) and block.get("type", "text") == "text" and isinstance(block.get("text"), str)
    ]
    text = "\n".join(parts).strip()
    if not text:
        raise ProviderError("anthropic", "BAD_RESPONSE", "Anthropic response had no text.", status)
    return text


class AnthropicClient:
    """Single-turn Messages API client; every failure surfaces as ProviderError."""

    def __init__(
        self,
        api_key: str,
        model: str,
        timeout_seconds: float = 20.0,
        max_tokens: int = 500,
        session: requests.Session | None = None,
    ) -> None:
        self.model = model
        self.timeout_seconds = timeout_seconds
        self.max_tokens = max_tokens
        self.session = session or requests.Session()
        self.session.headers.update({"x-api-key": api_key, "anthropic-version": API_VERSION})

    def _body(self, prompt: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": 0.7,
            "system": SYSTEM_PROMPT,
            "messages": [{"role": "user", "content": prompt}],
        }

    def generate(self, prompt: str) -> str:
        try:
            response = self.session.post(MESSAGES_URL, json=self._body(prompt), timeout=self.timeout_seconds)
        except requests.RequestException as error:
            raise ProviderError("anthropic", "NETWORK", f"Anthropic request failed: {error}") from error
        if response.status_code >= 400:
            raise ProviderError(
                "anthropic",
                map_status_to_code(response.status_code),
                f"Anthropic returned HTTP {response.status_code}.",
                response.status_code,
            )
        try:
            body = response.json()
        except ValueError as error:
            raise ProviderError("anthropic", "BAD_RESPONSE", "Anthropic returned a non-JSON body.", response.status_code) from error
        return _extract_text(body, response.status_code)
