"""Grok (xAI) text provider - same wire shape as OpenAI, different endpoint and sampling."""

import httpx

from kidstory_ai.config import Settings
from kidstory_ai.llm.openai_client import OpenAICompatibleProvider


class GrokTextProvider(OpenAICompatibleProvider):
    """xAI chat completions at api.x.ai."""

    name = "grok"
    temperature = 0.8

    @classmethod
    def from_settings(
        cls, settings: Settings, *, http_client: httpx.AsyncClient | None = None
    ) -> "GrokTextProvider":
        return cls(
            api_key=settings.grok_api_key,
            base_url=settings.grok_base_url,
            model=settings.grok_model,
            max_tokens=settings.text_max_tokens,
            timeout=settings.text_timeout_seconds,
            http_client=http_client,
        )
