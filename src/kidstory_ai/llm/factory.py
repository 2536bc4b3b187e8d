"""Text provider factory - picks the backend from static configuration."""

import httpx

from kidstory_ai.config import Settings, TextProviderKind
from kidstory_ai.llm.base import TextProvider
from kidstory_ai.llm.grok_client import GrokTextProvider
from kidstory_ai.llm.openai_client import OpenAITextProvider


def create_text_provider(
    settings: Settings,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> TextProvider:
    """
    Create the text provider selected by TEXT_PROVIDER.
    Does not check credentials; see Settings.text_provider_ready.
    """
    if settings.text_provider is TextProviderKind.GROK:
        return GrokTextProvider.from_settings(settings, http_client=http_client)
    return OpenAITextProvider.from_settings(settings, http_client=http_client)
