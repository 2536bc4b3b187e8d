"""Text generation providers - OpenAI-compatible."""

from kidstory_ai.llm.base import TextProvider
from kidstory_ai.llm.factory import create_text_provider
from kidstory_ai.llm.grok_client import GrokTextProvider
from kidstory_ai.llm.openai_client import OpenAICompatibleProvider, OpenAITextProvider

__all__ = [
    "GrokTextProvider",
    "OpenAICompatibleProvider",
    "OpenAITextProvider",
    "TextProvider",
    "create_text_provider",
]
