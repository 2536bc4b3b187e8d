"""Text provider abstract interface - OpenAI-compatible chat completion."""

from abc import ABC, abstractmethod


class TextProvider(ABC):
    """Generates story text from compiled instructions and a sanitized prompt."""

    name: str = ""

    @abstractmethod
    async def generate_text(self, instructions: str, safe_prompt: str) -> str:
        """
        Send one chat completion and return the raw assistant text.
        Raises ProviderError on non-2xx status, timeout or transport failure. No retries.
        """
        ...

    async def aclose(self) -> None:
        """Release network resources. Safe to call more than once."""
        return None
