"""OpenAI-compatible text provider implementation."""

import logging
from typing import Any

import httpx
from openai import APIError, APIStatusError, APITimeoutError, AsyncOpenAI

from kidstory_ai.config import Settings
from kidstory_ai.exceptions import ProviderError
from kidstory_ai.llm.base import TextProvider

logger = logging.getLogger(__name__)


class OpenAICompatibleProvider(TextProvider):
    """Shared request shape for chat-completion backends speaking the OpenAI protocol."""

    name = "openai-compatible"
    temperature: float = 0.85

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str,
        model: str,
        max_tokens: int = 1500,
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._model = model
        self._max_tokens = max_tokens
        self._timeout = timeout
        self._http_client = http_client
        self._client: AsyncOpenAI | None = None

    def _get_client(self) -> AsyncOpenAI:
        """Lazy-init client. SDK retries disabled."""
        if self._client is None:
            client_kwargs: dict[str, Any] = {
                "api_key": self._api_key,
                "base_url": self._base_url,
                "timeout": self._timeout,
                "max_retries": 0,
            }
            if self._http_client is not None:
                client_kwargs["http_client"] = self._http_client
            self._client = AsyncOpenAI(**client_kwargs)
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None

    def build_messages(self, instructions: str, safe_prompt: str) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": instructions},
            {"role": "user", "content": safe_prompt},
        ]

    async def generate_text(self, instructions: str, safe_prompt: str) -> str:
        """Call chat completion and return the first choice's message content."""
        client = self._get_client()
        try:
            response = await client.chat.completions.create(
                model=self._model,
                messages=self.build_messages(instructions, safe_prompt),
                max_tokens=self._max_tokens,
                temperature=self.temperature,
            )
        except APIStatusError as e:
            raise ProviderError(
                self.name,
                "chat completion failed",
                status_code=e.status_code,
                body=e.response.text,
            ) from e
        except APITimeoutError as e:
            raise ProviderError(self.name, f"timed out after {self._timeout}s") from e
        except APIError as e:
            raise ProviderError(self.name, f"request failed: {e}") from e

        if not response.choices:
            raise ProviderError(self.name, "response contained no choices")
        content = response.choices[0].message.content or ""
        logger.info("%s returned %d characters (model=%s)", self.name, len(content), self._model)
        return content


class OpenAITextProvider(OpenAICompatibleProvider):
    """OpenAI chat completions (gpt-4o-mini by default)."""

    name = "openai"
    temperature = 0.85

    @classmethod
    def from_settings(
        cls, settings: Settings, *, http_client: httpx.AsyncClient | None = None
    ) -> "OpenAITextProvider":
        return cls(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            model=settings.openai_model,
            max_tokens=settings.text_max_tokens,
            timeout=settings.text_timeout_seconds,
            http_client=http_client,
        )
