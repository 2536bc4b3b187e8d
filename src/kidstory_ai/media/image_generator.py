"""Story illustration client - self-hosted image service returning permanent URLs."""

import logging
from typing import Any

import httpx

from kidstory_ai.config import Settings
from kidstory_ai.exceptions import ProviderError

logger = logging.getLogger(__name__)

IMAGE_SIZE = 1024
PREVIEW_CHARS = 150

ILLUSTRATION_TEMPLATE = (
    "Children's book illustration, watercolor style, vibrant warm colors, no text in the image. "
    'Scene: "{title}" - {preview}. '
    "Soft lighting, dreamy atmosphere, suitable for young children."
)


def illustration_preview(pages: list[str]) -> str:
    """First PREVIEW_CHARS characters of page 1."""
    return pages[0][:PREVIEW_CHARS] if pages else ""


def build_illustration_prompt(title: str, body_preview: str) -> str:
    return ILLUSTRATION_TEMPLATE.format(title=title, preview=body_preview.strip())


class ImageGenerator:
    """POSTs to <endpoint>/generate and returns the hosted image URL. No local caching."""

    name = "image"

    def __init__(
        self,
        *,
        endpoint: str,
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None
    ) -> "ImageGenerator":
        return cls(
            endpoint=settings.image_endpoint or "",
            timeout=settings.image_timeout_seconds,
            transport=transport,
        )

    async def generate_image(self, title: str, body_preview: str) -> str:
        """
        Request a square illustration for the story.
        Raises ProviderError on non-2xx, timeout, transport failure or a response without a URL.
        """
        url = f"{self._endpoint}/generate"
        payload: dict[str, Any] = {
            "prompt": build_illustration_prompt(title, body_preview),
            "width": IMAGE_SIZE,
            "height": IMAGE_SIZE,
        }
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                resp = await client.post(url, json=payload, timeout=self._timeout)
        except httpx.TimeoutException as e:
            raise ProviderError(self.name, f"timed out after {self._timeout}s") from e
        except httpx.HTTPError as e:
            raise ProviderError(self.name, f"request failed: {e}") from e

        if resp.status_code >= 300:
            raise ProviderError(
                self.name,
                "image generation failed",
                status_code=resp.status_code,
                body=resp.text,
            )
        try:
            data = resp.json()
        except ValueError as e:
            raise ProviderError(self.name, "response was not JSON", body=resp.text) from e

        image_url = data.get("url") if isinstance(data, dict) else None
        if not image_url:
            raise ProviderError(self.name, "response missing 'url'", body=resp.text)
        logger.info("Illustration generated: %s", image_url)
        return str(image_url)
