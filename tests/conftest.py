"""Shared fixtures: isolated settings and in-process fake providers."""

import asyncio

import pytest

from kidstory_ai.config import Settings
from kidstory_ai.llm import TextProvider

WELL_FORMED_STORY = """TITLE: The Brave Fox
PAGE 1: Once upon a time, a little fox lived at the edge of a sunny meadow.
PAGE 2: Every morning the fox watched the birds fly over the tall grass.
PAGE 3: One day a baby bird could not find its way back to the nest.
PAGE 4: The fox gently guided the bird through the meadow, step by step.
PAGE 5: At the big oak tree, the bird's family sang a happy song.
PAGE 6: The fox smiled, knowing that helping others is the bravest thing of all."""


def make_settings(**overrides) -> Settings:
    """Settings that ignore .env and ambient credentials unless overridden."""
    values = {
        "_env_file": None,
        "text_provider": "openai",
        "openai_api_key": "",
        "grok_api_key": "",
        "image_endpoint": None,
        "mock_delay_seconds": 0.0,
        "redis_url": None,
    }
    values.update(overrides)
    return Settings(**values)


class FakeTextProvider(TextProvider):
    """Records calls; returns fixed text or raises."""

    name = "fake"

    def __init__(self, text: str = WELL_FORMED_STORY, error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def generate_text(self, instructions: str, safe_prompt: str) -> str:
        self.calls.append((instructions, safe_prompt))
        if self.error is not None:
            raise self.error
        return self.text


class BlockingTextProvider(TextProvider):
    """Never returns; used to exercise cancellation."""

    name = "blocking"

    def __init__(self) -> None:
        self.started = asyncio.Event()

    async def generate_text(self, instructions: str, safe_prompt: str) -> str:
        self.started.set()
        await asyncio.Event().wait()
        return ""


class FakeImageGenerator:
    """Stands in for ImageGenerator."""

    def __init__(self, url: str = "https://images.test/story.png", error: Exception | None = None) -> None:
        self.url = url
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def generate_image(self, title: str, body_preview: str) -> str:
        self.calls.append((title, body_preview))
        if self.error is not None:
            raise self.error
        return self.url


@pytest.fixture
def live_settings() -> Settings:
    return make_settings(openai_api_key="sk-test", image_endpoint="http://images.test")


@pytest.fixture
def offline_settings() -> Settings:
    return make_settings()
