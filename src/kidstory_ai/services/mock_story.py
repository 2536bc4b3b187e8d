"""Placeholder story used when live generation is unconfigured or fails."""

import asyncio
import logging

from kidstory_ai.models import ParsedStory

logger = logging.getLogger(__name__)

DEFAULT_CHILD_NAME = "Alex"

MOCK_TITLE = "{name} and the Magical Garden"

# Every page mentions the child by name.
MOCK_PAGES = (
    "Once upon a time, in a valley kissed by golden sunlight, there lived a curious child named {name}.",
    "One morning, while exploring the woods behind the cottage, {name} found a tiny gate hidden "
    "beneath a curtain of ivy, pushed it open and stepped into the most beautiful garden ever seen.",
    "Flowers of every color swayed and hummed soft melodies. A friendly ladybug landed on "
    "{name}'s finger and whispered, \"Welcome! We have been waiting for someone with a kind heart.\"",
    "{name} spent the whole afternoon learning the garden's secrets: how the roses told jokes, how "
    "the butterflies painted rainbows and how the pond reflected not just faces, but dreams.",
    "As the sun began to set, painting everything in shades of pink and gold, {name} promised the "
    "garden to come back again soon.",
    "And {name} did, every single day, having learned the most wonderful secret of all: the most "
    "magical places are the ones you discover with an open heart. The End.",
)


class MockStoryGenerator:
    """Deterministic six-page story with the child's name substituted."""

    def __init__(self, delay_seconds: float = 2.8) -> None:
        self._delay = max(0.0, delay_seconds)

    def build(self, child_name: str | None = None) -> ParsedStory:
        """Template story without the simulated delay."""
        name = (child_name or "").strip() or DEFAULT_CHILD_NAME
        return ParsedStory(
            title=MOCK_TITLE.format(name=name),
            pages=[page.format(name=name) for page in MOCK_PAGES],
        )

    async def generate(self, child_name: str | None = None) -> ParsedStory:
        """Template story after a simulated generation latency."""
        if self._delay:
            await asyncio.sleep(self._delay)
        logger.info("Generated mock story (child_name=%s)", bool(child_name))
        return self.build(child_name)
