"""Story service - orchestrates generation and is the single error boundary for it."""

import logging

from kidstory_ai.config import Settings
from kidstory_ai.exceptions import ProviderError
from kidstory_ai.llm import TextProvider, create_text_provider
from kidstory_ai.media import ImageGenerator, illustration_preview
from kidstory_ai.models import ChildProfile, GenerationRequest, ParsedStory, Story, StorySource
from kidstory_ai.prompting import build_instructions, parse_pages
from kidstory_ai.rules import sanitize
from kidstory_ai.services.mock_story import MockStoryGenerator

logger = logging.getLogger(__name__)


def enhance_prompt(user_prompt: str, child_name: str | None = None) -> str:
    """Cast the named child as protagonist; otherwise the prompt is used verbatim."""
    name = (child_name or "").strip()
    if not name:
        return user_prompt
    return f"Make {name} the main character of this story. {user_prompt}"


class StoryService:
    """
    Creates stories: live text (and optional illustration) when configured,
    otherwise or on any failure a mock story. Never raises for generation failures.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        text_provider: TextProvider | None = None,
        image_generator: ImageGenerator | None = None,
        mock_generator: MockStoryGenerator | None = None,
    ) -> None:
        self._settings = settings
        if text_provider is None and settings.text_provider_ready:
            text_provider = create_text_provider(settings)
        if image_generator is None and settings.image_endpoint_ready:
            image_generator = ImageGenerator.from_settings(settings)
        self._text = text_provider
        self._image = image_generator
        self._mock = mock_generator or MockStoryGenerator(settings.mock_delay_seconds)

    async def aclose(self) -> None:
        if self._text is not None:
            await self._text.aclose()

    @property
    def live_enabled(self) -> bool:
        return self._text is not None and self._settings.text_provider_ready

    @property
    def illustrations_enabled(self) -> bool:
        return self._image is not None and self._settings.image_endpoint_ready

    async def create_story(
        self,
        child_photo_uri: str,
        user_prompt: str,
        child_name: str | None = None,
        child_age: int = 5,
    ) -> Story:
        """
        Generate a story. Always returns a Story with at least one page.
        Cancellation of the awaiting task propagates and no Story is produced.
        """
        child = ChildProfile(name=(child_name or "").strip() or None, age=child_age)
        enhanced = enhance_prompt(user_prompt, child.name)

        parsed: ParsedStory | None = None
        illustration_url: str | None = None
        if not self.live_enabled:
            logger.info("Text provider not configured, using mock story")
        else:
            request = GenerationRequest(
                sanitized_prompt=sanitize(enhanced),
                enhanced_prompt=enhanced,
                child_age=child.age,
                child_name=child.name,
            )
            parsed = await self._generate_text(request)
            if parsed is not None and self.illustrations_enabled:
                illustration_url = await self._generate_illustration(parsed)

        source = StorySource.LIVE
        if parsed is None:
            parsed = await self._mock.generate(child.name)
            source = StorySource.MOCK

        story = Story(
            title=parsed.title,
            pages=parsed.pages,
            child_photo_uri=child_photo_uri,
            illustration_url=illustration_url,
            prompt=enhanced,
            source=source,
        )
        logger.info(
            "Created story %s (source=%s, pages=%d, illustrated=%s)",
            story.id,
            source.value,
            len(story.pages),
            illustration_url is not None,
        )
        return story

    async def _generate_text(self, request: GenerationRequest) -> ParsedStory | None:
        """Live text path. Any failure abandons the whole attempt."""
        assert self._text is not None
        try:
            instructions = build_instructions(request.child_age)
            raw = await self._text.generate_text(instructions, request.sanitized_prompt)
            parsed = parse_pages(raw)
        except ProviderError as e:
            logger.warning("Story text generation failed, falling back to mock: %s", e)
            return None
        except Exception as e:
            logger.exception("Story text generation failed, falling back to mock: %s", e)
            return None
        if parsed.degraded:
            logger.warning("Provider output degraded to %d page(s)", len(parsed.pages))
        return parsed

    async def _generate_illustration(self, parsed: ParsedStory) -> str | None:
        """Illustration is optional; failure keeps the text story."""
        assert self._image is not None
        try:
            return await self._image.generate_image(parsed.title, illustration_preview(parsed.pages))
        except ProviderError as e:
            logger.warning("Illustration failed, continuing without image: %s", e)
        except Exception as e:
            logger.exception("Illustration failed, continuing without image: %s", e)
        return None
