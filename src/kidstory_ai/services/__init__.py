"""Business logic services."""

from kidstory_ai.services.mock_story import MockStoryGenerator
from kidstory_ai.services.story_service import StoryService, enhance_prompt
from kidstory_ai.services.suggestions import PROMPT_SUGGESTIONS, random_suggestion

__all__ = [
    "MockStoryGenerator",
    "PROMPT_SUGGESTIONS",
    "StoryService",
    "enhance_prompt",
    "random_suggestion",
]
