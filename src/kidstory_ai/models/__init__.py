"""Data models."""

from kidstory_ai.models.density import DensityConfig, DensityExamples, DensityTier, WordRange
from kidstory_ai.models.story import (
    ChildProfile,
    GenerationRequest,
    ParsedStory,
    Story,
    StorySource,
    new_story_id,
)

__all__ = [
    "ChildProfile",
    "DensityConfig",
    "DensityExamples",
    "DensityTier",
    "GenerationRequest",
    "ParsedStory",
    "Story",
    "StorySource",
    "WordRange",
    "new_story_id",
]
