"""Persistence layer."""

from kidstory_ai.persistence.factory import create_story_store
from kidstory_ai.persistence.redis_store import RedisStoryStore
from kidstory_ai.persistence.story_store import StoryStore

__all__ = [
    "RedisStoryStore",
    "StoryStore",
    "create_story_store",
]
