"""Store factory - creates the file or Redis story store based on config."""

from pathlib import Path

from kidstory_ai.config import Settings
from kidstory_ai.persistence.redis_store import RedisStoryStore
from kidstory_ai.persistence.story_store import StoryStore


def create_story_store(settings: Settings) -> StoryStore | RedisStoryStore:
    """
    Uses Redis when REDIS_URL is set; otherwise a JSON file under DATA_DIR.
    """
    if settings.redis_url:
        return RedisStoryStore(settings.redis_url)
    return StoryStore(Path(settings.data_dir))
