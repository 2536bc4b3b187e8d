"""Redis-backed story store for cloud deployment. Use when REDIS_URL is set."""

import json
import logging

from pydantic import ValidationError

from kidstory_ai.models import Story

logger = logging.getLogger(__name__)

KEY_PREFIX = "kidstory"


class RedisStoryStore:
    """Redis list of serialized stories. LPUSH keeps newest first."""

    def __init__(self, redis_url: str, client=None) -> None:
        self._redis_url = redis_url
        self._client = client

    def _get_client(self):
        """Lazy-init Redis client."""
        if self._client is None:
            import redis
            self._client = redis.from_url(
                self._redis_url,
                decode_responses=True,
            )
        return self._client

    @property
    def key(self) -> str:
        return f"{KEY_PREFIX}:stories"

    def list_stories(self) -> list[Story]:
        """All stories, newest first."""
        try:
            data = self._get_client().lrange(self.key, 0, -1)
        except Exception as e:
            logger.warning("Redis story list failed: %s", e)
            return []
        stories: list[Story] = []
        for raw in data or []:
            try:
                stories.append(Story.model_validate(json.loads(raw)))
            except (json.JSONDecodeError, ValidationError) as e:
                logger.warning("Skipping invalid stored story: %s", e)
        return stories

    def get(self, story_id: str) -> Story | None:
        for story in self.list_stories():
            if story.id == story_id:
                return story
        return None

    def add(self, story: Story) -> None:
        try:
            self._get_client().lpush(self.key, json.dumps(story.model_dump(mode="json")))
        except Exception as e:
            logger.error("Redis story save failed: %s", e)
            raise

    def clear(self) -> None:
        try:
            self._get_client().delete(self.key)
        except Exception as e:
            logger.error("Redis story reset failed: %s", e)
            raise
