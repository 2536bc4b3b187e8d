"""Story collection persistence - JSON file storage, newest first."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from kidstory_ai.models import Story

logger = logging.getLogger(__name__)

STORIES_FILE = "stories.json"


class StoryStore:
    """File-based story list. Append-to-front, read-many, reset-all."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._path = self._data_dir / STORIES_FILE

    def _load(self) -> list[dict]:
        if not self._path.exists():
            return []
        try:
            with self._path.open() as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load stories %s: %s", self._path, e)
            return []
        stories = data.get("stories") if isinstance(data, dict) else None
        if not isinstance(stories, list):
            logger.warning("Unexpected stories file layout in %s, treating as empty", self._path)
            return []
        return stories

    def _save(self, stories: list[dict]) -> None:
        try:
            with self._path.open("w") as f:
                json.dump({"stories": stories}, f, indent=2)
        except OSError as e:
            logger.error("Could not save stories %s: %s", self._path, e)
            raise

    def list_stories(self) -> list[Story]:
        """All stories, newest first. Unreadable entries are skipped."""
        stories: list[Story] = []
        for item in self._load():
            try:
                stories.append(Story.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping invalid stored story: %s", e)
        return stories

    def get(self, story_id: str) -> Story | None:
        for story in self.list_stories():
            if story.id == story_id:
                return story
        return None

    def add(self, story: Story) -> None:
        """Prepend a story."""
        stories = self._load()
        stories.insert(0, story.model_dump(mode="json"))
        self._save(stories)

    def clear(self) -> None:
        """Delete every story."""
        self._save([])
