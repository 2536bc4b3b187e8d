"""Story data models - request, parsed provider output and the persisted record."""

import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class StorySource(str, Enum):
    """Where the story content came from."""

    LIVE = "live"
    MOCK = "mock"


class ChildProfile(BaseModel):
    """Caller-supplied child details. Age is clamped later, not validated here."""

    name: str | None = None
    age: int = 5


class GenerationRequest(BaseModel):
    """Inputs of one live generation attempt. Not persisted."""

    model_config = ConfigDict(frozen=True)

    sanitized_prompt: str
    enhanced_prompt: str
    child_age: int
    child_name: str | None = None


class ParsedStory(BaseModel):
    """Title and pages recovered from provider text."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    pages: list[str] = Field(..., min_length=1)
    degraded: bool = Field(default=False, description="Tagged format not found; single-page fallback")


def new_story_id() -> str:
    """Time + random derived id, e.g. story_1718000000000_3f9a1c2b."""
    millis = int(datetime.now(timezone.utc).timestamp() * 1000)
    return f"story_{millis}_{uuid.uuid4().hex[:8]}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Story(BaseModel):
    """Finished story. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_story_id)
    title: str = Field(..., min_length=1)
    pages: list[str] = Field(..., min_length=1)
    child_photo_uri: str = Field(..., description="Local photo reference, never uploaded")
    illustration_url: str | None = Field(default=None, description="Permanent hosted image URL")
    prompt: str = Field(..., description="Enhanced prompt the story was requested with")
    created_at: datetime = Field(default_factory=utc_now)
    source: StorySource = Field(default=StorySource.LIVE)

    @property
    def is_mock(self) -> bool:
        return self.source is StorySource.MOCK
