"""FastAPI application - story creation and the story collection."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Response
from pydantic import BaseModel, Field, field_validator

from kidstory_ai.config import get_settings
from kidstory_ai.models import Story
from kidstory_ai.persistence import RedisStoryStore, StoryStore, create_story_store
from kidstory_ai.services import StoryService, random_suggestion

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Dependency injection - created at startup
_service: StoryService | None = None
_store: StoryStore | RedisStoryStore | None = None


class CreateStoryRequest(BaseModel):
    """Body of POST /stories."""

    child_photo_uri: str = Field(..., description="Local photo reference on the device")
    prompt: str = Field(..., description="What the story should be about")
    child_name: str | None = Field(default=None)
    child_age: int = Field(default=5)

    @field_validator("prompt")
    @classmethod
    def _prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt must not be blank")
        return value


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup."""
    global _service, _store
    current = get_settings()
    _store = create_story_store(current)
    _service = StoryService(current)
    logger.info(
        "Story service ready (provider=%s, live=%s, illustrations=%s)",
        current.text_provider.value,
        _service.live_enabled,
        _service.illustrations_enabled,
    )
    yield
    await _service.aclose()
    _service = None
    _store = None


app = FastAPI(
    title="KidStory AI",
    description="Personalized illustrated children's stories",
    version="0.1.0",
    lifespan=lifespan,
)


def _require_service() -> StoryService:
    if _service is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return _service


def _require_store() -> StoryStore | RedisStoryStore:
    if _store is None:
        raise HTTPException(status_code=503, detail="Store not initialized")
    return _store


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check for load balancers."""
    return {"status": "ok"}


@app.post("/stories", status_code=201)
async def create_story(body: CreateStoryRequest) -> Story:
    """Generate a story and append it to the collection."""
    service = _require_service()
    store = _require_store()
    story = await service.create_story(
        body.child_photo_uri,
        body.prompt,
        child_name=body.child_name,
        child_age=body.child_age,
    )
    store.add(story)
    return story


@app.get("/stories")
async def list_stories() -> list[Story]:
    """All stories, newest first."""
    return _require_store().list_stories()


@app.get("/stories/{story_id}")
async def get_story(story_id: str) -> Story:
    story = _require_store().get(story_id)
    if story is None:
        raise HTTPException(status_code=404, detail="Story not found")
    return story


@app.delete("/stories", status_code=204)
async def reset_stories() -> Response:
    """Delete every stored story."""
    _require_store().clear()
    logger.info("Story collection reset")
    return Response(status_code=204)


@app.get("/prompts/suggestion")
async def prompt_suggestion(exclude: str | None = None) -> dict[str, str]:
    """A ready-made prompt, different from `exclude`."""
    return {"prompt": random_suggestion(exclude)}
