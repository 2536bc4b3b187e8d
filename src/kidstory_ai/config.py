"""Configuration management - read once at startup, passed explicitly."""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Values shipped in sample .env files; treated the same as an absent value.
PLACEHOLDER_VALUES = {"sk-...", "xai-...", "http://...", "https://..."}


class TextProviderKind(str, Enum):
    """Text-generation backend."""

    OPENAI = "openai"
    GROK = "grok"


def _is_set(value: str | None) -> bool:
    if not value:
        return False
    value = value.strip()
    return bool(value) and value not in PLACEHOLDER_VALUES


class Settings(BaseSettings):
    """Application settings from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8000, description="Bind port")
    log_level: str = Field(default="INFO", description="Root log level")

    # Text generation
    text_provider: TextProviderKind = Field(
        default=TextProviderKind.OPENAI, description="Which chat-completion backend to use"
    )
    openai_api_key: str = Field(default="", description="OpenAI API key")
    openai_base_url: str = Field(default="https://api.openai.com/v1")
    openai_model: str = Field(default="gpt-4o-mini")
    grok_api_key: str = Field(default="", description="xAI API key")
    grok_base_url: str = Field(default="https://api.x.ai/v1")
    grok_model: str = Field(default="grok-3-mini")
    text_max_tokens: int = Field(default=1500, description="Max output tokens for story text")
    text_timeout_seconds: float = Field(default=60.0)

    # Image generation (self-hosted endpoint exposing POST /generate)
    image_endpoint: str | None = Field(default=None, description="Image service base URL")
    image_timeout_seconds: float = Field(default=120.0)

    # Mock fallback
    mock_delay_seconds: float = Field(
        default=2.8, description="Simulated latency of the placeholder story"
    )

    # Data
    data_dir: Path = Field(default=Path("data"), description="Directory for JSON persistence")
    redis_url: str | None = Field(default=None, description="Redis URL for cloud persistence")

    @property
    def text_api_key(self) -> str:
        """API key of the selected text provider."""
        if self.text_provider is TextProviderKind.GROK:
            return self.grok_api_key
        return self.openai_api_key

    @property
    def text_provider_ready(self) -> bool:
        """Live text generation needs the selected provider's key."""
        return _is_set(self.text_api_key)

    @property
    def image_endpoint_ready(self) -> bool:
        return _is_set(self.image_endpoint)


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML config file."""
    if not config_path.exists():
        return {}
    with config_path.open() as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
