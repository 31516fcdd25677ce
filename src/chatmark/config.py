"""Configuration management for chatmark."""

from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chatmark.formatting.ir import EmptyHeadingPolicy

# Characters the segmenter and normalizer already give meaning to
RESERVED_CHARACTERS = frozenset("\n\r*-•")


class ConfigurationError(Exception):
    """Settings failed validation."""

    pass


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Parsing
    sentinel: str = Field(default="★", alias="CHATMARK_SENTINEL")
    empty_heading: EmptyHeadingPolicy = Field(
        default=EmptyHeadingPolicy.DROP,
        alias="CHATMARK_EMPTY_HEADING",
    )

    # Rendering
    bullet_glyph: str = Field(default="•", alias="CHATMARK_BULLET_GLYPH")
    default_format: str = Field(default="rich", alias="CHATMARK_FORMAT")

    # Stream replay (CLI)
    replay_delay: float = Field(
        default=0.05,
        ge=0.0,
        alias="CHATMARK_REPLAY_DELAY",
    )
    chunk_size: int = Field(
        default=16,
        ge=1,
        alias="CHATMARK_CHUNK_SIZE",
    )

    @field_validator("sentinel")
    @classmethod
    def _check_sentinel(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("sentinel must be exactly one character")
        if value in RESERVED_CHARACTERS:
            raise ValueError(f"sentinel {value!r} collides with markup")
        return value


# Global settings instance
_settings: Optional[Settings] = None


def _build(**kwargs) -> Settings:
    try:
        return Settings(**kwargs)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid chatmark settings: {e}") from e


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = _build()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = _build(_env_file=env_file)
    else:
        _settings = _build()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None
