"""Runtime configuration for the documentation server."""

from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REMOTE_REPOSITORY = "https://repo1.maven.org/maven2"


def _default_local_repository() -> Path:
    return Path.home() / ".m2" / "repository"


class Settings(BaseSettings):
    """Configuration values mapped from ``SERVEDOC_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SERVEDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # HTTP listener
    host: str = "127.0.0.1"
    port: int = Field(8000, ge=0, le=65535)

    # Artifact resolution
    local_repository: Path = Field(default_factory=_default_local_repository)
    remote_repositories: List[str] = Field(default_factory=lambda: [DEFAULT_REMOTE_REPOSITORY])
    classifier: str = "javadoc"
    extension: str = "jar"
    fetch_timeout: float = Field(30.0, gt=0)

    log_level: str = "INFO"

    @field_validator("local_repository")
    @classmethod
    def _expand_user(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("remote_repositories")
    @classmethod
    def _require_repositories(cls, value: List[str]) -> List[str]:
        repositories = [item.strip() for item in value if item and item.strip()]
        if not repositories:
            raise ValueError("at least one remote repository is required")
        return repositories

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()
