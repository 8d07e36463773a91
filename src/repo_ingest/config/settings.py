"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # Hosting service
    github_access_token: str | None = None
    github_host: str = "github.com"
    default_branch: str = "main"

    # Clones land in <workspace_root>/<repository name>
    workspace_root: str = "~/.repo-ingest/repos"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_workers: int = 1

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.workspace_root = str(Path(self.workspace_root).expanduser())

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
