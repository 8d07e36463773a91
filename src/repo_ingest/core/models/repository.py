"""Repository coordinate and loader configuration models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from repo_ingest.core.models.ignore import IgnoreRule, coerce_rule


class UnknownHandling(str, Enum):
    """How traversal failures (listing or reading) are handled."""

    IGNORE = "ignore"
    WARN = "warn"
    ERROR = "error"


class RepositoryCoordinate(BaseModel):
    """Identifies what to fetch: owner, repository name and subpath."""

    owner: str = Field(..., min_length=1)
    repository_name: str = Field(..., min_length=1)
    subpath: str = ""
    host: str = "github.com"

    class Config:
        frozen = True

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repository_name}"


class LoaderConfig(BaseModel):
    """Configuration for a repository loader. Immutable once built."""

    branch: str = Field(default="main", min_length=1)
    recursive: bool = True
    unknown: UnknownHandling = UnknownHandling.WARN
    access_token: str | None = None
    ignore_files: list[IgnoreRule] = Field(default_factory=list)
    include_hidden: bool = False
    # None defers to Settings.github_host
    host: str | None = None

    class Config:
        frozen = True
        arbitrary_types_allowed = True

    @field_validator("ignore_files", mode="before")
    @classmethod
    def _coerce_ignore_files(cls, value: Any) -> list[IgnoreRule]:
        if value is None:
            return []
        return [coerce_rule(item) for item in value]
