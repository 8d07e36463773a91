"""Document model."""

from typing import Any

from pydantic import BaseModel, Field


class Document(BaseModel):
    """A text document produced from one repository file.

    ``metadata["source"]`` holds the file path relative to the
    repository root.
    """

    content: str
    metadata: dict[str, Any] = Field(default_factory=dict)

    class Config:
        frozen = True

    @property
    def source(self) -> str | None:
        return self.metadata.get("source")
