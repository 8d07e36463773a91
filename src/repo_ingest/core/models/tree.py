"""Tree listing models."""

from enum import Enum

from pydantic import BaseModel


class EntryKind(str, Enum):
    """Kind of a directory listing entry."""

    FILE = "file"
    DIRECTORY = "dir"


class TreeEntry(BaseModel):
    """One entry of a directory listing, relative to the repository root."""

    relative_path: str
    kind: EntryKind

    class Config:
        frozen = True

    @property
    def is_directory(self) -> bool:
        return self.kind == EntryKind.DIRECTORY
