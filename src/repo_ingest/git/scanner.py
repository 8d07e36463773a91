"""Directory listing for materialized repositories."""

import os
from pathlib import Path

from repo_ingest.core.exceptions import ListingError
from repo_ingest.core.models.tree import EntryKind, TreeEntry

GIT_DIR = ".git"


class TreeWalker:
    """Lists a checked-out repository one directory level at a time.

    Paths are reported relative to the repository root with POSIX
    separators. Symlinks are not followed: a link is reported with the
    kind of the link itself.
    """

    def __init__(self, repo_path: str | Path, include_hidden: bool = False) -> None:
        self._repo_path = Path(repo_path).resolve()
        self._include_hidden = include_hidden

    @property
    def repo_path(self) -> Path:
        return self._repo_path

    def walk(self, start_path: str = "") -> list[TreeEntry]:
        """List the direct children of ``start_path``.

        Listing order is whatever the filesystem yields.
        """
        directory = self._resolve(start_path)
        entries = []
        try:
            with os.scandir(directory) as it:
                for item in it:
                    if not self._is_visible(item.name):
                        continue
                    kind = (
                        EntryKind.DIRECTORY
                        if item.is_dir(follow_symlinks=False)
                        else EntryKind.FILE
                    )
                    relative = Path(item.path).relative_to(self._repo_path).as_posix()
                    entries.append(TreeEntry(relative_path=relative, kind=kind))
        except OSError as e:
            raise ListingError(
                f"Failed to list directory: {start_path or '.'}: {e}",
                details={"path": start_path},
            ) from e
        return entries

    def read_file(self, relative_path: str) -> str:
        """Read a file from the repository as UTF-8 text.

        Undecodable bytes are replaced rather than rejected.
        """
        file_path = (self._repo_path / relative_path).resolve()
        if self._repo_path not in file_path.parents:
            raise PermissionError(f"File resolves outside the repository: {relative_path}")
        return file_path.read_text(encoding="utf-8", errors="replace")

    def _resolve(self, start_path: str) -> Path:
        directory = (self._repo_path / start_path).resolve()
        if directory != self._repo_path and self._repo_path not in directory.parents:
            raise ListingError(
                f"Path escapes the repository root: {start_path}",
                details={"path": start_path},
            )
        return directory

    def _is_visible(self, name: str) -> bool:
        if name == GIT_DIR:
            return False
        return self._include_hidden or not name.startswith(".")
