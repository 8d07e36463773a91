"""Repository fetcher using the git CLI."""

import asyncio
import shutil
from collections.abc import Awaitable, Callable
from pathlib import Path

import structlog

from repo_ingest.core.exceptions import FetchError
from repo_ingest.core.models.repository import RepositoryCoordinate

logger = structlog.get_logger(__name__)

CloneTransport = Callable[[str, Path, str], Awaitable[None]]


async def git_clone(remote_url: str, destination: Path, branch: str) -> None:
    """Clone a single branch of ``remote_url`` into ``destination``.

    The full history of the branch is fetched; no depth limit is applied.
    Raises ``RuntimeError`` with git's stderr if the clone fails.
    """
    process = await asyncio.create_subprocess_exec(
        "git",
        "clone",
        "--single-branch",
        "--branch",
        branch,
        remote_url,
        str(destination),
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    _, stderr = await process.communicate()
    if process.returncode != 0:
        raise RuntimeError(stderr.decode("utf-8", errors="replace").strip())


def build_remote_url(coordinate: RepositoryCoordinate, access_token: str | None = None) -> str:
    """Build the HTTPS clone URL, embedding the token when present."""
    credentials = f"{access_token}@" if access_token else ""
    return (
        f"https://{credentials}{coordinate.host}/"
        f"{coordinate.owner}/{coordinate.repository_name}"
    )


def redact(text: str, access_token: str | None) -> str:
    """Mask the access token wherever it appears in ``text``."""
    if not access_token:
        return text
    return text.replace(access_token, "***")


class GitFetcher:
    """Materializes a remote repository under a local workspace.

    Each repository is cloned into ``<workspace_root>/<repository name>``.
    An existing checkout at that location is removed first, so repeated
    fetches always start from a clean clone. Callers sharing a fetcher
    serialize work on one checkout by holding ``lock_for(coordinate)``.
    """

    def __init__(
        self,
        workspace_root: str | Path,
        transport: CloneTransport | None = None,
    ) -> None:
        self._workspace_root = Path(workspace_root)
        self._transport = transport or git_clone
        self._locks: dict[Path, asyncio.Lock] = {}

    @property
    def workspace_root(self) -> Path:
        return self._workspace_root

    def destination_for(self, coordinate: RepositoryCoordinate) -> Path:
        return self._workspace_root / coordinate.repository_name

    def lock_for(self, coordinate: RepositoryCoordinate) -> asyncio.Lock:
        """Lock guarding the checkout of ``coordinate`` in this workspace."""
        key = self.destination_for(coordinate).resolve()
        return self._locks.setdefault(key, asyncio.Lock())

    async def fetch(
        self,
        coordinate: RepositoryCoordinate,
        branch: str,
        access_token: str | None = None,
    ) -> Path:
        """Clone ``coordinate`` at ``branch`` and return the local path."""
        destination = self.destination_for(coordinate)
        remote_url = build_remote_url(coordinate, access_token)
        safe_url = redact(remote_url, access_token)

        # The checkout must be a direct child of the workspace; names like
        # "." or ".." would otherwise wipe the workspace or its parent.
        if destination.resolve().parent != self._workspace_root.resolve():
            raise FetchError(
                f"Repository name {coordinate.repository_name!r} escapes the workspace",
                details={"url": safe_url, "branch": branch},
            )

        try:
            self._clean(destination)
            self._workspace_root.mkdir(parents=True, exist_ok=True)
            logger.info(
                "Cloning repository",
                url=safe_url,
                branch=branch,
                destination=str(destination),
            )
            await self._transport(remote_url, destination, branch)
        except Exception as e:
            raise FetchError(
                f"Failed to clone {safe_url} (branch {branch}): {redact(str(e), access_token)}",
                details={"url": safe_url, "branch": branch},
            ) from e

        logger.info("Repository cloned", repo=coordinate.slug, branch=branch)
        return destination

    @staticmethod
    def _clean(destination: Path) -> None:
        if destination.is_dir() and not destination.is_symlink():
            shutil.rmtree(destination)
        elif destination.exists() or destination.is_symlink():
            destination.unlink()
