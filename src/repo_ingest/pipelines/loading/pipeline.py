"""Repository loading pipeline."""

import asyncio
from collections.abc import Iterator
from pathlib import Path

import structlog

from repo_ingest.config.settings import Settings, get_settings
from repo_ingest.core.exceptions import ListingError, ReadError
from repo_ingest.core.models.document import Document
from repo_ingest.core.models.repository import LoaderConfig, RepositoryCoordinate
from repo_ingest.core.models.tree import TreeEntry
from repo_ingest.filtering.binary import is_binary_path
from repo_ingest.filtering.policy import handle_error
from repo_ingest.git.fetcher import GitFetcher
from repo_ingest.git.scanner import TreeWalker
from repo_ingest.git.url_resolver import CoordinateResolver

logger = structlog.get_logger(__name__)


class RepositoryLoader:
    """Loads every eligible file of a hosted repository as a Document.

    Orchestrates the full load:
    1. Resolve the hosting URL (at construction)
    2. Clone the configured branch
    3. Walk the tree from the URL's subpath
    4. Skip binary and ignored files, read the rest as text

    Listing and read failures go through the configured ``unknown``
    handling. Bad URLs, failed clones and broken ignore rules always raise.

    The clone and the walk share the fetcher's per-checkout lock, so
    concurrent loads of one repository run one after another. The walk
    itself runs in a worker thread to keep the event loop free.
    """

    def __init__(
        self,
        url: str,
        config: LoaderConfig | None = None,
        *,
        settings: Settings | None = None,
        fetcher: GitFetcher | None = None,
    ) -> None:
        settings = settings or get_settings()
        if config is None:
            config = LoaderConfig(branch=settings.default_branch)
        if config.host is None:
            config = config.model_copy(update={"host": settings.github_host})
        if config.access_token is None and settings.github_access_token:
            config = config.model_copy(update={"access_token": settings.github_access_token})

        self._config = config
        self._coordinate = CoordinateResolver(config.host).resolve(url)
        self._fetcher = fetcher or GitFetcher(settings.workspace_root)

    @property
    def config(self) -> LoaderConfig:
        return self._config

    @property
    def coordinate(self) -> RepositoryCoordinate:
        return self._coordinate

    async def load(self) -> list[Document]:
        """Clone the repository and return its documents in traversal order."""
        async with self._fetcher.lock_for(self._coordinate):
            repo_path = await self._fetcher.fetch(
                self._coordinate,
                self._config.branch,
                self._config.access_token,
            )
            return await asyncio.to_thread(self._collect, repo_path)

    def _collect(self, repo_path: Path) -> list[Document]:
        walker = TreeWalker(repo_path, include_hidden=self._config.include_hidden)

        documents: list[Document] = []
        skipped = 0
        pending = [self._list_directory(walker, self._coordinate.subpath)]
        while pending:
            entry = next(pending[-1], None)
            if entry is None:
                pending.pop()
                continue

            if entry.is_directory:
                if self._config.recursive:
                    pending.append(self._list_directory(walker, entry.relative_path))
                continue

            document = self._load_file(walker, entry)
            if document is None:
                skipped += 1
            else:
                documents.append(document)

        logger.info(
            "Repository loaded",
            repo=self._coordinate.slug,
            branch=self._config.branch,
            documents=len(documents),
            skipped=skipped,
        )
        return documents

    def _list_directory(self, walker: TreeWalker, path: str) -> Iterator[TreeEntry]:
        try:
            return iter(walker.walk(path))
        except ListingError as e:
            handle_error(
                f"Failed to process directory: {path}, {e}",
                self._config.unknown,
                ListingError,
                path=path,
            )
            return iter(())

    def _load_file(self, walker: TreeWalker, entry: TreeEntry) -> Document | None:
        path = entry.relative_path
        if is_binary_path(path) or self._should_ignore(path):
            return None

        try:
            content = walker.read_file(path)
        except (OSError, ValueError) as e:
            handle_error(
                f"Failed to fetch file content: {path}, {e}",
                self._config.unknown,
                ReadError,
                path=path,
            )
            return None

        return Document(content=content, metadata={"source": path})

    def _should_ignore(self, path: str) -> bool:
        return any(rule.matches(path) for rule in self._config.ignore_files)
