"""Loading service."""

from typing import Any

from repo_ingest.config.settings import Settings, get_settings
from repo_ingest.core.models.document import Document
from repo_ingest.core.models.repository import LoaderConfig, UnknownHandling
from repo_ingest.git.fetcher import GitFetcher
from repo_ingest.pipelines.loading import RepositoryLoader


class LoadingService:
    """Service for loading hosted repositories as documents."""

    def __init__(
        self,
        settings: Settings | None = None,
        fetcher: GitFetcher | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._fetcher = fetcher or GitFetcher(self._settings.workspace_root)

    def create_loader(
        self,
        url: str,
        branch: str | None = None,
        recursive: bool = True,
        unknown: UnknownHandling = UnknownHandling.WARN,
        ignore_files: list[Any] | None = None,
        access_token: str | None = None,
        include_hidden: bool = False,
    ) -> RepositoryLoader:
        """Build a loader for ``url`` with settings-backed defaults."""
        config = LoaderConfig(
            branch=branch or self._settings.default_branch,
            recursive=recursive,
            unknown=unknown,
            ignore_files=ignore_files or [],
            access_token=access_token,
            include_hidden=include_hidden,
        )
        return RepositoryLoader(url, config, settings=self._settings, fetcher=self._fetcher)

    async def load_repository(self, url: str, **options: Any) -> list[Document]:
        """Load all eligible files of the repository at ``url``."""
        loader = self.create_loader(url, **options)
        return await loader.load()
