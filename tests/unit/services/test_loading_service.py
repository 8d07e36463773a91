"""Tests for the loading service."""

import re

import pytest

from repo_ingest.core.models.ignore import LiteralRule, PatternRule
from repo_ingest.core.models.repository import UnknownHandling
from repo_ingest.services.loading import LoadingService

URL = "https://github.com/acme/widgets"


@pytest.mark.unit
class TestLoadingService:
    """Tests for LoadingService."""

    def test_create_loader_uses_settings_defaults(self, settings, fetcher) -> None:
        settings = settings.model_copy(update={"default_branch": "trunk"})
        service = LoadingService(settings=settings, fetcher=fetcher)
        loader = service.create_loader(URL)

        assert loader.config.branch == "trunk"
        assert loader.config.unknown == UnknownHandling.WARN
        assert loader.coordinate.repository_name == "widgets"

    def test_create_loader_overrides(self, settings, fetcher) -> None:
        service = LoadingService(settings=settings, fetcher=fetcher)
        pattern = re.compile(r"\.ts$")
        loader = service.create_loader(
            URL,
            branch="develop",
            recursive=False,
            unknown=UnknownHandling.ERROR,
            ignore_files=["README.md", pattern],
        )

        assert loader.config.branch == "develop"
        assert loader.config.recursive is False
        assert loader.config.ignore_files == [LiteralRule("README.md"), PatternRule(pattern)]

    @pytest.mark.asyncio
    async def test_load_repository(self, settings, fetcher) -> None:
        service = LoadingService(settings=settings, fetcher=fetcher)
        documents = await service.load_repository(URL, ignore_files=["README.md"])

        assert [doc.source for doc in documents] == ["src/main.ts"]
