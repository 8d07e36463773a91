"""Pytest configuration and fixtures."""

import shutil
from pathlib import Path

import pytest
import structlog

from repo_ingest.config.settings import Settings
from repo_ingest.git.fetcher import GitFetcher


class LocalTransport:
    """Clone transport that copies a prepared directory instead of cloning."""

    def __init__(self, source: Path) -> None:
        self.source = source
        self.calls: list[tuple[str, Path, str]] = []

    async def __call__(self, remote_url: str, destination: Path, branch: str) -> None:
        self.calls.append((remote_url, destination, branch))
        shutil.copytree(self.source, destination, symlinks=True)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore the default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        github_access_token=None,
        workspace_root=str(tmp_path / "workspace"),
    )


@pytest.fixture
def widgets_source(tmp_path: Path) -> Path:
    """Create the working tree of a small repository."""
    source = tmp_path / "remote" / "widgets"
    (source / "src").mkdir(parents=True)
    (source / "README.md").write_text("hello")
    (source / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00")
    (source / "src" / "main.ts").write_text("x=1")
    return source


@pytest.fixture
def transport(widgets_source: Path) -> LocalTransport:
    return LocalTransport(widgets_source)


@pytest.fixture
def fetcher(settings: Settings, transport: LocalTransport) -> GitFetcher:
    return GitFetcher(settings.workspace_root, transport=transport)
