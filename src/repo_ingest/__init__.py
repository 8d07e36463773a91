"""Repo-Ingest: turn a hosted Git repository into text documents."""

__version__ = "0.1.0"

from repo_ingest.core.models import Document, LoaderConfig, UnknownHandling  # noqa: E402
from repo_ingest.pipelines.loading import RepositoryLoader  # noqa: E402

__all__ = ["Document", "LoaderConfig", "RepositoryLoader", "UnknownHandling", "__version__"]
