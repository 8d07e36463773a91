"""Processing pipelines for Repo-Ingest."""

from repo_ingest.pipelines.loading import RepositoryLoader

__all__ = ["RepositoryLoader"]
