"""Repository loading pipeline."""

from repo_ingest.pipelines.loading.pipeline import RepositoryLoader

__all__ = ["RepositoryLoader"]
