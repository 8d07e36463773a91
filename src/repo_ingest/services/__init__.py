"""Business logic services for Repo-Ingest."""

from repo_ingest.services.loading import LoadingService

__all__ = ["LoadingService"]
