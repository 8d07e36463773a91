"""API routers."""

from repo_ingest.api.routers import health, loading

__all__ = ["health", "loading"]
