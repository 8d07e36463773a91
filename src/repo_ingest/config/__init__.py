"""Configuration for Repo-Ingest."""

from repo_ingest.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
