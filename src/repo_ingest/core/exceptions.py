"""Exception hierarchy for Repo-Ingest."""

from typing import Any


class RepoIngestError(Exception):
    """Base exception for all Repo-Ingest errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(RepoIngestError):
    """Raised when the loader is configured incorrectly."""


class MalformedURLError(ConfigurationError):
    """Raised when a hosting URL matches none of the recognized shapes."""


class InvalidIgnoreRuleError(ConfigurationError):
    """Raised when an ignore rule cannot be evaluated against a path."""


class FetchError(RepoIngestError):
    """Raised when the repository could not be cloned."""


class TraversalError(RepoIngestError):
    """Base for failures local to one directory or one file."""


class ListingError(TraversalError):
    """Raised when a directory could not be listed."""


class ReadError(TraversalError):
    """Raised when a file could not be read."""
