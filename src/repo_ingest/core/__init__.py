"""Core domain models and exceptions for Repo-Ingest."""

from repo_ingest.core.exceptions import (
    ConfigurationError,
    FetchError,
    InvalidIgnoreRuleError,
    ListingError,
    MalformedURLError,
    ReadError,
    RepoIngestError,
    TraversalError,
)
from repo_ingest.core.models import (
    Document,
    EntryKind,
    LoaderConfig,
    RepositoryCoordinate,
    TreeEntry,
    UnknownHandling,
)

__all__ = [
    # Models
    "Document",
    "EntryKind",
    "LoaderConfig",
    "RepositoryCoordinate",
    "TreeEntry",
    "UnknownHandling",
    # Exceptions
    "RepoIngestError",
    "ConfigurationError",
    "MalformedURLError",
    "InvalidIgnoreRuleError",
    "FetchError",
    "TraversalError",
    "ListingError",
    "ReadError",
]
