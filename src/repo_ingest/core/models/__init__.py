"""Domain models for Repo-Ingest."""

from repo_ingest.core.models.document import Document
from repo_ingest.core.models.ignore import (
    GlobRule,
    IgnoreRule,
    LiteralRule,
    PatternRule,
    coerce_rule,
)
from repo_ingest.core.models.repository import (
    LoaderConfig,
    RepositoryCoordinate,
    UnknownHandling,
)
from repo_ingest.core.models.tree import EntryKind, TreeEntry

__all__ = [
    "Document",
    "EntryKind",
    "TreeEntry",
    "LoaderConfig",
    "RepositoryCoordinate",
    "UnknownHandling",
    "IgnoreRule",
    "LiteralRule",
    "PatternRule",
    "GlobRule",
    "coerce_rule",
]
