"""Git integration module for Repo-Ingest."""

from repo_ingest.git.fetcher import GitFetcher, build_remote_url, git_clone
from repo_ingest.git.scanner import TreeWalker
from repo_ingest.git.url_resolver import CoordinateResolver

__all__ = ["CoordinateResolver", "GitFetcher", "TreeWalker", "build_remote_url", "git_clone"]
