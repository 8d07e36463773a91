"""File classification and failure handling for traversals."""

from repo_ingest.filtering.binary import BINARY_EXTENSIONS, extension_of, is_binary_path
from repo_ingest.filtering.policy import handle_error

__all__ = ["BINARY_EXTENSIONS", "extension_of", "is_binary_path", "handle_error"]
