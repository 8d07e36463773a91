"""Shared handling for policy-gated traversal failures."""

from typing import Any

import structlog

from repo_ingest.core.exceptions import TraversalError
from repo_ingest.core.models.repository import UnknownHandling

logger = structlog.get_logger(__name__)


def handle_error(
    message: str,
    unknown: UnknownHandling,
    error_cls: type[TraversalError] = TraversalError,
    **details: Any,
) -> None:
    """Apply the configured ``UnknownHandling`` to a failure.

    ``IGNORE`` swallows it, ``WARN`` logs a warning and returns, ``ERROR``
    raises ``error_cls`` with ``details`` attached.
    """
    if unknown == UnknownHandling.IGNORE:
        return
    if unknown == UnknownHandling.WARN:
        logger.warning(message, **details)
        return
    if unknown == UnknownHandling.ERROR:
        raise error_cls(message, details=details)
    raise ValueError(f"Unknown unknown handling: {unknown}")
