"""Hosting URL resolver."""

import re

from repo_ingest.core.exceptions import MalformedURLError
from repo_ingest.core.models.repository import RepositoryCoordinate


class CoordinateResolver:
    """Resolves a hosting URL into a repository coordinate.

    Supports two shapes:
    - Repository root: https://github.com/org/repo
    - Subtree: https://github.com/org/repo/tree/<branch>/<sub/dir>

    The branch segment of a subtree URL is matched but not returned; the
    loader's configured branch is the only branch that gets cloned.
    """

    def __init__(self, host: str = "github.com") -> None:
        self._host = host
        self._pattern = re.compile(
            rf"https://{re.escape(host)}/([^/]+)/([^/]+)(/tree/[^/]+/(.+))?",
            re.IGNORECASE,
        )

    @property
    def host(self) -> str:
        return self._host

    def resolve(self, url: str) -> RepositoryCoordinate:
        """Parse ``url`` into owner, repository name and subpath."""
        match = self._pattern.match(url)
        if not match:
            raise MalformedURLError(
                f"Invalid {self._host} URL format: {url}",
                details={"url": url, "host": self._host},
            )

        owner, repo, _, subpath = match.groups()
        return RepositoryCoordinate(
            owner=owner,
            repository_name=repo,
            subpath=subpath or "",
            host=self._host,
        )
