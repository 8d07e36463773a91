"""Ignore rules for repository files.

A rule answers one question, ``matches(path)``, for a repo-relative path.
Literal rules compare for equality; pattern rules delegate to the
pattern object's own ``search``; glob rules use shell-style wildcards.
"""

import fnmatch
from dataclasses import dataclass
from typing import Any

from repo_ingest.core.exceptions import InvalidIgnoreRuleError


class IgnoreRule:
    """Base class for ignore rules."""

    def matches(self, path: str) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class LiteralRule(IgnoreRule):
    """Matches only the exact repo-relative path."""

    path: str

    def matches(self, path: str) -> bool:
        return path == self.path


@dataclass(frozen=True)
class PatternRule(IgnoreRule):
    """Matches when ``pattern.search(path)`` finds a match.

    Usually wraps a compiled ``re.Pattern``, but any object exposing
    ``search`` is accepted. Errors raised while testing surface as
    ``InvalidIgnoreRuleError``.
    """

    pattern: Any

    def matches(self, path: str) -> bool:
        try:
            return bool(self.pattern.search(path))
        except Exception as e:
            raise InvalidIgnoreRuleError(
                f"Unknown ignore file pattern: {self.pattern!r}",
                details={"path": path, "error": str(e)},
            ) from e


@dataclass(frozen=True)
class GlobRule(IgnoreRule):
    """Matches the path against a shell-style glob."""

    glob: str

    def matches(self, path: str) -> bool:
        return fnmatch.fnmatchcase(path, self.glob)


def coerce_rule(value: Any) -> IgnoreRule:
    """Build a rule from a plain string, a pattern object or a rule."""
    if isinstance(value, IgnoreRule):
        return value
    if isinstance(value, str):
        return LiteralRule(value)
    return PatternRule(value)
