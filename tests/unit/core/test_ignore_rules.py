"""Tests for ignore rules."""

import re

import pytest

from repo_ingest.core.exceptions import InvalidIgnoreRuleError
from repo_ingest.core.models.ignore import (
    GlobRule,
    LiteralRule,
    PatternRule,
    coerce_rule,
)


class ExplodingPattern:
    def search(self, path: str):
        raise TypeError("cannot test")


@pytest.mark.unit
class TestIgnoreRules:
    """Tests for LiteralRule, PatternRule and GlobRule."""

    def test_literal_matches_exact_path_only(self) -> None:
        rule = LiteralRule("README.md")
        assert rule.matches("README.md") is True
        assert rule.matches("docs/README.md") is False
        assert rule.matches("readme.md") is False

    def test_pattern_uses_search(self) -> None:
        rule = PatternRule(re.compile(r"\.md$"))
        assert rule.matches("docs/guide.md") is True
        assert rule.matches("src/main.ts") is False

    def test_pattern_error_becomes_invalid_rule(self) -> None:
        rule = PatternRule(ExplodingPattern())
        with pytest.raises(InvalidIgnoreRuleError) as exc_info:
            rule.matches("README.md")
        assert exc_info.value.details["path"] == "README.md"

    def test_non_pattern_object_is_invalid(self) -> None:
        rule = coerce_rule(42)
        assert isinstance(rule, PatternRule)
        with pytest.raises(InvalidIgnoreRuleError):
            rule.matches("README.md")

    def test_glob(self) -> None:
        rule = GlobRule("docs/*.md")
        assert rule.matches("docs/guide.md") is True
        assert rule.matches("README.md") is False

    def test_coerce(self) -> None:
        assert coerce_rule("a.txt") == LiteralRule("a.txt")
        glob = GlobRule("*.lock")
        assert coerce_rule(glob) is glob
