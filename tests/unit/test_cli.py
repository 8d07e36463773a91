"""Tests for the command line interface."""

import json
import logging

import pytest
import structlog
from click.testing import CliRunner

from repo_ingest import cli as cli_module
from repo_ingest.cli import cli

URL = "https://github.com/acme/widgets"


@pytest.fixture
def runner(monkeypatch, settings, fetcher) -> CliRunner:
    monkeypatch.setattr(cli_module, "configure_logging", lambda log_level: None)
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL))
    monkeypatch.setattr("repo_ingest.services.loading.get_settings", lambda: settings)
    monkeypatch.setattr("repo_ingest.services.loading.GitFetcher", lambda workspace_root: fetcher)
    return CliRunner()


@pytest.mark.unit
class TestCLI:
    """Tests for the repo-ingest CLI."""

    def test_load(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["load", URL])
        assert result.exit_code == 0, result.output
        assert "Loaded 2 documents" in result.output
        assert "README.md (5 chars)" in result.output
        assert "src/main.ts (3 chars)" in result.output

    def test_load_json_with_ignores(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["load", URL, "--ignore", "README.md", "--ignore-glob", "*.png", "--json"]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == [
            {"content": "x=1", "metadata": {"source": "src/main.ts"}}
        ]

    def test_load_no_recursive(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["load", URL, "--no-recursive", "--ignore-pattern", r"\.md$"])
        assert result.exit_code == 0, result.output
        assert "Loaded 0 documents" in result.output

    def test_invalid_pattern(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["load", URL, "--ignore-pattern", "("])
        assert result.exit_code == 2

    def test_malformed_url(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["load", "https://example.com/acme"])
        assert result.exit_code == 1
        assert "Error: Invalid github.com URL format" in result.output
