"""CLI for Repo-Ingest."""

import asyncio
import json
import re
import sys

import click

from repo_ingest.config.logging import configure_logging
from repo_ingest.core.exceptions import RepoIngestError
from repo_ingest.core.models.ignore import GlobRule, PatternRule
from repo_ingest.core.models.repository import UnknownHandling


def run_async(coro):
    """Run an async function synchronously."""
    return asyncio.run(coro)


def _compile_patterns(ctx, param, values: tuple[str, ...]) -> list[re.Pattern]:
    compiled = []
    for value in values:
        try:
            compiled.append(re.compile(value))
        except re.error as e:
            raise click.BadParameter(f"{value!r}: {e}", ctx=ctx, param=param)
    return compiled


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """Repo-Ingest: load hosted Git repositories as text documents."""
    log_level = "DEBUG" if verbose else "INFO"
    configure_logging(log_level=log_level)


@cli.command()
@click.argument("url")
@click.option("--branch", "-b", default=None, help="Branch to clone (default: settings)")
@click.option("--recursive/--no-recursive", default=True, help="Descend into subdirectories")
@click.option(
    "--unknown",
    "-u",
    type=click.Choice([h.value for h in UnknownHandling]),
    default=UnknownHandling.WARN.value,
    help="How to handle unreadable files and directories",
)
@click.option("--ignore", "-i", multiple=True, help="Exact repo-relative path to skip")
@click.option(
    "--ignore-pattern",
    "-p",
    multiple=True,
    callback=_compile_patterns,
    help="Regular expression; matching paths are skipped",
)
@click.option("--ignore-glob", "-g", multiple=True, help="Glob; matching paths are skipped")
@click.option("--token", default=None, help="Access token (default: GITHUB_ACCESS_TOKEN)")
@click.option("--hidden", is_flag=True, help="Include dot-prefixed files and directories")
@click.option("--json", "as_json", is_flag=True, help="Print documents as JSON")
def load(
    url: str,
    branch: str | None,
    recursive: bool,
    unknown: str,
    ignore: tuple[str, ...],
    ignore_pattern: list[re.Pattern],
    ignore_glob: tuple[str, ...],
    token: str | None,
    hidden: bool,
    as_json: bool,
) -> None:
    """Load a hosted repository and list its documents.

    Clones the branch, walks the tree from the URL's subpath and prints
    one line per loaded file, or the full documents with --json.
    """
    from repo_ingest.services.loading import LoadingService

    ignore_files = [
        *ignore,
        *(PatternRule(pattern) for pattern in ignore_pattern),
        *(GlobRule(glob) for glob in ignore_glob),
    ]

    async def _load():
        service = LoadingService()
        return await service.load_repository(
            url,
            branch=branch,
            recursive=recursive,
            unknown=UnknownHandling(unknown),
            ignore_files=ignore_files,
            access_token=token,
            include_hidden=hidden,
        )

    try:
        documents = run_async(_load())
    except RepoIngestError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([doc.model_dump() for doc in documents], indent=2))
        return

    click.echo(f"Loaded {len(documents)} documents")
    for doc in documents:
        click.echo(f"  - {doc.source} ({len(doc.content)} chars)")


if __name__ == "__main__":
    cli()
