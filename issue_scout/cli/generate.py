"""CLI command for generating the issue report."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ..config import ConfigError, ScoutConfig, load_config
from ..github_client.client import GitHubClient
from ..github_client.fetcher import IssueFetcher
from ..github_client.models import FetchResult
from ..github_client.search import build_labels_clause
from ..report.markdown import generate_markdown
from ..storage.manager import ReportWriteError, ReportWriter
from .options import (
    CHUNK_SIZE_OPTION,
    CONFIG_OPTION,
    FAIL_ON_FETCH_ERROR_OPTION,
    NO_CACHE_OPTION,
    TOKEN_OPTION,
)

console = Console()
logger = logging.getLogger(__name__)


def load_config_or_exit(config_file: Path | None) -> ScoutConfig:
    """Load the configuration, exiting with status 1 when that is impossible."""
    if config_file is None:
        logger.error("No config file specified")
        console.print(
            "❌ Error: No config file specified. "
            "Use --config or set INPUT_CONFIG_FILE / CONFIG_FILE."
        )
        raise typer.Exit(1)

    try:
        return load_config(config_file)
    except ConfigError as e:
        logger.error("Failed to load config: %s", e)
        console.print(f"❌ Error: Failed to load config: {e}")
        raise typer.Exit(1)


def print_fetch_problems(result: FetchResult) -> None:
    """Show skipped repositories and failed searches."""
    if result.ok:
        return

    problems_table = Table(title="Fetch Warnings")
    problems_table.add_column("Category", style="cyan")
    problems_table.add_column("Target", style="magenta")
    problems_table.add_column("Problem", style="red")

    for skipped in result.skipped:
        problems_table.add_row(skipped.category, skipped.url, skipped.reason)
    for failure in result.failures:
        problems_table.add_row(
            failure.category, ", ".join(failure.repositories), failure.error
        )

    console.print(problems_table)


def generate(
    config_file: Path | None = CONFIG_OPTION,
    token: str | None = TOKEN_OPTION,
    no_cache: bool = NO_CACHE_OPTION,
    chunk_size: int | None = CHUNK_SIZE_OPTION,
    fail_on_fetch_error: bool = FAIL_ON_FETCH_ERROR_OPTION,
) -> None:
    """Fetch labelled issues and write the Markdown report.

    Writes one file per category to <destination>/issues/ and an index to
    <destination>/README.md, replacing the previous report.

    Examples:
        issue-scout generate --config issue-scout.yml
        CONFIG_FILE=issue-scout.yml issue-scout generate --no-cache
    """
    config = load_config_or_exit(config_file)

    params_table = Table(title="Report Parameters")
    params_table.add_column("Parameter", style="cyan")
    params_table.add_column("Value", style="green")
    params_table.add_row("Categories", str(len(config.repositories)))
    params_table.add_row("Labels", build_labels_clause(config.labels) or "Any")
    params_table.add_row("Destination", config.destination)
    params_table.add_row("Cache", "off" if no_cache else "on")
    console.print(params_table)

    client = GitHubClient(token=token, per_page=config.per_page)
    fetcher = IssueFetcher(
        client,
        chunk_size=chunk_size or config.chunk_size,
        use_cache=not no_cache,
    )

    console.print("🔎 Searching for issues...")
    result = fetcher.fetch_all(config)
    print_fetch_problems(result)

    files = generate_markdown(config, result.issues)
    try:
        saved_paths = ReportWriter(config.destination).save(files)
    except ReportWriteError as e:
        logger.error("Failed to save Markdown files: %s", e)
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)

    results_table = Table(title="Report")
    results_table.add_column("Category", style="cyan")
    results_table.add_column("Issues", justify="right", style="yellow")
    for category, issues in result.issues.items():
        results_table.add_row(category, str(len(issues)))
    console.print(results_table)

    console.print(
        f"✨ Wrote {len(saved_paths)} files with {result.issue_count} issues "
        f"to {config.destination}"
    )

    if fail_on_fetch_error and result.failures:
        console.print(f"❌ {len(result.failures)} searches failed")
        raise typer.Exit(2)
