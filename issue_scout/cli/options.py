"""Standardized CLI option definitions shared by all commands."""

import typer

# Configuration options
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    envvar=["INPUT_CONFIG_FILE", "CONFIG_FILE"],
    help="Path to the YAML config file (or INPUT_CONFIG_FILE / CONFIG_FILE)",
)

# Authentication options
TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

# Fetch options
NO_CACHE_OPTION = typer.Option(
    False,
    "--no-cache",
    help="Query every repository even if it was already fetched in this run",
)

CHUNK_SIZE_OPTION = typer.Option(
    None,
    "--chunk-size",
    min=1,
    help="Repositories per search query (overrides chunk_size in the config)",
)

FAIL_ON_FETCH_ERROR_OPTION = typer.Option(
    False,
    "--fail-on-fetch-error",
    help="Exit with status 2 after writing the report if any search failed",
)

# Output options
VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Enable debug logging"
)
