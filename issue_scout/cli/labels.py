"""CLI command for listing the labels of configured repositories."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ..config import RepoURLError, parse_repo_url
from ..github_client.client import GitHubAPIError, GitHubClient
from .generate import load_config_or_exit
from .options import CONFIG_OPTION, TOKEN_OPTION

console = Console()


def labels(
    config_file: Path | None = CONFIG_OPTION,
    token: str | None = TOKEN_OPTION,
) -> None:
    """List the labels defined in every configured repository.

    Useful for choosing the label names to put in the config file.
    """
    config = load_config_or_exit(config_file)
    client = GitHubClient(token=token, per_page=config.per_page)

    for category in sorted(config.repositories):
        console.print(f"\n[bold]=== Category: {escape(category)} ===[/bold]")
        for url in config.repositories[category]:
            try:
                owner, repo = parse_repo_url(url)
            except RepoURLError as e:
                console.print(f"⚠️  Failed to parse repository URL {url}: {e}")
                continue

            console.print(f"\nRepository: {owner}/{repo}")
            try:
                repo_labels = client.list_labels(owner, repo)
            except GitHubAPIError as e:
                console.print(f"⚠️  {e}")
                continue

            console.print("Labels:")
            for label in repo_labels:
                console.print(f"  - {label.name}", markup=False)
