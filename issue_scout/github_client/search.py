"""GitHub search query building and search result post-processing."""

from collections.abc import Iterable, Sequence

from ..config import parse_repo_url
from .models import GitHubIssue

API_URL_BASE = "api.github.com/repos"
URL_BASE = "github.com"


def build_labels_clause(labels: Iterable[str]) -> str:
    """Quote each label and join them with commas.

    Example:
        >>> build_labels_clause(["good first issue", "help wanted"])
        '"good first issue","help wanted"'
    """
    return ",".join(f'"{label}"' for label in labels)


def build_repositories_query(repositories: Sequence[str], labels: Sequence[str]) -> str:
    """Build a search query for open issues across several repositories.

    Args:
        repositories: Repositories as "owner/name" strings
        labels: Label names; issues carrying any of them match

    Returns:
        GitHub search query string. The label qualifier is left out when no
        labels are given.

    Example:
        >>> build_repositories_query(["octo/a", "octo/b"], ["bug"])
        'repo:octo/a repo:octo/b is:open is:issue label:"bug"'
    """
    query_parts = [f"repo:{repo}" for repo in repositories]
    query_parts.extend(["is:open", "is:issue"])

    labels_clause = build_labels_clause(labels)
    if labels_clause:
        query_parts.append(f"label:{labels_clause}")

    return " ".join(query_parts)


def chunk_repositories(repositories: Sequence[str], size: int) -> list[list[str]]:
    """Split repositories into consecutive batches of at most ``size``.

    The Search API rejects queries that are too long, so large categories are
    searched one batch at a time.
    """
    if size < 1:
        raise ValueError(f"Chunk size must be at least 1, got {size}")
    return [list(repositories[i : i + size]) for i in range(0, len(repositories), size)]


def rewrite_api_url(url: str) -> str:
    """Point an API URL at the matching github.com page.

    Example:
        >>> rewrite_api_url("https://api.github.com/repos/o/r/issues/5")
        'https://github.com/o/r/issues/5'
    """
    return url.replace(API_URL_BASE, URL_BASE, 1)


def rewrite_issue_urls(issue: GitHubIssue) -> GitHubIssue:
    """Return a copy of the issue with its URLs rewritten to github.com."""
    return issue.model_copy(
        update={
            "url": rewrite_api_url(issue.url),
            "repository_url": rewrite_api_url(issue.repository_url),
        }
    )


def repository_key(issue: GitHubIssue) -> str:
    """Return "owner/name" for a rewritten issue."""
    owner, name = parse_repo_url(issue.repository_url)
    return f"{owner}/{name}"


def _repository_name(issue: GitHubIssue) -> str:
    return parse_repo_url(issue.url)[1]


def sort_issues(issues: Iterable[GitHubIssue]) -> list[GitHubIssue]:
    """Sort issues by repository name, most recently updated first within one.

    Reports group rows by repository, so this order must be stable across
    runs for identical input.
    """
    by_update = sorted(issues, key=lambda issue: issue.updated_at, reverse=True)
    return sorted(by_update, key=_repository_name)
