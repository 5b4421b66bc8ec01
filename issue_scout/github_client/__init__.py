"""GitHub client package for API interaction."""

from .client import GitHubAPIError, GitHubClient
from .fetcher import IssueFetcher
from .models import (
    ChunkFailure,
    FetchResult,
    GitHubIssue,
    GitHubLabel,
    GitHubUser,
    SkippedRepository,
)
from .search import build_repositories_query, rewrite_api_url, sort_issues

__all__ = [
    "GitHubAPIError",
    "GitHubClient",
    "IssueFetcher",
    "ChunkFailure",
    "FetchResult",
    "GitHubIssue",
    "GitHubLabel",
    "GitHubUser",
    "SkippedRepository",
    "build_repositories_query",
    "rewrite_api_url",
    "sort_issues",
]
