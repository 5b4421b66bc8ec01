"""Fetch labelled issues for every category of a configuration."""

import logging
from collections.abc import Sequence

from ..config import DEFAULT_CHUNK_SIZE, RepoURLError, ScoutConfig, parse_repo_url
from .client import GitHubAPIError, GitHubClient
from .models import ChunkFailure, FetchResult, GitHubIssue, SkippedRepository
from .search import (
    build_repositories_query,
    chunk_repositories,
    repository_key,
    rewrite_issue_urls,
    sort_issues,
)

logger = logging.getLogger(__name__)

CacheKey = tuple[str, tuple[str, ...]]


class IssueFetcher:
    """Searches GitHub for open labelled issues, one chunk of repositories at a time.

    A fetcher is meant to live for a single run. Issues fetched for a
    repository are cached per label set, so a repository listed in several
    categories is only queried once.
    """

    def __init__(
        self,
        client: GitHubClient,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        use_cache: bool = True,
    ):
        """Initialize fetcher.

        Args:
            client: GitHubClient used for all searches
            chunk_size: Maximum number of repositories per search query
            use_cache: Serve repositories fetched earlier in the run from memory
        """
        if chunk_size < 1:
            raise ValueError(f"Chunk size must be at least 1, got {chunk_size}")

        self.client = client
        self.chunk_size = chunk_size
        self.use_cache = use_cache
        self._cache: dict[CacheKey, list[GitHubIssue]] = {}

    def _cache_key(self, repository: str, labels: Sequence[str]) -> CacheKey:
        return repository.lower(), tuple(sorted(labels))

    def _check_cache(
        self, repositories: Sequence[str], labels: Sequence[str]
    ) -> tuple[list[GitHubIssue], list[str]]:
        """Split repositories into cached issues and repositories still to fetch."""
        cached: list[GitHubIssue] = []
        to_fetch: list[str] = []

        for repo in repositories:
            key = self._cache_key(repo, labels)
            if self.use_cache and key in self._cache:
                logger.info("Cache hit for %s", repo)
                cached.extend(self._cache[key])
            else:
                to_fetch.append(repo)

        return cached, to_fetch

    def _store(
        self,
        repositories: Sequence[str],
        labels: Sequence[str],
        issues: Sequence[GitHubIssue],
    ) -> None:
        # Seed every queried repository so ones without matches are cached too.
        for repo in repositories:
            self._cache.setdefault(self._cache_key(repo, labels), [])

        for issue in issues:
            key = self._cache_key(repository_key(issue), labels)
            self._cache.setdefault(key, []).append(issue)

    def clear_cache(self) -> None:
        self._cache.clear()

    def fetch_chunk(
        self, repositories: Sequence[str], labels: Sequence[str]
    ) -> list[GitHubIssue]:
        """Fetch open issues for one batch of repositories.

        Args:
            repositories: Repositories as "owner/name" strings
            labels: Label names to search for

        Returns:
            Issues with github.com URLs, sorted by repository then most
            recently updated

        Raises:
            GitHubAPIError: If the search fails on any page
        """
        issues, to_fetch = self._check_cache(repositories, labels)

        if not to_fetch:
            logger.info("All issues are fetched from cache!")
            return sort_issues(issues)

        query = build_repositories_query(to_fetch, labels)
        fetched = [
            rewrite_issue_urls(issue) for issue in self.client.search_issues(query)
        ]

        if self.use_cache:
            self._store(to_fetch, labels, fetched)

        return sort_issues(issues + fetched)

    def _parse_repositories(
        self, category: str, urls: Sequence[str], result: FetchResult
    ) -> list[str]:
        repositories: list[str] = []
        for url in urls:
            try:
                owner, name = parse_repo_url(url)
            except RepoURLError as e:
                logger.warning("Failed to parse repository URL: %s", e)
                result.skipped.append(
                    SkippedRepository(category=category, url=url, reason=str(e))
                )
                continue
            repositories.append(f"{owner}/{name}")

        return list(dict.fromkeys(repositories))

    def fetch_category(
        self,
        category: str,
        urls: Sequence[str],
        labels: Sequence[str],
        result: FetchResult,
    ) -> list[GitHubIssue]:
        """Fetch all issues for one category, recording problems in ``result``."""
        repositories = self._parse_repositories(category, urls, result)

        issues: list[GitHubIssue] = []
        for chunk in chunk_repositories(repositories, self.chunk_size):
            try:
                issues.extend(self.fetch_chunk(chunk, labels))
            except GitHubAPIError as e:
                logger.error("Failed to fetch issues for chunk in %s: %s", category, e)
                result.failures.append(
                    ChunkFailure(category=category, repositories=chunk, error=str(e))
                )

        return sort_issues(issues)

    def fetch_all(self, config: ScoutConfig) -> FetchResult:
        """Fetch issues for every category of the configuration.

        Categories are processed in sorted order. Malformed repository URLs
        and failed searches do not abort the run; they are listed in the
        returned FetchResult and the affected issues are left out.
        """
        result = FetchResult()

        for category in sorted(config.repositories):
            logger.info(">> Fetching issues for %s <<", category)
            result.issues[category] = self.fetch_category(
                category, config.repositories[category], config.labels, result
            )
            logger.info(
                "Fetched %d issues for %s", len(result.issues[category]), category
            )

        return result
