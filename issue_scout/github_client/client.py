"""GitHub API client using PyGitHub."""

import logging
import os

import requests
from github import Auth, Github
from github.GithubException import GithubException, UnknownObjectException
from github.Issue import Issue
from github.Label import Label
from github.NamedUser import NamedUser

from .models import GitHubIssue, GitHubLabel, GitHubUser

logger = logging.getLogger(__name__)

# The Search API never returns more than this many results for one query.
MAX_SEARCH_RESULTS = 1000


class GitHubAPIError(RuntimeError):
    """Raised when a GitHub API request fails."""


class GitHubClient:
    """GitHub API client with optional token authentication."""

    def __init__(self, token: str | None = None, per_page: int = 100):
        """Initialize GitHub client.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var. Without a token the client is
                unauthenticated and subject to stricter rate limits.
            per_page: Number of results requested per page
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        self.per_page = per_page

        if self.token:
            self.github = Github(
                auth=Auth.Token(self.token), per_page=per_page, retry=None
            )
            logger.info("GitHub client is initialized with given credentials")
        else:
            self.github = Github(per_page=per_page, retry=None)
            logger.warning(
                "GITHUB_TOKEN is not set, initialize GitHub client without credentials"
            )

    def _convert_user(self, github_user: NamedUser) -> GitHubUser:
        """Convert PyGitHub user to our model."""
        return GitHubUser(login=github_user.login)

    def _convert_label(self, github_label: Label) -> GitHubLabel:
        """Convert PyGitHub label to our model."""
        return GitHubLabel(
            name=github_label.name,
            color=github_label.color or "",
            description=github_label.description,
        )

    def _convert_issue(self, github_issue: Issue) -> GitHubIssue:
        """Convert PyGitHub issue to our model.

        Only attributes contained in the search payload are read, so the
        conversion never triggers additional API requests.
        """
        # https://api.github.com/repos/<owner>/<name>/issues/<number>
        repository_url = "/".join(github_issue.url.split("/")[:-2])

        # The first entry of assignees is the primary assignee.
        assignee = None
        if github_issue.assignees:
            assignee = self._convert_user(github_issue.assignees[0])

        return GitHubIssue(
            number=github_issue.number,
            title=github_issue.title,
            body=github_issue.body,
            state=github_issue.state,
            url=github_issue.url,
            html_url=github_issue.html_url,
            repository_url=repository_url,
            labels=[self._convert_label(label) for label in github_issue.labels],
            assignee=assignee,
            comments=github_issue.comments,
            created_at=github_issue.created_at,
            updated_at=github_issue.updated_at,
        )

    def search_issues(self, query: str) -> list[GitHubIssue]:
        """Run an issue search and collect every page of results.

        Args:
            query: GitHub search query string

        Returns:
            List of GitHubIssue objects from all pages, in API order

        Raises:
            GitHubAPIError: If any page request fails. Pages fetched before
                the failure are discarded.
        """
        logger.info("Query: %s", query)

        issues: list[GitHubIssue] = []
        try:
            results = self.github.search_issues(query)
            page = 0
            while True:
                logger.info("Fetching page %d ...", page + 1)
                batch = results.get_page(page)
                issues.extend(self._convert_issue(issue) for issue in batch)

                if len(batch) < self.per_page or len(issues) >= MAX_SEARCH_RESULTS:
                    break
                page += 1
        except (GithubException, requests.RequestException) as e:
            raise GitHubAPIError(f"Failed to fetch issues: {e}") from e

        return issues

    def list_labels(self, owner: str, repo: str) -> list[GitHubLabel]:
        """List every label defined in a repository.

        Raises:
            GitHubAPIError: If the repository is missing or a request fails
        """
        try:
            repository = self.github.get_repo(f"{owner}/{repo}")
            return [self._convert_label(label) for label in repository.get_labels()]
        except UnknownObjectException as e:
            raise GitHubAPIError(f"Repository {owner}/{repo} not found") from e
        except (GithubException, requests.RequestException) as e:
            raise GitHubAPIError(
                f"Failed to fetch labels for {owner}/{repo}: {e}"
            ) from e
