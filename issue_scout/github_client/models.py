"""Pydantic models for GitHub data structures and fetch results.

The issue models map to the fields of GitHub's REST API v3 issue search
results that the reports use.
API Reference: https://docs.github.com/en/rest/search/search#search-issues-and-pull-requests
"""

from datetime import datetime

from pydantic import BaseModel, Field


class GitHubUser(BaseModel):
    """GitHub user model, as embedded in issue search results.

    Only ``login`` is part of the search payload; ``name`` and ``email``
    require an extra request per user and are left unset by the client.
    """

    login: str = Field(..., description="GitHub username/login (string)")
    name: str | None = Field(None, description="Display name of the user")
    email: str | None = Field(None, description="Public email of the user")


class GitHubLabel(BaseModel):
    """GitHub label model representing repository labels.

    Maps to GitHub REST API Label object.
    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    name: str = Field(..., description="Name of the label (string)")
    color: str = Field(
        "", description="Hexadecimal color code without leading # (string)"
    )
    description: str | None = Field(
        None, description="Short description of the label (string, max 100 characters)"
    )


class GitHubIssue(BaseModel):
    """GitHub issue model representing a search result.

    ``url`` and ``repository_url`` hold API URLs as returned by GitHub until
    they are rewritten to their github.com equivalents by the fetcher.
    """

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str = Field(..., description="Short description/title of the issue (string)")
    body: str | None = Field(
        None, description="Detailed description of the issue in markdown (string)"
    )
    state: str = Field("open", description="Current state: 'open', 'closed' (string)")
    url: str = Field(..., description="URL of the issue")
    html_url: str | None = Field(None, description="Browser URL of the issue")
    repository_url: str = Field(..., description="URL of the issue's repository")
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Array of labels attached to the issue"
    )
    assignee: GitHubUser | None = Field(None, description="Assigned user, if any")
    comments: int = Field(0, description="Number of comments on the issue")
    created_at: datetime | None = Field(
        None, description="Timestamp of issue creation (ISO 8601)"
    )
    updated_at: datetime = Field(
        ..., description="Timestamp of last issue update (ISO 8601)"
    )


class ChunkFailure(BaseModel):
    """A search query that failed; its issues are missing from the result."""

    category: str = Field(..., description="Category the chunk belongs to")
    repositories: list[str] = Field(
        ..., description="owner/name of every repository in the failed query"
    )
    error: str = Field(..., description="Error message reported by the client")


class SkippedRepository(BaseModel):
    """A configured repository URL that could not be parsed."""

    category: str = Field(..., description="Category the URL was listed under")
    url: str = Field(..., description="The configured URL")
    reason: str = Field(..., description="Why the URL was rejected")


class FetchResult(BaseModel):
    """Outcome of fetching issues for a whole configuration.

    ``issues`` maps category names, in sorted order, to their sorted issues.
    Partial failures are listed rather than raised so that callers can still
    render whatever was fetched.
    """

    issues: dict[str, list[GitHubIssue]] = Field(default_factory=dict)
    failures: list[ChunkFailure] = Field(default_factory=list)
    skipped: list[SkippedRepository] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every repository was parsed and every query succeeded."""
        return not self.failures and not self.skipped

    @property
    def issue_count(self) -> int:
        return sum(len(issues) for issues in self.issues.values())
