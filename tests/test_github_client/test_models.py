"""Tests for GitHub client models."""

from collections.abc import Callable
from datetime import datetime

import pytest
from pydantic import ValidationError

from issue_scout.github_client.models import (
    ChunkFailure,
    FetchResult,
    GitHubIssue,
    GitHubLabel,
    GitHubUser,
    SkippedRepository,
)


class TestGitHubLabel:
    """Test GitHubLabel model."""

    def test_valid_label(self) -> None:
        """Test creating a valid label."""
        label = GitHubLabel(name="bug", color="ff0000", description="Bug reports")
        assert label.name == "bug"
        assert label.color == "ff0000"
        assert label.description == "Bug reports"

    def test_missing_name(self) -> None:
        """Test validation with missing name."""
        with pytest.raises(ValidationError):
            GitHubLabel(color="ff0000")  # type: ignore[call-arg]


class TestGitHubIssue:
    """Test GitHubIssue model."""

    def test_minimal_issue(self) -> None:
        """Test creating an issue with only required fields."""
        issue = GitHubIssue(
            number=1,
            title="Issue 1",
            url="https://api.github.com/repos/o/r/issues/1",
            repository_url="https://api.github.com/repos/o/r",
            updated_at=datetime(2024, 1, 1),
        )
        assert issue.labels == []
        assert issue.assignee is None
        assert issue.comments == 0
        assert issue.state == "open"

    def test_missing_updated_at(self) -> None:
        """Test that updated_at is required for sorting."""
        with pytest.raises(ValidationError):
            GitHubIssue(  # type: ignore[call-arg]
                number=1,
                title="Issue 1",
                url="https://api.github.com/repos/o/r/issues/1",
                repository_url="https://api.github.com/repos/o/r",
            )

    def test_assignee(self) -> None:
        """Test that the assignee is optional apart from login."""
        user = GitHubUser(login="user1")
        assert user.name is None
        assert user.email is None


class TestFetchResult:
    """Test FetchResult model."""

    def test_empty_result_is_ok(self) -> None:
        """Test that a fresh result reports success."""
        result = FetchResult()
        assert result.ok
        assert result.issue_count == 0

    def test_issue_count(self, issue_factory: Callable[..., GitHubIssue]) -> None:
        """Test counting issues across categories."""
        result = FetchResult(
            issues={
                "a": [issue_factory(1), issue_factory(2)],
                "b": [issue_factory(3)],
            }
        )
        assert result.issue_count == 3

    def test_failures_make_result_not_ok(self) -> None:
        """Test that recorded failures are visible."""
        result = FetchResult(
            failures=[ChunkFailure(category="a", repositories=["o/r"], error="boom")]
        )
        assert not result.ok

    def test_skipped_make_result_not_ok(self) -> None:
        """Test that skipped repositories are visible."""
        result = FetchResult(
            skipped=[SkippedRepository(category="a", url="bad", reason="invalid")]
        )
        assert not result.ok
