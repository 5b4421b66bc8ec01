"""Test configuration and fixtures."""

import logging
from collections.abc import Callable, Generator
from datetime import datetime, timezone
from pathlib import Path

import pytest

from issue_scout.github_client.models import GitHubIssue, GitHubLabel, GitHubUser
from issue_scout.utils.log_setup import HANDLER_NAME

BASE_TIME = datetime(2025, 3, 9, 10, 0, 0, tzinfo=timezone.utc)


def make_issue(
    number: int,
    repo: str = "owner/repo",
    updated_at: datetime = BASE_TIME,
    title: str | None = None,
    labels: list[str] | None = None,
    assignee: str | None = None,
    comments: int = 0,
    api_urls: bool = True,
) -> GitHubIssue:
    """Build an issue as returned by the search API (or already rewritten)."""
    host = "https://api.github.com/repos" if api_urls else "https://github.com"
    return GitHubIssue(
        number=number,
        title=title or f"Issue {number}",
        body=f"Body of issue {number}",
        url=f"{host}/{repo}/issues/{number}",
        html_url=f"https://github.com/{repo}/issues/{number}",
        repository_url=f"{host}/{repo}",
        labels=[GitHubLabel(name=name, color="ff0000") for name in labels or []],
        assignee=GitHubUser(login=assignee) if assignee else None,
        comments=comments,
        updated_at=updated_at,
    )


@pytest.fixture
def issue_factory() -> Callable[..., GitHubIssue]:
    """Provide the issue factory to tests."""
    return make_issue


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write YAML content to a config file inside tmp_path."""

    def _write(content: str) -> Path:
        config_file = tmp_path / "config.yml"
        config_file.write_text(content, encoding="utf-8")
        return config_file

    return _write


@pytest.fixture(autouse=True)
def reset_cli_logging() -> Generator[None]:
    """Drop the handler installed by CLI runs so it never outlives its stream."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
