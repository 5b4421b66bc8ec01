"""Render fetched issues as per-category Markdown files plus an index."""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field

from ..config import ScoutConfig, parse_repo_url
from ..github_client.models import GitHubIssue, GitHubLabel, GitHubUser

TABLE_HEADER = (
    "| Repository | Title | UpdatedAt | Labels | Assignee | Comments |\n"
    "| --- | --- | --- | --- | --- | --- |\n"
)


class MarkdownFile(BaseModel):
    """A rendered file and the path it is written to."""

    path: Path = Field(..., description="Destination path of the file")
    content: str = Field(..., description="Markdown content")


class IssueMetadata(BaseModel):
    """Machine-readable summary embedded as an HTML comment after the table."""

    title: str
    body: str
    labels: list[GitHubLabel]
    assignee: GitHubUser | None
    comments: int
    updated_at: str
    url: str


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def _issue_row(issue: GitHubIssue) -> str:
    owner, repo_name = parse_repo_url(issue.url)
    labels = ", ".join(label.name for label in issue.labels)
    assignee = f"@{issue.assignee.login}" if issue.assignee else ""

    return (
        f"| [{repo_name}](https://github.com/{owner}/{repo_name}) "
        f"| [{_escape_cell(issue.title)}]({issue.url}) "
        f"| {issue.updated_at.strftime('%Y-%m-%d')} "
        f"| {_escape_cell(labels)} "
        f"| {assignee} "
        f"| {issue.comments} |\n"
    )


def _issue_metadata(issue: GitHubIssue) -> str:
    metadata = IssueMetadata(
        title=issue.title,
        body=issue.body or "",
        labels=issue.labels,
        assignee=issue.assignee,
        comments=issue.comments,
        updated_at=issue.updated_at.isoformat(),
        url=issue.url,
    )
    payload = metadata.model_dump_json(
        indent=2, exclude={"assignee": {"name", "email"}}
    )
    return f"\n<!--\n{payload}\n-->\n"


def render_category(
    category: str, issues: list[GitHubIssue], include_metadata: bool = False
) -> str:
    """Render the Markdown table for one category."""
    parts = [f"# {category}\n\n", TABLE_HEADER]
    parts.extend(_issue_row(issue) for issue in issues)
    parts.append("\n")

    if include_metadata:
        parts.extend(_issue_metadata(issue) for issue in issues)

    return "".join(parts)


def render_index(
    description: str,
    issues: dict[str, list[GitHubIssue]],
    now: datetime | None = None,
) -> str:
    """Render the README index linking every category file."""
    now = now or datetime.now()
    parts = [
        "# Issue List\n\n",
        f"Last Updated: {now.strftime('%Y-%m-%d %H:%M:%S')}\n",
        f"\n{description}\n\n",
        "## Index\n\n",
    ]
    for category in sorted(issues):
        parts.append(
            f"- [{category} - {len(issues[category])} issues available]"
            f"(./issues/{category}.md)\n"
        )
    return "".join(parts)


def generate_markdown(
    config: ScoutConfig,
    issues: dict[str, list[GitHubIssue]],
    now: datetime | None = None,
) -> list[MarkdownFile]:
    """Render every category file followed by the README index.

    Args:
        config: Report configuration (destination, description, metadata flag)
        issues: Category name to sorted issues
        now: Timestamp shown in the index, defaults to the current time

    Returns:
        Category files in sorted category order, then README.md
    """
    base_path = Path(config.destination)

    files = [
        MarkdownFile(
            path=base_path / "issues" / f"{category}.md",
            content=render_category(
                category, issues[category], config.include_metadata
            ),
        )
        for category in sorted(issues)
    ]
    files.append(
        MarkdownFile(
            path=base_path / "README.md",
            content=render_index(config.description, issues, now),
        )
    )
    return files
