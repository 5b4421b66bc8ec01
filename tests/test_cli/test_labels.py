"""Tests for CLI labels command."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import Mock, patch

from typer.testing import CliRunner

from issue_scout.cli.main import app
from issue_scout.github_client.client import GitHubAPIError
from issue_scout.github_client.models import GitHubLabel


class TestLabelsCommand:
    """Test the labels CLI command."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.runner = CliRunner(env={"NO_COLOR": "1"})

    @patch("issue_scout.cli.labels.GitHubClient")
    def test_lists_labels(
        self, mock_client_class: Mock, write_config: Callable[[str], Path]
    ) -> None:
        """Test that labels are printed per category and repository."""
        mock_client = mock_client_class.return_value
        mock_client.list_labels.return_value = [
            GitHubLabel(name="good first issue", color="7057ff"),
            GitHubLabel(name="help wanted", color="008672"),
        ]
        config_file = write_config(
            """
repositories:
  team-b:
    - https://github.com/owner/second
  team-a:
    - https://github.com/owner/first
"""
        )

        result = self.runner.invoke(app, ["labels", "--config", str(config_file)])

        assert result.exit_code == 0, result.output
        assert result.output.index("team-a") < result.output.index("team-b")
        assert "Repository: owner/first" in result.output
        assert "- good first issue" in result.output
        assert "- help wanted" in result.output
        assert [c.args for c in mock_client.list_labels.call_args_list] == [
            ("owner", "first"),
            ("owner", "second"),
        ]

    @patch("issue_scout.cli.labels.GitHubClient")
    def test_skips_bad_entries(
        self, mock_client_class: Mock, write_config: Callable[[str], Path]
    ) -> None:
        """Test that malformed URLs and API errors do not stop the listing."""
        mock_client = mock_client_class.return_value
        mock_client.list_labels.side_effect = [
            GitHubAPIError("Repository owner/gone not found"),
            [GitHubLabel(name="bug", color="d73a4a")],
        ]
        config_file = write_config(
            """
repositories:
  cat:
    - https://github.com/owner
    - https://github.com/owner/gone
    - https://github.com/owner/live
"""
        )

        result = self.runner.invoke(app, ["labels", "--config", str(config_file)])

        assert result.exit_code == 0, result.output
        assert "Failed to parse repository URL" in result.output
        assert "Repository owner/gone not found" in result.output
        assert "- bug" in result.output

    def test_missing_config(self) -> None:
        """Test that the config path is required."""
        result = self.runner.invoke(
            app, ["labels"], env={"INPUT_CONFIG_FILE": None, "CONFIG_FILE": None}
        )

        assert result.exit_code == 1
        assert "No config file specified" in result.output
