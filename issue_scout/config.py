"""Report configuration loading and repository URL parsing."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

GITHUB_URL_PREFIX = "https://github.com/"

DEFAULT_LABELS = ["good first issue"]
DEFAULT_DESCRIPTION = "This file is generated by issue-scout"
DEFAULT_CHUNK_SIZE = 50


class ConfigError(ValueError):
    """Raised when the configuration file cannot be read or validated."""


class RepoURLError(ValueError):
    """Raised when a repository URL does not name an owner and a repository."""


class ScoutConfig(BaseModel):
    """Configuration for a single report run.

    Maps category names to repository URLs plus the labels to search for and
    the options controlling how the report is rendered.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    repositories: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Category name to list of repository URLs",
    )
    labels: list[str] = Field(
        default_factory=lambda: list(DEFAULT_LABELS),
        description="Issues must carry one of these labels",
    )
    per_page: int = Field(
        100, ge=1, le=100, description="Search results requested per page"
    )
    destination: str = Field(".", description="Directory the report is written to")
    description: str = Field(
        DEFAULT_DESCRIPTION, description="Free text shown at the top of the index"
    )
    include_metadata: bool = Field(
        False, description="Embed a JSON comment block per issue in category files"
    )
    chunk_size: int = Field(
        DEFAULT_CHUNK_SIZE,
        ge=1,
        description="Maximum number of repositories combined in one search query",
    )

    @field_validator("repositories", mode="before")
    @classmethod
    def _repositories_default(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {k: [] if v is None else v for k, v in value.items()}
        return value

    @field_validator("repositories")
    @classmethod
    def _check_category_names(
        cls, value: dict[str, list[str]]
    ) -> dict[str, list[str]]:
        # Each category is written to issues/<category>.md.
        for category in value:
            if category in ("", ".", "..") or "/" in category or "\\" in category:
                raise ValueError(f"Invalid category name: {category!r}")
        return value

    @field_validator("labels", mode="before")
    @classmethod
    def _labels_default(cls, value: Any) -> Any:
        if value is None:
            return list(DEFAULT_LABELS)
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("labels")
    @classmethod
    def _dedupe_labels(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))


def load_config(path: str | Path) -> ScoutConfig:
    """Load and validate a YAML configuration file.

    Args:
        path: Path to the YAML file

    Returns:
        Validated ScoutConfig with defaults applied for absent keys

    Raises:
        ConfigError: If the file cannot be read, parsed or validated
    """
    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {config_path} must contain a mapping, "
            f"got {type(data).__name__}"
        )

    try:
        return ScoutConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e


def parse_repo_url(url: str) -> tuple[str, str]:
    """Extract owner and repository name from a GitHub URL.

    Anything after the repository name (``/issues/5``, ``/tree/main``) is
    ignored.

    Args:
        url: URL of the form https://github.com/<owner>/<name>[/...]

    Returns:
        Tuple of (owner, name)

    Raises:
        RepoURLError: If the URL is not a github.com URL with owner and name

    Example:
        >>> parse_repo_url("https://github.com/octo/hello/issues/5")
        ('octo', 'hello')
    """
    if not url.startswith(GITHUB_URL_PREFIX):
        raise RepoURLError(f"Invalid repository URL: {url}")

    parts = url[len(GITHUB_URL_PREFIX) :].split("/")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise RepoURLError(f"Invalid repository URL: {url}")

    return parts[0], parts[1]
