"""Models for the resolved application configuration."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class GitHubAuthenticationType(str, Enum):
    """Enum for GitHub authentication types."""

    PAT = "pat"
    APP = "app"
    UNAUTHENTICATED = "unauthenticated"


class MatchStrategy(str, Enum):
    """Enum for the ways desired labels are matched with existing labels."""

    MAPPINGS = "mappings"
    IDENTITY = "identity"
    STRIP_PREFIX = "strip-prefix"
    ALL = "all"


@dataclass
class SyncLabelsConfig:
    """Configuration class for the sync command."""

    repos: list[str]
    config_path: Path
    dry_run: bool
    output_dir: Path
    github_api_url: str
    github_authentication_type: GitHubAuthenticationType
    match_strategy: MatchStrategy = MatchStrategy.MAPPINGS
    github_pat_token: str | None = field(default=None, repr=False)
    github_app_id: int | None = None
    github_app_private_key_path: Path | None = None
    github_app_installation_id: int | None = None
