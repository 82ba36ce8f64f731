"""Shared constants used across the application."""

# GitHub API Settings
# -------------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub API URL. Override for GitHub Enterprise Server."""

USER_AGENT = "gh-label-sync"
"""User agent sent with every GitHub API request."""

DEFAULT_PER_PAGE = 100
"""Page size used when listing repository labels (GitHub's maximum)."""

# Label Matching Settings
# -----------------------

LABEL_PREFIX_SEPARATOR = ":"
"""Separator between a label's prefix and its name (e.g., 'type: bug')."""

# File Settings
# -------------

DEFAULT_CONFIG_PATH = "config.json"
"""Default path to the desired labels configuration file."""

PLAN_FILENAME_TEMPLATE = "{owner}_{repository}_plan.json"
"""File name of a dry-run plan. Use .format(owner=..., repository=...) to fill in."""
