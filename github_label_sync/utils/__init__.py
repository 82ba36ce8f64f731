"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_GITHUB_API_URL,
    LABEL_PREFIX_SEPARATOR,
    PLAN_FILENAME_TEMPLATE,
)
from .retry import retry_on_rate_limit

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_GITHUB_API_URL",
    "LABEL_PREFIX_SEPARATOR",
    "PLAN_FILENAME_TEMPLATE",
    "retry_on_rate_limit",
]
