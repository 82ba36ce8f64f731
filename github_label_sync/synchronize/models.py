"""Models shared by the synchronization logic."""

from enum import Enum


class SyncDecision(str, Enum):
    """Decision taken for a desired label."""

    CREATE = "create"
    UPDATE = "update"
