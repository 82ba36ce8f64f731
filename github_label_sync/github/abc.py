"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients bound to a single repository."""

    owner: str
    repo_name: str

    # Label CRUD
    @abstractmethod
    async def create_label(self, name: str, color: str, description: str | None = None, **kwargs: Any) -> Any:
        """Create a label for a repository."""
        pass

    @abstractmethod
    async def update_label(
        self,
        name: str,
        new_name: str | None = None,
        color: str | None = None,
        description: str | None = None,
        **kwargs: Any,
    ) -> Any:
        """Update a label for a repository."""
        pass

    @abstractmethod
    async def list_labels(self, per_page: int = 100, **kwargs: Any) -> list[Any]:
        """List all labels for a repository."""
        pass
