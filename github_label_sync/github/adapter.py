"""GitHub client adapter for the githubkit library."""

from functools import wraps
from pathlib import Path
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed
from githubkit.versions.latest.models import Label

from github_label_sync.configuration.models import GitHubAuthenticationType
from github_label_sync.utils.constants import DEFAULT_GITHUB_API_URL, DEFAULT_PER_PAGE
from github_label_sync.utils.github import split_repository
from github_label_sync.utils.retry import retry_on_rate_limit

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code != 422:
                raise
            try:
                error_data = exc.response.json()
            except ValueError:
                error_data = {}
            message = error_data.get("message", "Unprocessable Entity")
            errors = error_data.get("errors", [])
            url = getattr(exc.response, "url", None)
            logger.error(
                "GitHub 422 Unprocessable Entity",
                function=func.__name__,
                message=message,
                errors=errors,
                url=url,
                status_code=422,
            )
            raise ValueError(f"GitHub 422 error in {func.__name__}: {message} | errors: {errors} | url: {url}") from exc

    return wrapper  # type: ignore


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(
        cls,
        repo: str,
        github_auth_type: GitHubAuthenticationType,
        github_pat_token: str | None = None,
        github_app_id: int | None = None,
        github_app_private_key_path: Path | None = None,
        github_app_installation_id: int | None = None,
        github_api_url: str = DEFAULT_GITHUB_API_URL,
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            repo: Repository in 'owner/repo' format
            github_auth_type: Type of authentication (PAT, APP or none)
            github_pat_token: Personal access token (required for PAT auth)
            github_app_id: GitHub App ID (required for APP auth)
            github_app_private_key_path: Path to private key file (required for APP auth)
            github_app_installation_id: Installation ID (required for APP auth)
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance

        Raises:
            MalformedRepositoryIdentifierError: If repo is not in 'owner/repo' format
            RuntimeError: If required parameters for the chosen auth type are missing
        """
        owner, repo_name = split_repository(repo)
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_client(
            owner=owner,
            repository=repo_name,
            github_auth_type=github_auth_type,
            github_pat_token=github_pat_token,
            github_app_id=github_app_id,
            github_app_private_key_path=github_app_private_key_path,
            github_app_installation_id=github_app_installation_id,
            github_api_url=github_api_url,
        )
        return cls(client, owner, repo_name)

    # Label CRUD
    @handle_github_422
    @retry_on_rate_limit()
    async def create_label(self, name: str, color: str, description: str | None = None, **kwargs: Any) -> Label:
        """Create a label for a repository."""
        params = self._omit_null_parameters(
            name=name,
            color=color,
            description=description,
            **kwargs,
        )
        response: Response[Label] = await self.client.rest.issues.async_create_label(
            owner=self.owner,
            repo=self.repo_name,
            **params,
        )
        return response.parsed_data

    @handle_github_422
    @retry_on_rate_limit()
    async def update_label(
        self,
        name: str,
        new_name: str | None = None,
        color: str | None = None,
        description: str | None = None,
        **kwargs: Any,
    ) -> Label:
        """Update a label for a repository."""
        params = self._omit_null_parameters(
            new_name=new_name,
            color=color,
            description=description,
            **kwargs,
        )
        response: Response[Label] = await self.client.rest.issues.async_update_label(
            owner=self.owner,
            repo=self.repo_name,
            name=name,
            **params,
        )
        return response.parsed_data

    @retry_on_rate_limit()
    async def _list_labels_page(self, page: int, per_page: int, **kwargs: Any) -> list[Label]:
        """Fetch a single page of labels."""
        response: Response[list[Label]] = await self.client.rest.issues.async_list_labels_for_repo(
            owner=self.owner,
            repo=self.repo_name,
            per_page=per_page,
            page=page,
            **kwargs,
        )
        return response.parsed_data

    async def list_labels(self, per_page: int = DEFAULT_PER_PAGE, **kwargs: Any) -> list[Label]:
        """List all labels for a repository, handling pagination.

        A rate limited page is retried on its own, pages already fetched are kept.
        """
        all_labels: list[Label] = []
        page: int = 1
        while True:
            labels = await self._list_labels_page(page, per_page, **kwargs)
            if not labels:
                break
            all_labels.extend(labels)
            if len(labels) < per_page:
                break
            page += 1
        logger.debug("Listed labels", owner=self.owner, repo_name=self.repo_name, label_count=len(all_labels), pages=page)
        return all_labels
