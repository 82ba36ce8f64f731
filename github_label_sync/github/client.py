# This file is intended to hold the setup for the authenticated githubkit client.

"""Sets up the githubkit client, authenticated or not."""

from pathlib import Path
from typing import TypeAlias

from githubkit import GitHub
from githubkit.auth import (
    AppAuthStrategy,
    AppInstallationAuthStrategy,
    TokenAuthStrategy,
    UnauthAuthStrategy,
)
from githubkit.versions.latest.models import Installation

from github_label_sync.configuration.models import GitHubAuthenticationType
from github_label_sync.utils.constants import USER_AGENT

GitHubClient: TypeAlias = GitHub[AppInstallationAuthStrategy] | GitHub[TokenAuthStrategy] | GitHub[UnauthAuthStrategy]


async def get_github_app_client(
    owner: str,
    repository: str,
    github_app_id: int,
    github_app_private_key_path: Path,
    github_app_installation_id: int,
    github_api_url: str,
) -> GitHub[AppInstallationAuthStrategy]:
    """Returns a GitHub client authenticated as the App installation for owner/repository."""
    if not (github_app_id and github_app_private_key_path and github_app_installation_id):
        raise RuntimeError("GitHub App authentication requires app_id, private_key_path, and installation_id in config.")
    try:
        with open(github_app_private_key_path) as f:
            private_key = f.read()
        auth = AppAuthStrategy(
            app_id=github_app_id,
            private_key=private_key,
        )
        # Disable HTTP caching to always get fresh labels
        app_client = GitHub(auth=auth, base_url=github_api_url, user_agent=USER_AGENT, http_cache=False)

        resp = await app_client.rest.apps.async_get_repo_installation(
            owner=owner,
            repo=repository,
        )
        repo_installation: Installation = resp.parsed_data
        return app_client.with_auth(app_client.auth.as_installation(repo_installation.id))
    except Exception as e:
        raise ValueError(f"Failed to get GitHub App installation for {owner}/{repository}: {e}") from e


async def get_github_pat_client(github_pat_token: str, github_api_url: str) -> GitHub[TokenAuthStrategy]:
    """Returns an authenticated GitHub client using GitHub PAT credentials."""
    if not github_pat_token:
        raise RuntimeError("GitHub PAT authentication requires github_pat_token in config.")
    return GitHub(auth=TokenAuthStrategy(github_pat_token), base_url=github_api_url, user_agent=USER_AGENT, http_cache=False)


async def get_github_unauthenticated_client(github_api_url: str) -> GitHub[UnauthAuthStrategy]:
    """Returns a GitHub client without credentials (public repositories, low rate limit)."""
    return GitHub(auth=UnauthAuthStrategy(), base_url=github_api_url, user_agent=USER_AGENT, http_cache=False)


async def get_github_client(
    owner: str,
    repository: str,
    github_auth_type: GitHubAuthenticationType,
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
    github_api_url: str,
) -> GitHubClient:
    """Returns a GitHub client for the requested authentication type.

    Supports custom base URL for GitHub Enterprise Server (GHES).
    Raises RuntimeError if the credentials for the authentication type are missing.
    """
    if github_auth_type == GitHubAuthenticationType.APP:
        if not (github_app_id and github_app_private_key_path and github_app_installation_id):
            raise RuntimeError("GitHub App authentication requires app_id, private_key_path, and installation_id in config.")
        return await get_github_app_client(
            owner, repository, github_app_id, github_app_private_key_path, github_app_installation_id, github_api_url
        )
    elif github_auth_type == GitHubAuthenticationType.PAT:
        if not github_pat_token:
            raise RuntimeError("GitHub PAT authentication requires github_pat_token in config.")
        return await get_github_pat_client(github_pat_token, github_api_url)
    return await get_github_unauthenticated_client(github_api_url)
