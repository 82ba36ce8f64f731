"""Unit tests for validate_github_authentication_configuration function."""

from pathlib import Path

import pytest

from github_label_sync.configuration.exceptions import (
    GitHubAuthenticationConfigurationUndefinedError,
)
from github_label_sync.configuration.models import GitHubAuthenticationType
from github_label_sync.configuration.reconcile import validate_github_authentication_configuration


@pytest.mark.asyncio
async def test_valid_pat_authentication() -> None:
    """Test that PAT authentication is validated correctly."""
    # When
    auth_type = await validate_github_authentication_configuration(
        github_pat_token="test-token",
        github_app_id=None,
        github_app_private_key_path=None,
        github_app_installation_id=None,
    )

    # Then
    assert auth_type == GitHubAuthenticationType.PAT


@pytest.mark.asyncio
async def test_valid_app_authentication() -> None:
    """Test that GitHub App authentication is validated correctly."""
    # When
    auth_type = await validate_github_authentication_configuration(
        github_pat_token=None,
        github_app_id=1234,
        github_app_private_key_path=Path("/path/to/key.pem"),
        github_app_installation_id=5678,
    )

    # Then
    assert auth_type == GitHubAuthenticationType.APP


@pytest.mark.asyncio
async def test_no_credentials_is_unauthenticated() -> None:
    """Test that missing credentials select unauthenticated access instead of failing."""
    # When
    auth_type = await validate_github_authentication_configuration(
        github_pat_token=None,
        github_app_id=None,
        github_app_private_key_path=None,
        github_app_installation_id=None,
    )

    # Then
    assert auth_type == GitHubAuthenticationType.UNAUTHENTICATED


@pytest.mark.asyncio
async def test_both_auth_methods_error() -> None:
    """Test that error is raised when both PAT and App authentication are provided."""
    # When/Then
    with pytest.raises(GitHubAuthenticationConfigurationUndefinedError) as exc_info:
        await validate_github_authentication_configuration(
            github_pat_token="test-token",
            github_app_id=1234,
            github_app_private_key_path=Path("/path/to/key.pem"),
            github_app_installation_id=5678,
        )

    assert "Both PAT and GitHub App configurations are defined" in str(exc_info.value)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "github_app_id, github_app_private_key_path, github_app_installation_id, missing",
    [
        pytest.param(None, Path("/path/to/key.pem"), 5678, "GitHub App ID", id="missing app id"),
        pytest.param(1234, None, 5678, "GitHub App private key path", id="missing private key path"),
        pytest.param(1234, Path("/path/to/key.pem"), None, "GitHub App installation ID", id="missing installation id"),
    ],
)
async def test_incomplete_app_configuration(
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
    missing: str,
) -> None:
    """Test that an incomplete GitHub App configuration names the missing setting."""
    # When/Then
    with pytest.raises(GitHubAuthenticationConfigurationUndefinedError) as exc_info:
        await validate_github_authentication_configuration(
            github_pat_token=None,
            github_app_id=github_app_id,
            github_app_private_key_path=github_app_private_key_path,
            github_app_installation_id=github_app_installation_id,
        )

    assert "Incomplete GitHub App configuration" in str(exc_info.value)
    assert missing in str(exc_info.value)
