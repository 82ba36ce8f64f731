"""Reconcile GitHub authentication configuration."""

from pathlib import Path

from github_label_sync.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError
from github_label_sync.configuration.models import GitHubAuthenticationType


async def validate_github_authentication_configuration(
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
) -> GitHubAuthenticationType:
    """Validates the GitHub authentication configuration.

    Credentials are optional. Without any, requests are unauthenticated.

    Args:
        github_pat_token (str | None): The GitHub PAT token.
        github_app_id (int | None): The GitHub App ID.
        github_app_private_key_path (Path | None): The path to the GitHub App private key.
        github_app_installation_id (int | None): The GitHub App installation ID.

    Raises:
        GitHubAuthenticationConfigurationUndefinedError: If both PAT and App configurations are defined,
            or if the App configuration is incomplete.

    Returns:
        GitHubAuthenticationType: The type of GitHub authentication used.
    """
    app_settings_given = bool(github_app_id or github_app_private_key_path or github_app_installation_id)
    if github_pat_token and app_settings_given:
        raise GitHubAuthenticationConfigurationUndefinedError("Both PAT and GitHub App configurations are defined. Please use one or the other.")

    if github_pat_token:
        return GitHubAuthenticationType.PAT

    if github_app_id and github_app_private_key_path and github_app_installation_id:
        return GitHubAuthenticationType.APP

    if not app_settings_given:
        return GitHubAuthenticationType.UNAUTHENTICATED

    missing_settings: list[dict[str, str]] = []
    if not github_app_id:
        missing_settings.append({"name": "GitHub App ID", "cli_name": "--github-app-id", "env_name": "GITHUB_APP_ID"})
    if not github_app_private_key_path:
        missing_settings.append(
            {"name": "GitHub App private key path", "cli_name": "--github-app-private-key-path", "env_name": "GITHUB_APP_PRIVATE_KEY_PATH"}
        )
    if not github_app_installation_id:
        missing_settings.append(
            {"name": "GitHub App installation ID", "cli_name": "--github-app-installation-id", "env_name": "GITHUB_APP_INSTALLATION_ID"}
        )
    msg = "Incomplete GitHub App configuration - missing settings include " + ", ".join(
        f"{setting['name']} (command line option {setting['cli_name']}, environment variable {setting['env_name']})"
        for setting in missing_settings
    )
    raise GitHubAuthenticationConfigurationUndefinedError(msg)
