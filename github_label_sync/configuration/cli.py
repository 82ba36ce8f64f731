"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from github_label_sync.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError
from github_label_sync.configuration.models import MatchStrategy, SyncLabelsConfig
from github_label_sync.configuration.reconcile import validate_github_authentication_configuration
from github_label_sync.processing.exceptions import LabelConfigProcessingError
from github_label_sync.synchronize.actions import load_sync_plan
from github_label_sync.synchronize.driver import run_sync_labels_workflow
from github_label_sync.utils.constants import DEFAULT_CONFIG_PATH, DEFAULT_GITHUB_API_URL
from github_label_sync.utils.logging import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


@typer_app.command(name="sync")
def sync_labels_cli(
    repos: Annotated[list[str], Argument(help="Repositories to synchronize (owner/repo).")],
    config_path: Annotated[Path, Option("--config", "-c", envvar="LABEL_SYNC_CONFIG", help="Path to the desired labels configuration.")] = Path(
        DEFAULT_CONFIG_PATH
    ),
    dry_run: Annotated[
        bool,
        Option("--dry-run", envvar="DRY_RUN", help="Write a JSON file per repository describing the actions that would have been taken."),
    ] = False,
    output_dir: Annotated[Path, Option(envvar="OUTPUT_DIR", help="Directory dry-run plan files are written to.")] = Path("."),
    match_strategy: Annotated[
        MatchStrategy, Option(envvar="MATCH_STRATEGY", case_sensitive=False, help="How desired labels are matched with existing labels.")
    ] = MatchStrategy.MAPPINGS,
    github_api_url: Annotated[str, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = DEFAULT_GITHUB_API_URL,
    github_pat_token: Annotated[
        str | None, Option("--token", "-t", envvar=["GITHUB_PAT_TOKEN", "GITHUB_TOKEN"], help="GitHub token used for authentication.")
    ] = None,
    github_app_id: Annotated[int | None, Option(envvar="GITHUB_APP_ID", help="GitHub App ID.")] = None,
    github_app_private_key_path: Annotated[Path | None, Option(envvar="GITHUB_APP_PRIVATE_KEY_PATH", help="Path to GitHub App private key.")] = None,
    github_app_installation_id: Annotated[int | None, Option(envvar="GITHUB_APP_INSTALLATION_ID", help="GitHub App Installation ID.")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Ensure the desired labels exist, with the right name and color, in every repository."""
    configure_logging(debug)

    try:
        github_auth_type = asyncio.run(
            validate_github_authentication_configuration(
                github_pat_token=github_pat_token,
                github_app_id=github_app_id,
                github_app_private_key_path=github_app_private_key_path,
                github_app_installation_id=github_app_installation_id,
            )
        )
    except GitHubAuthenticationConfigurationUndefinedError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1) from e

    if not config_path.exists():
        typer.echo(f"Label configuration file not found: {config_path.absolute()}", err=True)
        raise typer.Exit(1)

    config = SyncLabelsConfig(
        repos=repos,
        config_path=config_path,
        dry_run=dry_run,
        output_dir=output_dir,
        github_api_url=github_api_url,
        github_authentication_type=github_auth_type,
        match_strategy=match_strategy,
        github_pat_token=github_pat_token,
        github_app_id=github_app_id,
        github_app_private_key_path=github_app_private_key_path,
        github_app_installation_id=github_app_installation_id,
    )

    try:
        results = asyncio.run(run_sync_labels_workflow(config))
    except LabelConfigProcessingError as e:
        typer.echo("Error(s) encountered while loading the label configuration:", err=True)
        for err in e.errors:
            typer.echo(str(err), err=True)
        sys.exit(1)

    if not results.succeeded:
        for result in results.failed:
            typer.echo(f"{result.repo}: {result.error}", err=True)
        sys.exit(1)

    if dry_run:
        for result in results.results:
            if result.action_result is not None and result.action_result.plan_path is not None:
                typer.echo(f"Wrote plan for {result.repo} to {result.action_result.plan_path}")
    typer.echo("All good! Done!")


@typer_app.command(name="show-plan")
def show_plan_cli(
    plan_path: Annotated[Path, Argument(help="Path to a plan file written by 'sync --dry-run'.")],
) -> None:
    """Print a human-readable summary of a dry-run plan file."""
    if not plan_path.exists():
        typer.echo(f"Plan file not found: {plan_path.absolute()}", err=True)
        raise typer.Exit(1)

    plan = load_sync_plan(plan_path)
    typer.echo(f"Repository: {plan.owner}/{plan.repository}")
    if plan.is_empty:
        typer.echo("Nothing to do")
        return

    typer.echo(f"Labels to update ({len(plan.labels_to_update)}):")
    for existing_name, label in plan.labels_to_update.items():
        typer.echo(f"  {existing_name} -> {label.name} (#{label.color}) {label.description or ''}".rstrip())
    typer.echo(f"Labels to create ({len(plan.labels_to_create)}):")
    for label in plan.labels_to_create:
        typer.echo(f"  {label.name} (#{label.color}) {label.description or ''}".rstrip())


if __name__ == "__main__":
    typer_app()
