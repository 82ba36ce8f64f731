"""Orchestrates the synchronization of GitHub labels across repositories."""

import asyncio
import functools
import time
from typing import Awaitable, Callable, Mapping, Sequence

import structlog

from github_label_sync.configuration.models import MatchStrategy, SyncLabelsConfig
from github_label_sync.github.abc import GitHubClientBase
from github_label_sync.github.adapter import GitHubKitAdapter
from github_label_sync.processing.config_loader import LabelConfigProcessor
from github_label_sync.schemas.labels import LabelModel
from github_label_sync.synchronize.actions import ApplySyncPlanAction, DumpSyncPlanAction, SyncPlanAction
from github_label_sync.synchronize.candidates import (
    CandidateNamesGenerator,
    ChainedCandidateNamesGenerator,
    IdentityCandidateNamesGenerator,
    MappingsCandidateNamesGenerator,
    StripPrefixCandidateNamesGenerator,
)
from github_label_sync.synchronize.labels import build_sync_plan
from github_label_sync.synchronize.matcher import LabelMatcher, LabelNameMatcher
from github_label_sync.synchronize.results import AllRepositorySyncResults, RepositorySyncResult
from github_label_sync.utils.github import split_repository

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

GitHubAdapterFactory = Callable[[str], Awaitable[GitHubClientBase]]


def build_label_matcher(match_strategy: MatchStrategy, mappings: Mapping[str, Sequence[str]]) -> LabelMatcher:
    """Build the label matcher for the requested match strategy."""
    generator: CandidateNamesGenerator
    if match_strategy == MatchStrategy.IDENTITY:
        generator = IdentityCandidateNamesGenerator()
    elif match_strategy == MatchStrategy.STRIP_PREFIX:
        generator = StripPrefixCandidateNamesGenerator()
    elif match_strategy == MatchStrategy.ALL:
        generator = ChainedCandidateNamesGenerator(MappingsCandidateNamesGenerator(mappings), StripPrefixCandidateNamesGenerator())
    else:
        generator = MappingsCandidateNamesGenerator(mappings)
    return LabelNameMatcher(generator)


async def retrieve_existing_labels(github_adapter: GitHubClientBase) -> list[LabelModel]:
    """Fetch every label of the adapter's repository."""
    github_labels = await github_adapter.list_labels()
    return [LabelModel.from_github_label(github_label) for github_label in github_labels]


async def sync_repository_labels(
    repo: str,
    desired_labels: Sequence[LabelModel],
    matcher: LabelMatcher,
    github_adapter_factory: GitHubAdapterFactory,
    action: SyncPlanAction,
) -> RepositorySyncResult:
    """Retrieve the labels of one repository, build its plan and run the action on it.

    Raises whatever the first failing step raises.
    """
    # Malformed identifiers must fail before any client is created.
    owner, repository = split_repository(repo)
    github_adapter = await github_adapter_factory(repo)

    start_time = time.time()
    existing_labels = await retrieve_existing_labels(github_adapter)
    logger.info(
        "Fetched existing labels from GitHub",
        owner=owner,
        repository=repository,
        existing_label_count=len(existing_labels),
        duration=round(time.time() - start_time, 2),
    )

    plan = build_sync_plan(owner, repository, desired_labels, existing_labels, matcher)
    action_result = await action.apply(plan, github_adapter)
    logger.info("Processed repository", owner=owner, repository=repository, action=type(action).__name__)
    return RepositorySyncResult(repo, plan=plan, action_result=action_result)


async def sync_repositories_labels(
    repos: Sequence[str],
    desired_labels: Sequence[LabelModel],
    matcher: LabelMatcher,
    github_adapter_factory: GitHubAdapterFactory,
    action: SyncPlanAction,
) -> AllRepositorySyncResults:
    """Synchronize the labels of every repository concurrently.

    A failing repository does not stop the others. Its error is kept in its result.
    """
    start_time = time.time()
    outcomes = await asyncio.gather(
        *(sync_repository_labels(repo, desired_labels, matcher, github_adapter_factory, action) for repo in repos),
        return_exceptions=True,
    )

    results: list[RepositorySyncResult] = []
    for repo, outcome in zip(repos, outcomes, strict=True):
        if isinstance(outcome, BaseException):
            logger.error("Failed to synchronize repository labels", repo=repo, error=str(outcome), error_type=type(outcome).__name__)
            results.append(RepositorySyncResult(repo, error=outcome))
        else:
            results.append(outcome)

    all_results = AllRepositorySyncResults(results)
    logger.info(
        "Processed repositories",
        repository_count=len(repos),
        failed_repository_count=len(all_results.failed),
        duration=round(time.time() - start_time, 2),
    )
    return all_results


async def run_sync_labels_workflow(config: SyncLabelsConfig) -> AllRepositorySyncResults:
    """Run the sync workflow: load the configuration, then synchronize every repository.

    Raises LabelConfigProcessingError if the label configuration is invalid.
    """
    label_config = LabelConfigProcessor().load_config_model(config.config_path)
    matcher = build_label_matcher(config.match_strategy, label_config.mappings)

    action: SyncPlanAction
    if config.dry_run:
        logger.info("Dry-run enabled, plans will be written instead of applied", output_dir=str(config.output_dir))
        action = DumpSyncPlanAction(config.output_dir)
    else:
        action = ApplySyncPlanAction()

    github_adapter_factory = functools.partial(
        GitHubKitAdapter.create,
        github_auth_type=config.github_authentication_type,
        github_pat_token=config.github_pat_token,
        github_app_id=config.github_app_id,
        github_app_private_key_path=config.github_app_private_key_path,
        github_app_installation_id=config.github_app_installation_id,
        github_api_url=config.github_api_url,
    )
    return await sync_repositories_labels(config.repos, label_config.desired_labels, matcher, github_adapter_factory, action)
