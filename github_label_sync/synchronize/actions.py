"""Actions that consume a completed label sync plan.

A plan is either applied against GitHub or, in dry-run mode, written to a JSON
file. The action is chosen once per invocation and used for every repository.
"""

import asyncio
import json
import os
import tempfile
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Iterable

import structlog

from github_label_sync.github.abc import GitHubClientBase
from github_label_sync.synchronize.plan import SyncPlan
from github_label_sync.utils.constants import PLAN_FILENAME_TEMPLATE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


@dataclass
class SyncPlanActionResult:
    """Summary of what an action did with a plan."""

    owner: str
    repository: str
    updated_label_count: int = 0
    created_label_count: int = 0
    plan_path: Path | None = None


class SyncPlanAction(ABC):
    """Base ABC for actions run on a completed plan."""

    @abstractmethod
    async def apply(self, plan: SyncPlan, github_adapter: GitHubClientBase) -> SyncPlanActionResult:
        """Run the action on the plan for the adapter's repository."""
        pass


async def _settle_all(requests: Iterable[Awaitable[Any]]) -> list[Any]:
    """Wait for every request to finish, then raise the first failure if any failed."""
    results = await asyncio.gather(*requests, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results


class ApplySyncPlanAction(SyncPlanAction):
    """Applies a plan on GitHub: every update first, then every creation."""

    async def apply(self, plan: SyncPlan, github_adapter: GitHubClientBase) -> SyncPlanActionResult:
        """Issue the update requests concurrently, then the create requests concurrently.

        Fails if any request fails. Nothing is retried or rolled back.
        """
        logger.info(
            "Updating labels",
            owner=plan.owner,
            repository=plan.repository,
            labels_to_update=len(plan.labels_to_update),
        )
        await _settle_all(
            github_adapter.update_label(
                name=existing_name,
                new_name=label.name,
                color=label.color,
                description=label.description,
            )
            for existing_name, label in plan.labels_to_update.items()
        )

        logger.info(
            "Creating labels",
            owner=plan.owner,
            repository=plan.repository,
            labels_to_create=len(plan.labels_to_create),
        )
        await _settle_all(
            github_adapter.create_label(
                name=label.name,
                color=label.color,
                description=label.description,
            )
            for label in plan.labels_to_create
        )

        return SyncPlanActionResult(
            owner=plan.owner,
            repository=plan.repository,
            updated_label_count=len(plan.labels_to_update),
            created_label_count=len(plan.labels_to_create),
        )


class DumpSyncPlanAction(SyncPlanAction):
    """Writes a plan to '<owner>_<repository>_plan.json' instead of applying it."""

    def __init__(self, output_dir: Path | str = Path(".")) -> None:
        """Initialize the action with the directory the plan files are written to."""
        self.output_dir = Path(output_dir)

    def plan_path(self, plan: SyncPlan) -> Path:
        """Path of the file the plan is written to."""
        return self.output_dir / PLAN_FILENAME_TEMPLATE.format(owner=plan.owner, repository=plan.repository)

    async def apply(self, plan: SyncPlan, github_adapter: GitHubClientBase | None = None) -> SyncPlanActionResult:
        """Write the plan to its file. The adapter is not used."""
        path = self.plan_path(plan)
        await asyncio.to_thread(dump_sync_plan, plan, path)
        return SyncPlanActionResult(owner=plan.owner, repository=plan.repository, plan_path=path)


def dump_sync_plan(plan: SyncPlan, filepath: Path) -> None:
    """Write the plan as JSON to filepath.

    The plan is written to a temporary file in the same directory which then
    replaces filepath, so filepath never holds a partial plan.
    """
    temp_fd, temp_path = tempfile.mkstemp(dir=filepath.parent, prefix=f".{filepath.name}.", suffix=".tmp")
    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(plan.to_dict(), f, indent=2)
            f.write("\n")
        os.replace(temp_path, filepath)
    except BaseException:
        try:
            os.unlink(temp_path)
        except FileNotFoundError:
            pass
        logger.error("Failed to write label sync plan", filepath=str(filepath))
        raise
    logger.info("Wrote label sync plan", filepath=str(filepath), owner=plan.owner, repository=plan.repository)


def load_sync_plan(filepath: Path) -> SyncPlan:
    """Read a plan written by dump_sync_plan."""
    with open(filepath, encoding="utf-8") as f:
        return SyncPlan.from_dict(json.load(f))
