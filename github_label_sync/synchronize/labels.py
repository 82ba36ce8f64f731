"""Contains synchronization logic for GitHub labels."""

from typing import Sequence

import structlog

from github_label_sync.schemas.labels import LabelModel
from github_label_sync.synchronize.matcher import LabelMatcher
from github_label_sync.synchronize.models import SyncDecision
from github_label_sync.synchronize.plan import SyncPlan

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def decide_github_label_sync_action(desired_label: LabelModel, matching_labels: Sequence[LabelModel]) -> SyncDecision:
    """Decide whether a desired label must be created or an existing label updated.

    Existing labels are always updated when they match, even if nothing differs.
    """
    if not matching_labels:
        logger.info("Label not found in GitHub", label_name=desired_label.name)
        return SyncDecision.CREATE

    if len(matching_labels) > 1:
        logger.info(
            "Several existing labels match, only the first one will be updated",
            label_name=desired_label.name,
            matching_label_names=[label.name for label in matching_labels],
        )
    logger.info("Label needs to be updated", current_label_name=matching_labels[0].name, new_label_name=desired_label.name)
    return SyncDecision.UPDATE


def build_sync_plan(
    owner: str,
    repository: str,
    desired_labels: Sequence[LabelModel],
    existing_labels: Sequence[LabelModel],
    matcher: LabelMatcher,
) -> SyncPlan:
    """Build the plan that brings the existing labels of owner/repository to the desired labels."""
    plan = SyncPlan(owner, repository)
    for desired_label in desired_labels:
        matching_labels = matcher.find_matches(desired_label, existing_labels)
        decision = decide_github_label_sync_action(desired_label, matching_labels)
        if decision == SyncDecision.UPDATE:
            existing_label = matching_labels[0]
            if existing_label.name in plan.labels_to_update:
                logger.warning(
                    "Existing label already targeted by another desired label, the previous update is replaced",
                    owner=owner,
                    repository=repository,
                    existing_label_name=existing_label.name,
                    previous_label_name=plan.labels_to_update[existing_label.name].name,
                    new_label_name=desired_label.name,
                )
            plan.add_label_to_update(existing_label, desired_label)
        else:
            plan.add_label_to_create(desired_label)

    logger.info(
        "Built label sync plan",
        owner=owner,
        repository=repository,
        labels_to_create=len(plan.labels_to_create),
        labels_to_update=len(plan.labels_to_update),
    )
    return plan
