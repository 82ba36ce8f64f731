"""Contains the per-repository label synchronization plan."""

from types import MappingProxyType
from typing import Any, Mapping

from github_label_sync.schemas.labels import LabelModel


class SyncPlan:
    """Records the labels to create and the labels to update for one repository.

    The plan does no validation. Updates are keyed by the current name of the
    existing label, so a second update for the same existing label replaces
    the first one.
    """

    def __init__(self, owner: str, repository: str) -> None:
        """Initialize an empty plan for owner/repository."""
        self.owner = owner
        self.repository = repository
        self._labels_to_create: list[LabelModel] = []
        self._labels_to_update: dict[str, LabelModel] = {}

    def add_label_to_create(self, label: LabelModel) -> None:
        """Record a label that does not exist yet."""
        self._labels_to_create.append(label.model_copy())

    def add_label_to_update(self, existing_label: LabelModel, update: LabelModel) -> None:
        """Record that existing_label should be changed to match update."""
        self._labels_to_update[existing_label.name] = update

    @property
    def labels_to_create(self) -> tuple[LabelModel, ...]:
        """Labels to create, in the order they were added."""
        return tuple(self._labels_to_create)

    @property
    def labels_to_update(self) -> Mapping[str, LabelModel]:
        """Existing label name -> desired label, in the order they were added."""
        return MappingProxyType(self._labels_to_update)

    @property
    def is_empty(self) -> bool:
        """Whether the plan has nothing to create or update."""
        return not self._labels_to_create and not self._labels_to_update

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the plan."""
        return {
            "owner": self.owner,
            "repository": self.repository,
            "labelsToCreate": [label.model_dump(mode="json") for label in self._labels_to_create],
            "labelsToUpdate": {name: label.model_dump(mode="json") for name, label in self._labels_to_update.items()},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SyncPlan":
        """Rebuild a plan from the output of to_dict."""
        plan = cls(data["owner"], data["repository"])
        for label_data in data.get("labelsToCreate", []):
            plan.add_label_to_create(LabelModel.model_validate(label_data))
        for existing_name, label_data in data.get("labelsToUpdate", {}).items():
            plan._labels_to_update[existing_name] = LabelModel.model_validate(label_data)
        return plan

    def __repr__(self) -> str:
        return (
            f"SyncPlan(owner={self.owner!r}, repository={self.repository!r}, "
            f"create={len(self._labels_to_create)}, update={len(self._labels_to_update)})"
        )
