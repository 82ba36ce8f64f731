"""Pydantic schema for desired labels and label synchronization configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LabelModel(BaseModel):
    """Pydantic model for a GitHub label."""

    model_config = ConfigDict(frozen=True)

    name: str
    color: str
    description: str | None = None

    @classmethod
    def from_github_label(cls, github_label: Any) -> "LabelModel":
        """Build a label from a githubkit label (or any object with name/color/description)."""
        return cls(
            name=github_label.name,
            color=github_label.color,
            description=getattr(github_label, "description", None),
        )


class LabelSyncConfigModel(BaseModel):
    """Pydantic model for the desired label set and the alias mappings."""

    model_config = ConfigDict(populate_by_name=True)

    desired_labels: list[LabelModel] = Field(alias="desiredLabels")
    mappings: dict[str, list[str]] = Field(default_factory=dict)
