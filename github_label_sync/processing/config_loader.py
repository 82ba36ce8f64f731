"""Handles reading the desired labels and alias mappings configuration.

The configuration is a JSON document (YAML is accepted too, since it is parsed
with ruamel.yaml) with a top-level 'desiredLabels' list and an optional
'mappings' object. Every problem found is collected so they can all be
reported at once. All logging is performed using structlog.
"""

from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError
from ruamel.yaml import YAML
from structlog.stdlib import BoundLogger

from github_label_sync.processing.exceptions import LabelConfigProcessingError
from github_label_sync.schemas.labels import LabelModel, LabelSyncConfigModel

logger: BoundLogger = structlog.get_logger(__name__)  # type: ignore

yaml = YAML(typ="safe")

DESIRED_LABELS_KEYS = ("desiredLabels", "desired_labels")


class LabelConfigProcessor:
    """Loads and validates the label synchronization configuration from a file."""

    def __init__(self, raise_on_error: bool = True) -> None:
        """Initialize LabelConfigProcessor.

        Args:
            raise_on_error (bool): Whether to raise a LabelConfigProcessingError on errors.
        """
        self.raise_on_error = raise_on_error

    def load_config_model(self, config_path: Path | str) -> LabelSyncConfigModel:
        """Load and validate the desired labels and mappings, returning a LabelSyncConfigModel."""
        path = str(config_path)
        errors: list[dict[str, Any]] = []
        desired_labels: list[LabelModel] = []
        mappings: dict[str, list[str]] = {}

        data = self._load_file(path, errors)
        if data is not None:
            desired_labels = self._extract_desired_labels(data, path, errors)
            mappings = self._extract_mappings(data, path, errors)

        if errors:
            logger.error("One or more errors occurred while loading the label configuration", errors=errors)
            if self.raise_on_error:
                raise LabelConfigProcessingError(errors)

        logger.info("Loaded label configuration", path=path, desired_label_count=len(desired_labels), mapping_count=len(mappings))
        return LabelSyncConfigModel(desired_labels=desired_labels, mappings=mappings)

    def _load_file(self, path: str, errors: list[dict[str, Any]]) -> dict[str, Any] | None:
        try:
            with open(path, encoding="utf-8") as f:
                data: dict[str, Any] = yaml.load(f)  # type: ignore
        except Exception as e:
            logger.error("Failed to parse label configuration file", path=path, error=str(e))
            errors.append({"file": path, "error": str(e)})
            return None
        if not isinstance(data, dict):
            logger.error("Label configuration file is not a dictionary", path=path)
            errors.append({"file": path, "error": "Label configuration file is not a dictionary"})
            return None
        return data

    def _extract_desired_labels(self, data: dict[str, Any], path: str, errors: list[dict[str, Any]]) -> list[LabelModel]:
        raw_labels = next((data[key] for key in DESIRED_LABELS_KEYS if key in data), None)
        if raw_labels is None:
            logger.error("Label configuration file missing top-level 'desiredLabels' key", path=path)
            errors.append({"file": path, "error": "Missing top-level 'desiredLabels' key"})
            return []
        if not isinstance(raw_labels, list):
            errors.append({"file": path, "error": "'desiredLabels' must be a list"})
            return []

        desired_labels: list[LabelModel] = []
        seen_names: set[str] = set()
        for idx, label_dict in enumerate(raw_labels):
            if not isinstance(label_dict, dict):
                logger.warning(
                    "Label entry is not a dict and will be skipped",
                    file=path,
                    label_index=idx,
                    actual_type=type(label_dict).__name__,
                )
                errors.append({"file": path, "label_index": idx, "error": "Label entry is not a dict"})
                continue
            extra_fields = set(label_dict.keys()) - set(LabelModel.model_fields.keys())
            if extra_fields:
                logger.warning("Extra fields in label will be ignored", file=path, label_index=idx, extra_fields=sorted(extra_fields))
            filtered = {k: v for k, v in label_dict.items() if k in LabelModel.model_fields}
            try:
                label = LabelModel(**filtered)
            except ValidationError as ve:
                logger.error("Validation error for label", file=path, label_index=idx, error=ve.errors())
                errors.append({"file": path, "label_index": idx, "error": ve.errors()})
                continue
            if label.name in seen_names:
                logger.error("Duplicate desired label name", file=path, label_index=idx, label_name=label.name)
                errors.append({"file": path, "label_index": idx, "error": f"Duplicate desired label name '{label.name}'"})
                continue
            seen_names.add(label.name)
            desired_labels.append(label)
        return desired_labels

    def _extract_mappings(self, data: dict[str, Any], path: str, errors: list[dict[str, Any]]) -> dict[str, list[str]]:
        raw_mappings = data.get("mappings") or {}
        if not isinstance(raw_mappings, dict):
            logger.error("Label configuration 'mappings' is not a dictionary", path=path)
            errors.append({"file": path, "error": "'mappings' must be a dictionary"})
            return {}

        mappings: dict[str, list[str]] = {}
        for name, aliases in raw_mappings.items():
            if not isinstance(aliases, list) or not all(isinstance(alias, str) for alias in aliases):
                errors.append({"file": path, "mapping": name, "error": "Aliases must be a list of strings"})
                continue
            mappings[str(name)] = list(aliases)
        return mappings
