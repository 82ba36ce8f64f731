"""Unit tests for the LabelConfigProcessor class."""

from pathlib import Path

import pytest
from _pytest.logging import LogCaptureFixture

from github_label_sync.processing.config_loader import LabelConfigProcessor
from github_label_sync.processing.exceptions import LabelConfigProcessingError
from github_label_sync.schemas.labels import LabelModel, LabelSyncConfigModel

VALID_JSON = """
{
  "desiredLabels": [
    {"name": "bug", "color": "d73a4a", "description": "Something isn't working"},
    {"name": "enhancement", "color": "a2eeef"}
  ],
  "mappings": {"bug": ["defect", "issue:bug"]}
}
"""

VALID_YAML = """
desired_labels:
  - name: bug
    color: d73a4a
mappings:
  bug: [defect]
"""

JSON_WITHOUT_MAPPINGS = """
{"desiredLabels": [{"name": "bug", "color": "d73a4a"}]}
"""

JSON_MISSING_DESIRED_LABELS = """
{"labels": [{"name": "bug", "color": "d73a4a"}]}
"""

JSON_EXTRA_FIELDS = """
{"desiredLabels": [{"name": "bug", "color": "d73a4a", "default": true}]}
"""

JSON_INVALID_LABELS = """
{"desiredLabels": [{"name": "bug", "color": "d73a4a"}, 12345, {"name": "question"}]}
"""

JSON_DUPLICATE_LABELS = """
{"desiredLabels": [{"name": "bug", "color": "d73a4a"}, {"name": "bug", "color": "ffffff"}]}
"""

JSON_INVALID_MAPPINGS = """
{"desiredLabels": [{"name": "bug", "color": "d73a4a"}], "mappings": {"bug": "defect"}}
"""


def write_config(tmp_path: Path, content: str, name: str = "config.json") -> Path:
    """Write a configuration file and return its path."""
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_load_valid_json(tmp_path: Path) -> None:
    """Test loading desired labels and mappings from JSON."""
    config = LabelConfigProcessor().load_config_model(write_config(tmp_path, VALID_JSON))

    assert isinstance(config, LabelSyncConfigModel)
    assert config.desired_labels == [
        LabelModel(name="bug", color="d73a4a", description="Something isn't working"),
        LabelModel(name="enhancement", color="a2eeef", description=None),
    ]
    assert config.mappings == {"bug": ["defect", "issue:bug"]}


def test_load_valid_yaml(tmp_path: Path) -> None:
    """Test that YAML configuration with snake_case keys is accepted too."""
    config = LabelConfigProcessor().load_config_model(write_config(tmp_path, VALID_YAML, "config.yaml"))

    assert config.desired_labels == [LabelModel(name="bug", color="d73a4a")]
    assert config.mappings == {"bug": ["defect"]}


def test_mappings_are_optional(tmp_path: Path) -> None:
    """Test that a configuration without mappings has no aliases."""
    config = LabelConfigProcessor().load_config_model(write_config(tmp_path, JSON_WITHOUT_MAPPINGS))

    assert config.mappings == {}


def test_missing_desired_labels_raises(tmp_path: Path) -> None:
    """Test that a missing 'desiredLabels' key is an error."""
    with pytest.raises(LabelConfigProcessingError) as exc_info:
        LabelConfigProcessor().load_config_model(write_config(tmp_path, JSON_MISSING_DESIRED_LABELS))

    assert exc_info.value.errors[0]["error"] == "Missing top-level 'desiredLabels' key"


def test_missing_file_raises(tmp_path: Path) -> None:
    """Test that a missing file is reported as an error."""
    with pytest.raises(LabelConfigProcessingError) as exc_info:
        LabelConfigProcessor().load_config_model(tmp_path / "missing.json")

    assert exc_info.value.errors[0]["file"] == str(tmp_path / "missing.json")


def test_malformed_file_raises(tmp_path: Path) -> None:
    """Test that a file that cannot be parsed is reported as an error."""
    with pytest.raises(LabelConfigProcessingError):
        LabelConfigProcessor().load_config_model(write_config(tmp_path, '{"desiredLabels": [}'))


def test_not_a_dictionary_raises(tmp_path: Path) -> None:
    """Test that a top-level list is reported as an error."""
    with pytest.raises(LabelConfigProcessingError) as exc_info:
        LabelConfigProcessor().load_config_model(write_config(tmp_path, '[{"name": "bug"}]'))

    assert exc_info.value.errors[0]["error"] == "Label configuration file is not a dictionary"


def test_extra_fields_are_ignored(tmp_path: Path, caplog: LogCaptureFixture) -> None:
    """Test that unknown label fields are dropped with a warning."""
    with caplog.at_level("WARNING"):
        config = LabelConfigProcessor().load_config_model(write_config(tmp_path, JSON_EXTRA_FIELDS))

    assert config.desired_labels == [LabelModel(name="bug", color="d73a4a")]
    assert "Extra fields in label will be ignored" in caplog.text


def test_invalid_labels_collect_every_error(tmp_path: Path) -> None:
    """Test that every invalid label is reported, not only the first one."""
    with pytest.raises(LabelConfigProcessingError) as exc_info:
        LabelConfigProcessor().load_config_model(write_config(tmp_path, JSON_INVALID_LABELS))

    assert [error["label_index"] for error in exc_info.value.errors] == [1, 2]


def test_invalid_labels_without_raising(tmp_path: Path) -> None:
    """Test that the valid labels are kept when errors do not raise."""
    config = LabelConfigProcessor(raise_on_error=False).load_config_model(write_config(tmp_path, JSON_INVALID_LABELS))

    assert config.desired_labels == [LabelModel(name="bug", color="d73a4a")]


def test_duplicate_label_names_raise(tmp_path: Path) -> None:
    """Test that a desired label name may only appear once."""
    with pytest.raises(LabelConfigProcessingError) as exc_info:
        LabelConfigProcessor().load_config_model(write_config(tmp_path, JSON_DUPLICATE_LABELS))

    assert "Duplicate desired label name 'bug'" in exc_info.value.errors[0]["error"]


def test_invalid_mappings_raise(tmp_path: Path) -> None:
    """Test that aliases must be a list of strings."""
    with pytest.raises(LabelConfigProcessingError) as exc_info:
        LabelConfigProcessor().load_config_model(write_config(tmp_path, JSON_INVALID_MAPPINGS))

    assert exc_info.value.errors[0]["mapping"] == "bug"


def test_config_model_accepts_alias_and_field_name() -> None:
    """Test that the configuration model accepts both key styles."""
    by_alias = LabelSyncConfigModel.model_validate({"desiredLabels": [{"name": "bug", "color": "d73a4a"}]})
    by_name = LabelSyncConfigModel.model_validate({"desired_labels": [{"name": "bug", "color": "d73a4a"}]})

    assert by_alias == by_name
    assert by_alias.mappings == {}
