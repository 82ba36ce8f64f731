"""Contains unit tests for the label matcher."""

from github_label_sync.schemas.labels import LabelModel
from github_label_sync.synchronize.candidates import (
    IdentityCandidateNamesGenerator,
    MappingsCandidateNamesGenerator,
    StripPrefixCandidateNamesGenerator,
)
from github_label_sync.synchronize.matcher import LabelNameMatcher

BUG = LabelModel(name="bug", color="d73a4a")
DEFECT = LabelModel(name="defect", color="ffffff")
FEATURE = LabelModel(name="feature", color="a2eeef")


def test_find_matches_exact_name() -> None:
    """Test that a label with the same name matches."""
    matcher = LabelNameMatcher(IdentityCandidateNamesGenerator())
    existing = [FEATURE, LabelModel(name="bug", color="ffffff")]
    assert matcher.find_matches(BUG, existing) == [LabelModel(name="bug", color="ffffff")]


def test_find_matches_no_match() -> None:
    """Test that no labels are returned when no name matches."""
    matcher = LabelNameMatcher(IdentityCandidateNamesGenerator())
    assert matcher.find_matches(BUG, [FEATURE, DEFECT]) == []
    assert matcher.find_matches(BUG, []) == []


def test_find_matches_follows_existing_label_order() -> None:
    """Test that matches come in the order of the existing labels, not of the candidate names."""
    matcher = LabelNameMatcher(MappingsCandidateNamesGenerator({"bug": ["defect", "issue: bug"]}))
    issue_bug = LabelModel(name="issue: bug", color="000000")
    existing = [issue_bug, FEATURE, DEFECT]
    assert matcher.find_matches(BUG, existing) == [issue_bug, DEFECT]


def test_find_matches_contains_every_label_named_by_a_candidate() -> None:
    """Test that every existing label whose name is a candidate name is returned."""
    generator = StripPrefixCandidateNamesGenerator()
    matcher = LabelNameMatcher(generator)
    desired = LabelModel(name="type:bug", color="d73a4a")
    existing = [LabelModel(name=name, color="ffffff") for name in ["type:bug", "bug", "type", "Bug"]]

    matches = matcher.find_matches(desired, existing)

    candidate_names = generator.generate_candidate_names(desired.name)
    assert [label.name for label in matches] == ["type:bug", "bug"]
    assert all(label in matches for label in existing if label.name in candidate_names)


def test_find_matches_is_case_sensitive() -> None:
    """Test that names are compared exactly."""
    matcher = LabelNameMatcher(IdentityCandidateNamesGenerator())
    assert matcher.find_matches(BUG, [LabelModel(name="Bug", color="d73a4a")]) == []
