"""Matches a desired label against the labels that already exist in a repository."""

from abc import ABC, abstractmethod
from typing import Sequence

from github_label_sync.schemas.labels import LabelModel
from github_label_sync.synchronize.candidates import CandidateNamesGenerator


class LabelMatcher(ABC):
    """Base ABC for label matchers."""

    @abstractmethod
    def find_matches(self, label_to_match: LabelModel, labels: Sequence[LabelModel]) -> list[LabelModel]:
        """Return every label in labels that matches label_to_match."""
        pass


class LabelNameMatcher(LabelMatcher):
    """Matches labels by name using a candidate names generator."""

    def __init__(self, generator: CandidateNamesGenerator) -> None:
        """Initialize the matcher with the candidate names generator to use."""
        self.generator = generator

    def find_matches(self, label_to_match: LabelModel, labels: Sequence[LabelModel]) -> list[LabelModel]:
        """Return the labels whose name is a candidate name, in the order of labels."""
        candidate_names = set(self.generator.generate_candidate_names(label_to_match.name))
        return [label for label in labels if label.name in candidate_names]
