"""Strategies that produce the existing label names equivalent to a desired label name."""

from abc import ABC, abstractmethod
from typing import Mapping, Sequence

from github_label_sync.utils.constants import LABEL_PREFIX_SEPARATOR


class CandidateNamesGenerator(ABC):
    """Base ABC for candidate name generators.

    Every generator returns the input name as the first element. Duplicates
    are allowed since consumers only check membership.
    """

    @abstractmethod
    def generate_candidate_names(self, label_name: str) -> list[str]:
        """Generate the label names that should be treated as the same label."""
        pass


class IdentityCandidateNamesGenerator(CandidateNamesGenerator):
    """Only the label name itself is a candidate."""

    def generate_candidate_names(self, label_name: str) -> list[str]:
        """Return the label name alone."""
        return [label_name]


class StripPrefixCandidateNamesGenerator(CandidateNamesGenerator):
    """Matches "type: bug" against an existing label named " bug".

    Everything after the first separator is a candidate. The remainder is not
    trimmed, so the leading space in "type: bug" is kept.
    """

    def __init__(self, separator: str = LABEL_PREFIX_SEPARATOR) -> None:
        """Initialize the generator with the prefix separator."""
        self.separator = separator

    def generate_candidate_names(self, label_name: str) -> list[str]:
        """Return the label name and, if prefixed, its suffix."""
        _, separator, suffix = label_name.partition(self.separator)
        if separator:
            return [label_name, suffix]
        return [label_name]


class MappingsCandidateNamesGenerator(CandidateNamesGenerator):
    """Uses the alias mappings from configuration."""

    def __init__(self, mappings: Mapping[str, Sequence[str]]) -> None:
        """Initialize the generator with a canonical name -> aliases mapping."""
        self.mappings = {name: tuple(aliases) for name, aliases in mappings.items()}

    def generate_candidate_names(self, label_name: str) -> list[str]:
        """Return the label name followed by its configured aliases."""
        aliases = self.mappings.get(label_name)
        if aliases:
            return [label_name, *aliases]
        return [label_name]


class ChainedCandidateNamesGenerator(CandidateNamesGenerator):
    """Combines the candidates of several generators, in order, without duplicates."""

    def __init__(self, *generators: CandidateNamesGenerator) -> None:
        """Initialize the generator with the generators to chain."""
        self.generators = generators

    def generate_candidate_names(self, label_name: str) -> list[str]:
        """Return the label name followed by every chained generator's candidates."""
        candidate_names: list[str] = [label_name]
        for generator in self.generators:
            for candidate_name in generator.generate_candidate_names(label_name):
                if candidate_name not in candidate_names:
                    candidate_names.append(candidate_name)
        return candidate_names
