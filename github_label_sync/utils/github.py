"""Contains utility functions for GitHub interactions."""

from github_label_sync.utils.exceptions import MalformedRepositoryIdentifierError


def split_repository(repo: str | None) -> tuple[str, str]:
    """Splits an 'owner/repo' identifier into owner and repository.

    Both segments must be non-empty. A leading or trailing slash leaves an
    empty segment and is rejected.
    """
    if not repo:
        raise MalformedRepositoryIdentifierError(repo, "repository identifier is empty")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise MalformedRepositoryIdentifierError(repo, "expected the format 'owner/repo'")
    owner, repository = parts
    return owner, repository
