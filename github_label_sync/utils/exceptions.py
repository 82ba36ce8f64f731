"""Exceptions shared across the application."""


class MalformedRepositoryIdentifierError(ValueError):
    """Raised when a repository identifier is not in 'owner/repo' format."""

    def __init__(self, repo: str | None, reason: str) -> None:
        """Initializes the exception with the offending identifier."""
        super().__init__(f"Malformed repository identifier {repo!r}: {reason}")
        self.repo = repo
