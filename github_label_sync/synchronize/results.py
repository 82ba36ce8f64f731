"""Contains results of application execution."""

from github_label_sync.synchronize.actions import SyncPlanActionResult
from github_label_sync.synchronize.plan import SyncPlan


class RepositorySyncResult:
    """Contains results of the label synchronization workflow for one repository."""

    def __init__(
        self,
        repo: str,
        plan: SyncPlan | None = None,
        action_result: SyncPlanActionResult | None = None,
        error: BaseException | None = None,
    ) -> None:
        """Initialize the result with the plan built, what the action did, or the error raised."""
        self.repo = repo
        self.plan = plan
        self.action_result = action_result
        self.error = error

    @property
    def succeeded(self) -> bool:
        """Whether the repository's pipeline finished without error."""
        return self.error is None


class AllRepositorySyncResults:
    """Contains results of the label synchronization workflow for all repositories."""

    def __init__(self, results: list[RepositorySyncResult]) -> None:
        """Initialize the result with one result per requested repository, in request order."""
        self.results = results

    @property
    def failed(self) -> list[RepositorySyncResult]:
        """Results of the repositories whose pipeline failed."""
        return [result for result in self.results if not result.succeeded]

    @property
    def succeeded(self) -> bool:
        """Whether every repository's pipeline finished without error."""
        return not self.failed
