"""Clone-or-fetch orchestration over a list of targets."""

from __future__ import annotations

import logging
from typing import Callable

from gitranger.git import GitExecutor, GitResult
from gitranger.models.repo import RepoTarget
from gitranger.models.report import PreviewReport, SyncReport

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[RepoTarget, str, GitResult], None]


class SyncOrchestrator:
    """Visits every target exactly once, in order.

    A failing target is recorded in the report and never stops the run.
    """

    def __init__(self, executor: GitExecutor | None = None) -> None:
        self.executor = executor or GitExecutor()

    @staticmethod
    def plan(targets: list[RepoTarget]) -> tuple[list[RepoTarget], list[RepoTarget]]:
        """Partition targets into (to_clone, to_fetch)."""
        to_clone = [t for t in targets if not t.exists]
        to_fetch = [t for t in targets if t.exists]
        return to_clone, to_fetch

    def preview(self, targets: list[RepoTarget]) -> PreviewReport:
        """Report intended actions without running git."""
        to_clone, to_fetch = self.plan(targets)
        logger.debug("Dry run: %d to clone, %d to fetch", len(to_clone), len(to_fetch))
        return PreviewReport(to_clone=to_clone, to_fetch=to_fetch)

    def execute(
        self,
        targets: list[RepoTarget],
        progress_callback: ProgressCallback | None = None,
    ) -> SyncReport:
        """Clone missing targets and fetch existing ones.

        Args:
            targets: Targets in processing order
            progress_callback: Optional callback(target, action, result) per target
        """
        to_clone, to_fetch = self.plan(targets)
        report = SyncReport(
            total_repos=len(targets),
            repos_to_clone=len(to_clone),
            repos_to_fetch=len(to_fetch),
        )

        for target in targets:
            action = target.action
            if target.exists:
                result = self.executor.fetch_all(target.local_path)
            else:
                result = self.executor.clone(target.url, target.local_path)

            if result.success:
                if target.exists:
                    report.repos_fetched += 1
                else:
                    report.repos_cloned += 1
                logger.debug("%s: %s ok", target.name, action)
            else:
                error = f"Failed to {action} {target.name}: {result.detail}"
                report.errors.append(error)
                logger.error(error)

            if progress_callback:
                progress_callback(target, action, result)

        return report
