"""Main GitRanger class - unified interface over a workspace manifest."""

from __future__ import annotations

from pathlib import Path

from gitranger.git import GitExecutor
from gitranger.models.config import RangerConfig
from gitranger.models.repo import RepoTarget
from gitranger.models.report import PreviewReport, StatusReport, SyncReport
from gitranger.providers.gitlab import GitLabClient
from gitranger.sync import ProgressCallback, SyncOrchestrator
from gitranger.targets import ClientFactory, TargetBuilder, TargetSet


class GitRanger:
    """Workspace described by a ``ranger.yaml`` manifest."""

    def __init__(
        self,
        config_path: str | Path,
        *,
        client_factory: ClientFactory = GitLabClient,
        executor: GitExecutor | None = None,
    ) -> None:
        self.config_path = Path(config_path)
        self.client_factory = client_factory
        self.executor = executor or GitExecutor()

        self._config: RangerConfig | None = None

    @property
    def config(self) -> RangerConfig:
        if self._config is None:
            self._config = RangerConfig.from_yaml(self.config_path)
        return self._config

    @property
    def base_dir(self) -> Path:
        """Directory all relative paths in the manifest are resolved against."""
        return self.config_path.parent

    def build_targets(self, target: str | None = None) -> TargetSet:
        builder = TargetBuilder(self.config, self.base_dir, self.client_factory)
        return builder.build(target)

    def sync(
        self,
        target: str | None = None,
        dry_run: bool = False,
        progress_callback: ProgressCallback | None = None,
    ) -> tuple[TargetSet, SyncReport | PreviewReport]:
        """Clone missing repositories and fetch existing ones.

        Args:
            target: Only repos whose URL, or groups whose name, contain this
            dry_run: Report what would happen without running git
            progress_callback: Optional callback(target, action, result)

        Raises:
            ConfigNotFoundError, ConfigParseError: before any target is touched
        """
        target_set = self.build_targets(target)
        orchestrator = SyncOrchestrator(self.executor)

        if dry_run:
            return target_set, orchestrator.preview(target_set.targets)
        return target_set, orchestrator.execute(target_set.targets, progress_callback)

    def status(self, target: str | None = None) -> tuple[TargetSet, StatusReport]:
        target_set = self.build_targets(target)
        return target_set, StatusReport(repos=list(target_set.targets))

    def ls(self, target: str | None = None) -> tuple[TargetSet, list[RepoTarget]]:
        target_set = self.build_targets(target)
        return target_set, list(target_set.targets)
