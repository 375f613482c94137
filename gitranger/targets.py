"""Build the ordered list of sync targets from a manifest.

Standalone repositories come first, followed by projects discovered in GitLab
groups. Discovery for every group finishes before any git command runs.
Failures degrade instead of aborting: an unresolvable token skips all GitLab
groups, a failing group skips only that group.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from gitranger.errors import SecretResolutionError
from gitranger.models.config import GitLabGroupConfig, RangerConfig
from gitranger.models.repo import RepoTarget
from gitranger.paths import group_local_dir, group_subpath
from gitranger.providers.gitlab import GitLabClient, GitLabError, GitLabProject

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, str], GitLabClient]


@dataclass
class TargetSet:
    """Targets for one run plus the warnings raised while collecting them."""

    targets: list[RepoTarget] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)


def matches_filter(value: str, target_filter: str | None) -> bool:
    """Substring match; no filter matches everything."""
    return target_filter is None or target_filter in value


class TargetBuilder:
    """Merges manifest repos and discovered group projects."""

    def __init__(
        self,
        config: RangerConfig,
        base_dir: Path,
        client_factory: ClientFactory = GitLabClient,
    ) -> None:
        self.config = config
        self.base_dir = Path(base_dir)
        self.client_factory = client_factory

    def build(self, target_filter: str | None = None) -> TargetSet:
        result = TargetSet()

        for repo in self.config.repos:
            if matches_filter(repo.url, target_filter):
                result.targets.append(
                    RepoTarget.resolve(repo.url, self.base_dir, repo.local_dir)
                )

        groups = [g for g in self.config.gitlab_groups if matches_filter(g.name, target_filter)]
        if groups:
            self._expand_gitlab_groups(groups, result)

        return result

    def _expand_gitlab_groups(self, groups: list[GitLabGroupConfig], result: TargetSet) -> None:
        provider = self.config.providers.gitlab
        if provider is None:
            result.warn("No GitLab provider configured; skipping GitLab groups")
            return

        try:
            token = provider.resolve_token()
        except SecretResolutionError as e:
            result.warn(f"Failed to resolve GitLab token: {e}; skipping GitLab groups")
            return

        with self.client_factory(provider.host, token) as client:
            for group in groups:
                logger.info("Discovering repositories in GitLab group: %s", group.name)
                try:
                    projects = client.list_group_projects(group.name, group.recursive)
                except GitLabError as e:
                    result.warn(f"Failed to get projects for group '{group.name}': {e}")
                    continue

                logger.info("Found %d repositories in %s", len(projects), group.name)
                result.targets.extend(self._project_target(group, p) for p in projects)

    def _project_target(self, group: GitLabGroupConfig, project: GitLabProject) -> RepoTarget:
        subpath = group_subpath(group.name, project.path_with_namespace)
        return RepoTarget.resolve(
            project.clone_url(group.protocol),
            self.base_dir,
            group_local_dir(group.local_dir, subpath),
            source=group.name,
        )
