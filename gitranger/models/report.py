"""Run reports returned by sync, preview and status."""

from __future__ import annotations

from dataclasses import dataclass, field

from gitranger.models.repo import RepoTarget


@dataclass
class SyncReport:
    """Outcome of an executed sync run."""

    total_repos: int = 0
    repos_to_clone: int = 0
    repos_to_fetch: int = 0
    repos_cloned: int = 0
    repos_fetched: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def processed(self) -> int:
        """Targets that produced an outcome, successful or not."""
        return self.repos_cloned + self.repos_fetched + len(self.errors)


@dataclass
class PreviewReport:
    """What a sync run would do, computed without side effects."""

    to_clone: list[RepoTarget] = field(default_factory=list)
    to_fetch: list[RepoTarget] = field(default_factory=list)

    @property
    def total_repos(self) -> int:
        return len(self.to_clone) + len(self.to_fetch)

    @property
    def repos_to_clone(self) -> int:
        return len(self.to_clone)

    @property
    def repos_to_fetch(self) -> int:
        return len(self.to_fetch)

    @property
    def success(self) -> bool:
        return True


@dataclass
class StatusReport:
    """Clone state of every configured repository."""

    repos: list[RepoTarget] = field(default_factory=list)

    @property
    def total_repos(self) -> int:
        return len(self.repos)

    @property
    def repos_cloned(self) -> int:
        return sum(1 for r in self.repos if r.exists)

    @property
    def repos_not_cloned(self) -> int:
        return self.total_repos - self.repos_cloned
