"""Data models for git-ranger."""

from gitranger.models.config import (
    CONFIG_FILENAME,
    GitLabGroupConfig,
    GitLabProviderConfig,
    GroupsConfig,
    ProvidersConfig,
    RangerConfig,
    RepoConfig,
)
from gitranger.models.repo import RepoTarget
from gitranger.models.report import PreviewReport, StatusReport, SyncReport
from gitranger.models.secret import resolve_secret

__all__ = [
    # Manifest
    "CONFIG_FILENAME",
    "RangerConfig",
    "ProvidersConfig",
    "GitLabProviderConfig",
    "GroupsConfig",
    "GitLabGroupConfig",
    "RepoConfig",
    "resolve_secret",
    # Targets and reports
    "RepoTarget",
    "SyncReport",
    "PreviewReport",
    "StatusReport",
]
