"""git-ranger - keep a workspace of Git repositories in sync with a manifest."""

from gitranger.models.repo import RepoTarget
from gitranger.models.report import PreviewReport, StatusReport, SyncReport
from gitranger.ranger import GitRanger

__version__ = "0.1.0"
__all__ = ["GitRanger", "RepoTarget", "SyncReport", "PreviewReport", "StatusReport"]
