"""Git command executor for cloning and fetching working copies."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitResult:
    """Outcome of a single git invocation."""

    success: bool
    returncode: int | None = None
    stderr: str = ""
    message: str = ""

    @property
    def detail(self) -> str:
        """Human-readable failure description."""
        stderr = self.stderr.strip()
        if self.message and stderr:
            return f"{self.message}: {stderr}"
        return self.message or stderr

    @classmethod
    def ok(cls) -> "GitResult":
        return cls(success=True, returncode=0)


class GitExecutor:
    """Runs ``git`` as an external process.

    Every call is synchronous, unbounded in time and attempted exactly once.
    """

    def __init__(self, git_binary: str = "git") -> None:
        self.git_binary = git_binary

    def clone(self, url: str, destination: Path) -> GitResult:
        """Clone ``url`` into ``destination``, creating parent directories."""
        destination = Path(destination)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return GitResult(success=False, message=f"cannot create {destination.parent}: {e}")

        return self._run([self.git_binary, "clone", url, str(destination)], "git clone failed")

    def fetch_all(self, path: Path) -> GitResult:
        """Fetch all remotes of an existing working copy."""
        return self._run(
            [self.git_binary, "-C", str(path), "fetch", "--all"], "git fetch failed"
        )

    def _run(self, cmd: list[str], failure_message: str) -> GitResult:
        """Run a command and classify the exit status."""
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, encoding="utf-8", errors="replace"
            )
        except OSError as e:
            return GitResult(success=False, message=f"failed to execute {cmd[0]}: {e}")

        if result.returncode != 0:
            return GitResult(
                success=False,
                returncode=result.returncode,
                stderr=result.stderr,
                message=failure_message,
            )
        return GitResult.ok()
