"""Repository target model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from gitranger.paths import derive_name, resolve_path

MANIFEST_SOURCE = "manifest"


class RepoTarget(BaseModel):
    """One repository slated for clone-or-fetch in a run."""

    url: str = Field(..., description="Clone URL, source of truth for naming")
    local_dir_override: str | None = Field(default=None, description="Directory hint from the manifest")
    local_path: Path = Field(..., description="Final destination of the working copy")
    exists: bool = Field(..., description="local_path/.git was present when the target was built")
    source: str = Field(default=MANIFEST_SOURCE, description="'manifest' or the group it came from")

    @property
    def name(self) -> str:
        return derive_name(self.url)

    @property
    def action(self) -> str:
        """'fetch' for existing working copies, 'clone' otherwise."""
        return "fetch" if self.exists else "clone"

    @classmethod
    def resolve(
        cls,
        url: str,
        base_dir: Path,
        local_dir_override: str | None = None,
        source: str = MANIFEST_SOURCE,
    ) -> "RepoTarget":
        """Build a target and probe the filesystem for an existing clone."""
        local_path = resolve_path(base_dir, local_dir_override, derive_name(url))
        return cls(
            url=url,
            local_dir_override=local_dir_override,
            local_path=local_path,
            exists=(local_path / ".git").exists(),
            source=source,
        )
