"""Repository naming and local path resolution."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

UNKNOWN_NAME = "unknown"


def derive_name(url: str) -> str:
    """Derive the repository name from a clone URL.

    Handles https URLs, scp-style ``git@host:group/project.git`` URLs,
    a trailing ``.git`` and a single trailing slash.
    """
    if url.endswith("/"):
        url = url[:-1]
    if url.endswith(".git"):
        url = url[: -len(".git")]

    name = url.rsplit("/", 1)[-1].rsplit(":", 1)[-1]
    return name or UNKNOWN_NAME


def resolve_path(base_dir: Path, local_dir_override: str | None, name: str) -> Path:
    """Compute the local destination for a repository."""
    if local_dir_override is None:
        parent = Path(base_dir)
    else:
        override = Path(local_dir_override)
        parent = override if override.is_absolute() else Path(base_dir) / override
    return parent / name


def group_subpath(group_path: str, path_with_namespace: str) -> str | None:
    """Return the subgroup segments between a group and one of its projects.

    ``group_subpath("team/sub", "team/sub/subgrp/beta")`` is ``"subgrp"``.
    Returns None when the project sits directly in the group, or when its
    namespace is not under the group at all.
    """
    group = group_path.strip("/").lower()
    namespace = PurePosixPath(path_with_namespace.strip("/")).parent

    if str(namespace).lower() == group:
        return None

    prefix = group + "/"
    if not str(namespace).lower().startswith(prefix):
        return None
    return str(namespace)[len(prefix):] or None


def group_local_dir(prefix: str | None, subpath: str | None) -> str | None:
    """Join a group's local directory prefix with a subgroup path."""
    if subpath is None:
        return prefix
    if prefix is None:
        return subpath
    return str(Path(prefix) / subpath)
