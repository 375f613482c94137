"""Default manifest written by ``git-ranger init``."""

from __future__ import annotations

from pathlib import Path

from gitranger.errors import ConfigExistsError
from gitranger.models.config import CONFIG_FILENAME

DEFAULT_CONFIG_TEMPLATE = """\
# git-ranger manifest
#
# Lists the repositories to keep in this workspace. Paths are resolved
# relative to the directory containing this file.
#
# Tokens: keep secrets out of this file. A value written as "${NAME}" is read
# from the environment variable NAME when git-ranger runs, e.g.
#   export GITLAB_TOKEN="glpat-..."

providers:
  gitlab:
    host: "https://gitlab.example.com"
    token: "${GITLAB_TOKEN}"

groups:
  gitlab:
    # Every project in the group is cloned below local_dir. Projects in
    # subgroups keep their subgroup directories (recursive: true).
    - name: "my-org/my-team"
      local_dir: "team-projects"
      recursive: true
      protocol: ssh

    # - name: "another-group"
    #   local_dir: "other-projects"

repos:
  # Standalone repositories. local_dir is optional, relative or absolute.
  - url: "git@github.com:example/standalone-tool.git"
    local_dir: "standalone"

  # - url: "https://gitlab.example.com/user/project.git"

# Run `git-ranger sync --dry-run` to preview, then `git-ranger sync`.
# Consider adding ranger.yaml to .gitignore.
"""


def init_config(directory: Path) -> Path:
    """Write the default manifest into ``directory``.

    Raises:
        ConfigExistsError: if a manifest is already present.
    """
    directory = Path(directory)
    config_path = directory / CONFIG_FILENAME
    if config_path.exists():
        raise ConfigExistsError(config_path)

    directory.mkdir(parents=True, exist_ok=True)
    config_path.write_text(DEFAULT_CONFIG_TEMPLATE)
    return config_path
