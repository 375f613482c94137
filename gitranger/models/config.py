"""Manifest (``ranger.yaml``) configuration models."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from gitranger.errors import ConfigNotFoundError, ConfigParseError
from gitranger.models.secret import resolve_secret

CONFIG_FILENAME = "ranger.yaml"


class GitLabProviderConfig(BaseModel):
    """Connection settings for a GitLab instance."""

    host: str = Field(default="https://gitlab.com", description="Base URL of the GitLab instance")
    token: str = Field(..., description="Access token or ${ENV_VAR} reference")

    def resolve_token(self) -> str:
        """Resolve the token reference. Never cached."""
        return resolve_secret(self.token)


class ProvidersConfig(BaseModel):
    """Provider credentials. Unknown providers are ignored."""

    gitlab: GitLabProviderConfig | None = None


class GitLabGroupConfig(BaseModel):
    """A GitLab group to expand into its projects."""

    name: str = Field(..., description="Full group path, e.g. my-org/my-team")
    local_dir: str | None = Field(default=None, description="Directory the group is cloned under")
    recursive: bool = Field(default=False, description="Include projects of nested subgroups")
    protocol: Literal["ssh", "https"] = Field(default="ssh", description="Clone URL flavour")


class GroupsConfig(BaseModel):
    """Groups to expand, keyed by provider."""

    gitlab: list[GitLabGroupConfig] = Field(default_factory=list)


class RepoConfig(BaseModel):
    """A standalone repository."""

    url: str = Field(..., description="Clone URL (ssh or https)")
    local_dir: str | None = Field(default=None, description="Relative or absolute target directory")


class RangerConfig(BaseModel):
    """Complete manifest."""

    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)
    groups: GroupsConfig = Field(default_factory=GroupsConfig)
    repos: list[RepoConfig] = Field(default_factory=list)

    @property
    def gitlab_groups(self) -> list[GitLabGroupConfig]:
        return self.groups.gitlab

    @classmethod
    def from_yaml(cls, path: Path) -> "RangerConfig":
        """Load the manifest from a YAML file.

        Raises:
            ConfigNotFoundError: if the file does not exist.
            ConfigParseError: if the YAML is invalid or does not match the schema.
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigNotFoundError(path)

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigParseError(path, str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigParseError(path, "top-level document must be a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigParseError(path, str(e)) from e
