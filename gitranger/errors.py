"""Exception types shared across git-ranger."""

from __future__ import annotations

from pathlib import Path


class RangerError(Exception):
    """Base class for all git-ranger errors."""


class ConfigNotFoundError(RangerError):
    """The manifest file does not exist."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Configuration file not found at {self.path}")


class ConfigParseError(RangerError):
    """The manifest could not be parsed or failed validation."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to parse configuration {self.path}: {reason}")


class ConfigExistsError(RangerError):
    """Refusing to overwrite an existing manifest."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Configuration file already exists at {self.path}")


class SecretResolutionError(RangerError):
    """A ``${VAR}`` secret reference points at an unset environment variable."""

    def __init__(self, var_name: str) -> None:
        self.var_name = var_name
        super().__init__(f"Environment variable '{var_name}' is not set")
