"""Hosting provider clients used to expand groups into repositories."""

from gitranger.providers.gitlab import (
    GitLabAuthenticationError,
    GitLabClient,
    GitLabError,
    GitLabGroupNotFoundError,
    GitLabParseError,
    GitLabProject,
    GitLabRequestError,
)

__all__ = [
    "GitLabClient",
    "GitLabProject",
    # Errors
    "GitLabError",
    "GitLabAuthenticationError",
    "GitLabGroupNotFoundError",
    "GitLabRequestError",
    "GitLabParseError",
]
