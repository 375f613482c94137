"""GitLab REST API client for group project discovery.

API Documentation: https://docs.gitlab.com/ee/api/groups.html#list-a-groups-projects

Authentication: personal/group access token in the PRIVATE-TOKEN header.

Pagination: page-numbered, 100 projects per page. Listing stops at the first
empty page, or after ``max_pages`` pages as a safety cap.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from gitranger.errors import RangerError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_PER_PAGE = 100
DEFAULT_MAX_PAGES = 100


class GitLabError(RangerError):
    """Base class for GitLab discovery failures."""


class GitLabAuthenticationError(GitLabError):
    """Token rejected (HTTP 401/403)."""

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(f"Authentication failed: {message}")


class GitLabGroupNotFoundError(GitLabError):
    """Group does not exist or is not visible to the token (HTTP 404)."""

    def __init__(self, group_path: str) -> None:
        self.group_path = group_path
        super().__init__(f"Group not found: {group_path}")


class GitLabRequestError(GitLabError):
    """Unexpected HTTP status or transport failure."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP request failed: {message}")


class GitLabParseError(GitLabError):
    """Response body was not the expected JSON."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Failed to parse response: {message}")


class GitLabProject(BaseModel):
    """Project entry from the group projects listing."""

    id: int
    name: str
    path: str
    path_with_namespace: str
    ssh_url_to_repo: str
    http_url_to_repo: str

    def clone_url(self, protocol: str = "ssh") -> str:
        return self.http_url_to_repo if protocol == "https" else self.ssh_url_to_repo


_PROJECT_LIST = TypeAdapter(list[GitLabProject])


class GitLabClient:
    """Synchronous GitLab API client."""

    def __init__(
        self,
        host: str,
        token: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        per_page: int = DEFAULT_PER_PAGE,
        max_pages: int = DEFAULT_MAX_PAGES,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.host = host.rstrip("/")
        self._token = token
        self.timeout = timeout
        self.per_page = per_page
        self.max_pages = max_pages
        self._transport = transport
        self._client: httpx.Client | None = None

    @property
    def api_url(self) -> str:
        return f"{self.host}/api/v4"

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout,
                headers={"PRIVATE-TOKEN": self._token},
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "GitLabClient":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _request(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        group_path: str | None = None,
    ) -> httpx.Response:
        """GET an API endpoint and map failure statuses to GitLab errors."""
        url = f"{self.api_url}/{endpoint}"

        try:
            response = self.client.get(url, params=params)
        except httpx.RequestError as e:
            raise GitLabRequestError(f"{type(e).__name__}: {e}") from e

        if response.status_code in (401, 403):
            raise GitLabAuthenticationError()

        if response.status_code == 404 and group_path is not None:
            raise GitLabGroupNotFoundError(group_path)

        if not response.is_success:
            raise GitLabRequestError(
                f"HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        return response

    def _parse_projects(self, response: httpx.Response) -> list[GitLabProject]:
        try:
            data = response.json()
        except ValueError as e:
            raise GitLabParseError(str(e)) from e

        try:
            return _PROJECT_LIST.validate_python(data)
        except ValidationError as e:
            raise GitLabParseError(str(e)) from e

    def list_group_projects(self, group_path: str, recursive: bool = False) -> list[GitLabProject]:
        """List all projects in a group.

        Args:
            group_path: Full group path, may contain '/'
            recursive: Also include projects of nested subgroups

        Raises:
            GitLabAuthenticationError: token rejected
            GitLabGroupNotFoundError: group does not exist
            GitLabRequestError: other HTTP or transport failure
            GitLabParseError: malformed response body
        """
        endpoint = f"groups/{quote(group_path, safe='')}/projects"
        projects: list[GitLabProject] = []

        for page in range(1, self.max_pages + 1):
            params: dict[str, Any] = {"per_page": self.per_page, "page": page}
            if recursive:
                params["include_subgroups"] = "true"

            response = self._request(endpoint, params, group_path=group_path)
            batch = self._parse_projects(response)
            if not batch:
                break

            logger.debug("Group %s page %d: %d projects", group_path, page, len(batch))
            projects.extend(batch)
        else:
            logger.debug("Group %s: stopped after %d pages", group_path, self.max_pages)

        return projects

    def verify_token(self) -> None:
        """Check the token against the current-user endpoint.

        Raises:
            GitLabAuthenticationError: token rejected
            GitLabRequestError: other HTTP or transport failure
        """
        self._request("user")
