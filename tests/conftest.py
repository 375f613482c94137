"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Callable, Generator
from urllib.parse import unquote

import httpx
import pytest

from gitranger.git import GitResult
from gitranger.paths import derive_name
from gitranger.providers.gitlab import GitLabProject

GITLAB_HOST = "https://gitlab.example.com"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_manifest(temp_dir: Path) -> Callable[[str], Path]:
    """Write a ranger.yaml into the temp dir and return its path."""

    def _write(content: str) -> Path:
        path = temp_dir / "ranger.yaml"
        path.write_text(content)
        return path

    return _write


def _project(project_id: int, path_with_namespace: str) -> dict:
    return {
        "id": project_id,
        "name": path_with_namespace.rsplit("/", 1)[-1],
        "path": path_with_namespace.rsplit("/", 1)[-1],
        "path_with_namespace": path_with_namespace,
        "ssh_url_to_repo": f"git@gitlab.example.com:{path_with_namespace}.git",
        "http_url_to_repo": f"{GITLAB_HOST}/{path_with_namespace}.git",
        "description": None,
        "visibility": "private",
    }


@pytest.fixture
def make_project() -> Callable[[int, str], dict]:
    """Build a GitLab project payload for a namespace path."""
    return _project


@pytest.fixture
def team_sub_projects() -> list[dict]:
    """Projects of group team/sub, one of them in a nested subgroup."""
    return [
        _project(1, "team/sub/alpha"),
        _project(2, "team/sub/subgrp/beta"),
    ]


class GitLabApiStub:
    """Minimal GitLab API served through httpx.MockTransport.

    ``groups`` maps a group path to its list of pages. Unknown groups 404.
    ``status`` forces a status code for every request.
    ``error`` is raised for every request instead of responding.
    """

    def __init__(self) -> None:
        self.groups: dict[str, list[list[dict]]] = {}
        self.status: int | None = None
        self.body: bytes | None = None
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.error is not None:
            raise self.error
        if self.status is not None:
            return httpx.Response(self.status, text="stubbed failure")
        if self.body is not None:
            return httpx.Response(200, content=self.body)

        path = request.url.raw_path.split(b"?")[0].decode()
        if path == "/api/v4/user":
            return httpx.Response(200, json={"id": 1, "username": "ranger"})

        prefix, suffix = "/api/v4/groups/", "/projects"
        group = unquote(path[len(prefix):-len(suffix)])
        if group not in self.groups:
            return httpx.Response(404, json={"message": "404 Group Not Found"})

        pages = self.groups[group]
        page = int(request.url.params.get("page", "1"))
        return httpx.Response(200, json=pages[page - 1] if page <= len(pages) else [])

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def gitlab_api() -> GitLabApiStub:
    return GitLabApiStub()


class FakeGitLab:
    """Stands in for GitLabClient and its factory in builder tests."""

    def __init__(self) -> None:
        self.projects: dict[str, list[dict]] = {}
        self.errors: dict[str, Exception] = {}
        self.opened: list[tuple[str, str]] = []
        self.calls: list[tuple[str, bool]] = []
        self.closed = False

    def __call__(self, host: str, token: str) -> "FakeGitLab":
        self.opened.append((host, token))
        return self

    def __enter__(self) -> "FakeGitLab":
        return self

    def __exit__(self, *exc: object) -> None:
        self.closed = True

    def list_group_projects(self, group_path: str, recursive: bool = False) -> list[GitLabProject]:
        self.calls.append((group_path, recursive))
        if group_path in self.errors:
            raise self.errors[group_path]
        return [GitLabProject.model_validate(p) for p in self.projects.get(group_path, [])]


@pytest.fixture
def fake_gitlab() -> FakeGitLab:
    return FakeGitLab()


class FakeExecutor:
    """Records git calls; repos named in ``fail`` return a failed result."""

    def __init__(self, fail: set[str] | None = None) -> None:
        self.fail = fail or set()
        self.calls: list[tuple[str, str, Path]] = []

    def _result(self, name: str, action: str) -> GitResult:
        if name in self.fail:
            return GitResult(
                success=False,
                returncode=128,
                stderr=f"fatal: could not {action} '{name}'\n",
                message=f"git {action} failed",
            )
        return GitResult.ok()

    def clone(self, url: str, destination: Path) -> GitResult:
        self.calls.append(("clone", url, Path(destination)))
        return self._result(derive_name(url), "clone")

    def fetch_all(self, path: Path) -> GitResult:
        self.calls.append(("fetch", str(path), Path(path)))
        return self._result(Path(path).name, "fetch")


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def failing_executor() -> Callable[..., FakeExecutor]:
    def _make(*names: str) -> FakeExecutor:
        return FakeExecutor(fail=set(names))

    return _make


# Markers for test categories
def pytest_configure(config):
    config.addinivalue_line("markers", "mock: tests using mocked API responses")
    config.addinivalue_line("markers", "integration: tests requiring a real git binary")
