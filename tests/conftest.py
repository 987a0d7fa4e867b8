"""Shared fixtures: isolated settings and a fake GitHub API."""

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from ghprofile.conf import Settings
from ghprofile.web.clients.user import UserClient

PROFILE_PATH = "/api/v2/json/user/show"

OCTOCAT = {
    "user": {
        "id": "42",
        "login": "octocat",
        "name": "The Octocat",
        "location": "San Francisco",
        "company": "GitHub",
        "blog": "https://github.blog",
        "email": "octocat@github.com",
        "created_at": "2008/01/14 04:33:35 -0800",
    }
}


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("GHPROFILE_CONFIG_DIR", str(tmp_path))
    Settings.load.cache_clear()
    yield tmp_path
    Settings.load.cache_clear()


class FakeGitHub:
    """Records requests and answers the profile endpoint with a fixed body."""

    def __init__(self, body: Any = OCTOCAT, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path != PROFILE_PATH:
            return httpx.Response(404, json={"error": "Not Found"})
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, content=json.dumps(self.body).encode())


@pytest.fixture
def make_client() -> Callable[..., tuple[UserClient, FakeGitHub]]:
    def _make(body: Any = OCTOCAT, status_code: int = 200) -> tuple[UserClient, FakeGitHub]:
        fake = FakeGitHub(body, status_code)
        return UserClient("test-token", transport=httpx.MockTransport(fake)), fake

    return _make
