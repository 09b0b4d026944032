"""Shared test configuration and fixtures for the openfn-tools test suite."""

import io
import json
import sys
from pathlib import Path

import httpx
import pytest
from rich.console import Console

# Add tooling to Python path so imports work without an install
tooling_dir = str(Path(__file__).parent.parent / "tooling")
if tooling_dir not in sys.path:
    sys.path.insert(0, tooling_dir)

from openfn_tools.core.config import GitHubConfig, UploaderConfig  # noqa: E402
from openfn_tools.projectgen.prompts import Prompter  # noqa: E402
from openfn_tools.release.auth import GitHubToken  # noqa: E402
from openfn_tools.release.github import GitHubReleasesClient  # noqa: E402

API_URL = "https://api.github.test"
UPLOADS_URL = "https://uploads.github.test"


class ScriptedPrompter(Prompter):
    """Prompter fed from a list of answer lines, recording everything printed."""

    def __init__(self, answers: list[str]):
        self.buffer = io.StringIO()
        super().__init__(
            console=Console(file=self.buffer, width=200, color_system=None, highlight=False),
            stream=io.StringIO("".join(f"{a}\n" for a in answers)),
        )

    @property
    def output(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def scripted():
    return ScriptedPrompter


class FakeGitHub:
    """
    In-memory stand-in for the GitHub Releases API.

    `releases` maps (repo, tag) to a release payload; every request is
    recorded in `calls` as (method, path).
    """

    def __init__(self):
        self.releases: dict[tuple[str, str], dict] = {}
        self.calls: list[tuple[str, str]] = []
        self.uploaded: list[bytes] = []
        self.fail_upload_with: int | None = None
        self.fail_lookup_with: int | None = None

    def add_release(self, repo: str, tag: str, assets: list[dict] | None = None, release_id: int = 7):
        self.releases[(repo, tag)] = {
            "id": release_id,
            "tag_name": tag,
            "upload_url": f"{UPLOADS_URL}/repos/OpenFn/{repo}/releases/{release_id}/assets{{?name,label}}",
            "assets": assets or [],
        }

    def _calls(self, method: str) -> list[str]:
        return [path for m, path in self.calls if m == method]

    @property
    def uploads(self) -> list[str]:
        return self._calls("POST")

    @property
    def deletes(self) -> list[str]:
        return self._calls("DELETE")

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append((request.method, path))
        parts = path.strip("/").split("/")

        if request.method == "GET" and "tags" in parts:
            if self.fail_lookup_with:
                return httpx.Response(self.fail_lookup_with, text="boom")
            repo, tag = parts[2], parts[-1]
            release = self.releases.get((repo, tag))
            if release is None:
                return httpx.Response(404, json={"message": "Not Found"})
            return httpx.Response(200, json=release)

        if request.method == "DELETE":
            return httpx.Response(204)

        if request.method == "POST":
            if self.fail_upload_with:
                return httpx.Response(self.fail_upload_with, text="upload rejected")
            name = request.url.params["name"]
            self.uploaded.append(request.content)
            return httpx.Response(
                201,
                json={
                    "id": 99,
                    "name": name,
                    "size": len(request.content),
                    "browser_download_url": f"https://github.test/OpenFn/{parts[2]}/releases/download/{name}",
                },
            )

        return httpx.Response(405, text=json.dumps({"message": "unexpected"}))

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def github():
    return FakeGitHub()


@pytest.fixture
def uploader_config():
    return UploaderConfig(
        github=GitHubConfig(
            api_url=API_URL,
            uploads_url=UPLOADS_URL,
            owner="OpenFn",
            token="test-token",
        ),
        asset_name="build.tgz",
    )


@pytest.fixture
def client(github):
    return GitHubReleasesClient(
        api_url=API_URL,
        uploads_url=UPLOADS_URL,
        owner="OpenFn",
        token=GitHubToken("test-token"),
        transport=github.transport(),
    )


@pytest.fixture
def artifact(tmp_path):
    path = tmp_path / "language-http-v1.2.3.tgz"
    path.write_bytes(b"\x1f\x8b" + b"\0" * 98)
    return path
