"""
openfn-tools — Structured error catalog.

Every error has a code, human message, suggested fix and process exit code.
The CLIs turn these into one-line operator messages.
"""

from __future__ import annotations

from typing import Any


class OpenFnToolsError(Exception):
    """Base error with structured code + suggestion."""

    exit_code = 1

    def __init__(self, code: str, message: str, suggestion: str = "", detail: Any = None):
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "error_code": self.code,
            "message": self.message,
        }
        if self.suggestion:
            d["suggestion"] = self.suggestion
        if self.detail:
            d["detail"] = self.detail
        return d


# ---- Configuration ----

class MissingTokenError(OpenFnToolsError):
    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            code="MISSING_CONFIGURATION",
            message=f"Missing required environment variables: {', '.join(missing)}",
            suggestion="Export GH_TOKEN (a GitHub token with repo scope) or put it in .env.",
            detail=missing,
        )


class InvalidArtifactNameError(OpenFnToolsError):
    def __init__(self, path: str):
        super().__init__(
            code="INVALID_ARTIFACT_NAME",
            message=f"Artifact name does not look like <repo>-v<major>.<minor>.<patch>.tgz: {path}",
            suggestion="Usage: upload-release -i ./dist/language-http-v1.2.3.tgz [-u] [-d]",
        )


# ---- Remote state ----

class TagNotFoundError(OpenFnToolsError):
    def __init__(self, repo: str, tag: str):
        self.repo = repo
        self.tag = tag
        super().__init__(
            code="TAG_NOT_FOUND",
            message=f"Tag {tag} does not exist for repo {repo}",
            suggestion="Push the tag and publish the GitHub release before uploading.",
        )


class AssetExistsError(OpenFnToolsError):
    exit_code = 2

    def __init__(self, name: str, tag: str, size: int):
        super().__init__(
            code="ASSET_EXISTS",
            message=f"{name} already exists on release {tag} ({size} bytes)",
            suggestion="Nothing to do; the same build is already published.",
        )


class AssetSizeMismatchError(OpenFnToolsError):
    exit_code = 2

    def __init__(self, name: str, tag: str, remote_size: int, local_size: int):
        super().__init__(
            code="ASSET_SIZE_MISMATCH",
            message=(
                f"{name} already exists on release {tag}, but sizes differ "
                f"(remote {remote_size} bytes, local {local_size} bytes)"
            ),
            suggestion="Re-run with -u to delete the existing asset and upload this build.",
        )


# ---- Transport ----

class GitHubAPIError(OpenFnToolsError):
    def __init__(self, api: str, status: int, body: str = ""):
        self.status = status
        super().__init__(
            code=f"GITHUB_{api.upper().replace(' ', '_')}_ERROR",
            message=f"GitHub {api} returned HTTP {status}",
            suggestion="Check GH_TOKEN permissions and the repository name.",
            detail=body[:500] if body else None,
        )


class UploadFailedError(OpenFnToolsError):
    def __init__(self, name: str, reason: str):
        super().__init__(
            code="UPLOAD_FAILED",
            message=f"Upload of {name} failed: {reason}",
            suggestion="Check your network connection and GH_TOKEN, then try again.",
        )


# ---- Local I/O ----

class FileReadError(OpenFnToolsError):
    def __init__(self, kind: str, path: str, reason: str):
        super().__init__(
            code="FILE_READ_FAILED",
            message=f"Could not read {kind} file {path}: {reason}",
            suggestion="Check the path, or generate a URI-based project instead.",
        )
