"""
openfn-tools — Release uploader configuration.
Loads .env automatically, then reads all settings from environment variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from openfn_tools.errors import MissingTokenError

# Uploaded under this name whatever the local file is called
ASSET_NAME = "build.tgz"

_env_path = Path(__file__).resolve().parent.parent.parent.parent / ".env"
load_dotenv(_env_path)


@dataclass(frozen=True)
class GitHubConfig:
    """GitHub REST endpoints and credentials."""
    api_url: str
    uploads_url: str
    owner: str
    token: str


@dataclass(frozen=True)
class UploaderConfig:
    """Top-level uploader configuration."""
    github: GitHubConfig
    asset_name: str = ASSET_NAME


def load_config() -> UploaderConfig:
    return UploaderConfig(
        github=GitHubConfig(
            api_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
            uploads_url=os.getenv("GITHUB_UPLOADS_URL", "https://uploads.github.com"),
            owner=os.getenv("GH_OWNER", "OpenFn"),
            token=os.getenv("GH_TOKEN", ""),
        ),
    )


def validate_config(cfg: UploaderConfig) -> UploaderConfig:
    """Fail fast if the GitHub token is missing."""
    missing: list[str] = []
    if not cfg.github.token:
        missing.append("GH_TOKEN")
    if not cfg.github.owner:
        missing.append("GH_OWNER")
    if missing:
        raise MissingTokenError(missing)
    return cfg
