"""
openfn-tools — GitHub release models.

Only the fields the uploader reads are modelled; GitHub sends many more,
which are ignored.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class ReleaseTarget(BaseModel):
    """Where a build artifact goes, derived from its file name."""

    repo: str = Field(min_length=1)
    tag: str = Field(pattern=r"^v\d+\.\d+\.\d+$")
    artifact: Path


class ReleaseAsset(BaseModel):
    id: int
    name: str
    size: int = Field(ge=0)
    browser_download_url: str = ""


class RemoteRelease(BaseModel):
    id: int
    tag_name: str
    upload_url: str = ""
    assets: list[ReleaseAsset] = Field(default_factory=list)

    def find_asset(self, name: str) -> ReleaseAsset | None:
        for asset in self.assets:
            if asset.name == name:
                return asset
        return None
