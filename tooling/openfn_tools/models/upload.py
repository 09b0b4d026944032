"""
openfn-tools — Upload result contracts.

Every upload run returns an UploadResult with the outcome, the download URL
of the published asset, and per-step timings.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field

from openfn_tools.models.release import ReleaseTarget


class UploadState(str, enum.Enum):
    RECEIVED = "RECEIVED"
    TARGET_DERIVED = "TARGET_DERIVED"
    RELEASE_FOUND = "RELEASE_FOUND"
    UPLOADING = "UPLOADING"
    DONE = "DONE"
    FAILED = "FAILED"


class UploadOutcome(str, enum.Enum):
    UPLOADED = "uploaded"
    SKIPPED = "skipped"
    REJECTED = "rejected"
    REPLACED = "replaced"


class StepTiming(BaseModel):
    step: str
    duration_ms: int
    status: str = "ok"  # ok | skipped | failed
    detail: str = ""


class UploadResult(BaseModel):
    """Complete output contract for one upload run."""

    target: ReleaseTarget
    outcome: UploadOutcome
    download_url: str | None = None
    timings: list[StepTiming] = Field(default_factory=list)
