"""
openfn-tools — Release upload orchestrator.

Runs one upload as a state machine:

  RECEIVED → TARGET_DERIVED → RELEASE_FOUND → UPLOADING → DONE

Any error moves it to FAILED and propagates. Each step is timed, logged,
and recorded in the UploadResult.
"""

from __future__ import annotations

import os
import time
from pathlib import Path

from openfn_tools.core.config import UploaderConfig
from openfn_tools.errors import AssetExistsError, AssetSizeMismatchError
from openfn_tools.models.release import ReleaseAsset, ReleaseTarget, RemoteRelease
from openfn_tools.models.upload import StepTiming, UploadOutcome, UploadResult, UploadState
from openfn_tools.release.auth import GitHubToken
from openfn_tools.release.github import GitHubReleasesClient
from openfn_tools.release.target import derive_target
from openfn_tools.utils.logging import logger


def resolve_outcome(
    existing: ReleaseAsset | None,
    local_size: int,
    replace: bool = False,
) -> UploadOutcome:
    """Decide what to do about an asset that may already be on the release."""
    if existing is None:
        return UploadOutcome.UPLOADED
    if existing.size == local_size:
        return UploadOutcome.SKIPPED
    if not replace:
        return UploadOutcome.REJECTED
    return UploadOutcome.REPLACED


class ReleaseUploader:
    """
    Upload one build artifact to the GitHub release matching its version.

    `replace` allows deleting an existing asset of a different size first.
    """

    def __init__(
        self,
        artifact: str | os.PathLike[str],
        config: UploaderConfig,
        replace: bool = False,
        client: GitHubReleasesClient | None = None,
    ):
        self.artifact = Path(artifact)
        self.config = config
        self.replace = replace
        self.client = client or GitHubReleasesClient(
            api_url=config.github.api_url,
            uploads_url=config.github.uploads_url,
            owner=config.github.owner,
            token=GitHubToken(config.github.token),
        )
        self.state = UploadState.RECEIVED
        self.target: ReleaseTarget | None = None
        self.release: RemoteRelease | None = None
        self.timings: list[StepTiming] = []

    @property
    def asset_name(self) -> str:
        return self.config.asset_name

    def _record_step(self, name: str, start: float, status: str = "ok", detail: str = ""):
        ms = int((time.perf_counter() - start) * 1000)
        self.timings.append(StepTiming(step=name, duration_ms=ms, status=status, detail=detail))
        symbol = "✓" if status == "ok" else ("⊘" if status == "skipped" else "✗")
        logger.info("  %s %s — %dms %s", symbol, name, ms, detail)

    async def run(self) -> UploadResult:
        """Execute the full upload. Returns an UploadResult."""
        logger.info("Uploading %s", self.artifact)
        try:
            self._step_derive_target()
            await self._step_lookup_release()
            outcome = self._step_resolve_conflict()
            asset = await self._step_upload(outcome)
        except Exception:
            self.state = UploadState.FAILED
            raise

        self.state = UploadState.DONE
        return UploadResult(
            target=self.target,
            outcome=outcome,
            download_url=asset.browser_download_url,
            timings=self.timings,
        )

    def _step_derive_target(self) -> None:
        start = time.perf_counter()
        self.target = derive_target(self.artifact)
        self.state = UploadState.TARGET_DERIVED
        self._record_step(
            "derive target", start,
            detail=f"repo={self.target.repo} tag={self.target.tag}",
        )

    async def _step_lookup_release(self) -> None:
        start = time.perf_counter()
        self.release = await self.client.get_release_by_tag(self.target.repo, self.target.tag)
        self.state = UploadState.RELEASE_FOUND
        self._record_step("lookup release", start, detail=f"id={self.release.id}")

    def _step_resolve_conflict(self) -> UploadOutcome:
        start = time.perf_counter()
        existing = self.release.find_asset(self.asset_name)
        local_size = self.artifact.stat().st_size
        outcome = resolve_outcome(existing, local_size, self.replace)

        if outcome is UploadOutcome.SKIPPED:
            self._record_step("resolve conflict", start, status="skipped", detail="same size")
            raise AssetExistsError(self.asset_name, self.target.tag, existing.size)
        if outcome is UploadOutcome.REJECTED:
            self._record_step("resolve conflict", start, status="failed", detail="sizes differ")
            raise AssetSizeMismatchError(
                self.asset_name, self.target.tag, existing.size, local_size
            )

        self._record_step("resolve conflict", start, detail=outcome.value)
        return outcome

    async def _step_upload(self, outcome: UploadOutcome) -> ReleaseAsset:
        start = time.perf_counter()
        self.state = UploadState.UPLOADING

        if outcome is UploadOutcome.REPLACED:
            # The release has no build asset between this delete and the upload below.
            await self.client.delete_asset(
                self.target.repo, self.release.find_asset(self.asset_name)
            )

        content = self.artifact.read_bytes()
        asset = await self.client.upload_asset(
            self.target.repo, self.release, self.asset_name, content
        )
        self._record_step("upload", start, detail=f"{len(content)} bytes")
        return asset
