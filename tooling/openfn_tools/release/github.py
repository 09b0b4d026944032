"""
openfn-tools — GitHub Releases API client.

Endpoints used:
  GET    /repos/{owner}/{repo}/releases/tags/{tag}       — release by tag
  DELETE /repos/{owner}/{repo}/releases/assets/{assetId} — delete an asset
  POST   {uploads}/repos/{owner}/{repo}/releases/{releaseId}/assets?name=…
                                                         — upload an asset

Auth: bearer token on every request. No retries; httpx default timeouts.
"""

from __future__ import annotations

import httpx

from openfn_tools.errors import GitHubAPIError, TagNotFoundError, UploadFailedError
from openfn_tools.models.release import ReleaseAsset, RemoteRelease
from openfn_tools.release.auth import GitHubToken
from openfn_tools.utils.logging import logger, step_timer


class GitHubReleasesClient:
    """Thin async wrapper around the GitHub Releases REST API."""

    def __init__(
        self,
        api_url: str,
        uploads_url: str,
        owner: str,
        token: GitHubToken,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.uploads_url = uploads_url.rstrip("/")
        self.owner = owner
        self.token = token
        self.transport = transport

    def _headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        h = self.token.as_headers()
        if extra:
            h.update(extra)
        return h

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport, follow_redirects=True)

    def _repo_url(self, repo: str) -> str:
        return f"{self.api_url}/repos/{self.owner}/{repo}"

    def _asset_upload_url(self, repo: str, release: RemoteRelease) -> str:
        # upload_url comes back as an RFC 6570 template: ".../assets{?name,label}"
        if release.upload_url:
            return release.upload_url.split("{", 1)[0]
        return f"{self.uploads_url}/repos/{self.owner}/{repo}/releases/{release.id}/assets"

    async def get_release_by_tag(self, repo: str, tag: str) -> RemoteRelease:
        """Fetch the release for `tag`. Raises TagNotFoundError on 404."""
        with step_timer(f"GitHub — look up {repo} {tag}"):
            async with self._client() as client:
                resp = await client.get(
                    f"{self._repo_url(repo)}/releases/tags/{tag}",
                    headers=self._headers(),
                )
            if resp.status_code == 404:
                raise TagNotFoundError(repo, tag)
            if not resp.is_success:
                logger.error("  Release lookup returned %d: %s", resp.status_code, resp.text)
                raise GitHubAPIError("release lookup", resp.status_code, resp.text)

            release = RemoteRelease.model_validate(resp.json())
            logger.info(
                "  Found release %s (id %d) with %d asset(s)",
                release.tag_name, release.id, len(release.assets),
            )
            return release

    async def delete_asset(self, repo: str, asset: ReleaseAsset) -> None:
        with step_timer(f"GitHub — delete asset {asset.name}"):
            async with self._client() as client:
                resp = await client.delete(
                    f"{self._repo_url(repo)}/releases/assets/{asset.id}",
                    headers=self._headers(),
                )
            if not resp.is_success:
                logger.error("  Asset delete returned %d: %s", resp.status_code, resp.text)
                raise GitHubAPIError("asset delete", resp.status_code, resp.text)
            logger.info("  Deleted asset %s (id %d)", asset.name, asset.id)

    async def upload_asset(
        self,
        repo: str,
        release: RemoteRelease,
        name: str,
        content: bytes,
    ) -> ReleaseAsset:
        """Upload `content` as asset `name` and return the created asset."""
        with step_timer(f"GitHub — upload asset {name}"):
            try:
                async with self._client() as client:
                    resp = await client.post(
                        self._asset_upload_url(repo, release),
                        params={"name": name},
                        headers=self._headers({"Content-Type": "application/gzip"}),
                        content=content,
                    )
                    resp.raise_for_status()
            except httpx.HTTPStatusError as exc:
                logger.error(
                    "  Asset upload returned %d: %s",
                    exc.response.status_code, exc.response.text,
                )
                raise UploadFailedError(name, f"HTTP {exc.response.status_code}") from exc
            except httpx.HTTPError as exc:
                raise UploadFailedError(name, str(exc) or type(exc).__name__) from exc

            asset = ReleaseAsset.model_validate(resp.json())
            logger.info("  Uploaded %d bytes → asset id %d", len(content), asset.id)
            return asset
