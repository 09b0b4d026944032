"""
openfn-tools — GitHub API authentication helpers.

Both the REST API and the uploads host authenticate with the same bearer
token on every request.
"""

from dataclasses import dataclass

GITHUB_API_VERSION = "2022-11-28"


@dataclass(frozen=True)
class GitHubToken:
    token: str

    def as_headers(self) -> dict[str, str]:
        """Return the auth headers required by the GitHub APIs."""
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    def __repr__(self) -> str:
        return "GitHubToken(token='***')"
