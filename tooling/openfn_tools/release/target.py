"""
openfn-tools — Derive the release target from a build artifact's file name.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from openfn_tools.errors import InvalidArtifactNameError
from openfn_tools.models.release import ReleaseTarget

ARTIFACT_PATTERN = re.compile(
    r"^(?P<repo>.+)-v(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)\.tgz$"
)


def derive_target(path: str | os.PathLike[str]) -> ReleaseTarget:
    """
    Split `<repo>-v<major>.<minor>.<patch>.tgz` into repo and tag.

    Only the file name is inspected; the file itself is not touched.
    """
    artifact = Path(path)
    match = ARTIFACT_PATTERN.match(artifact.name)
    if not match:
        raise InvalidArtifactNameError(str(path))

    tag = f"v{match['major']}.{match['minor']}.{match['patch']}"
    return ReleaseTarget(repo=match["repo"], tag=tag, artifact=artifact)
