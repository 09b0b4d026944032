"""
openfn-tools — Monolith inlining and project.yaml serialization.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from openfn_tools.errors import FileReadError
from openfn_tools.models.project import ProjectDocument
from openfn_tools.utils.logging import logger


def _read_text(kind: str, path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(kind, path, getattr(exc, "strerror", None) or str(exc)) from exc


def inline_monolith(document: ProjectDocument) -> ProjectDocument:
    """
    Return a copy of `document` with referenced files inlined.

    Every credential body is a path and must be readable. A job expression
    is inlined only when it names an existing file; anything else is taken
    to be the expression itself.
    """
    inlined = document.model_copy(deep=True)

    for name, path in document.credentials.items():
        inlined.credentials[name] = _read_text("credential", path)
        logger.debug("Inlined credential %s from %s", name, path)

    for name, job in document.jobs.items():
        if os.path.exists(job.expression):
            inlined.jobs[name].expression = _read_text("job", job.expression)
            logger.debug("Inlined job %s from %s", name, job.expression)

    return inlined


def dump_document(document: ProjectDocument) -> str:
    return yaml.safe_dump(
        document.to_yaml_dict(),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def write_document(document: ProjectDocument, dest: str | Path) -> str:
    """Serialize `document` to `dest`, overwriting it, and return the YAML text."""
    data = dump_document(document)
    path = Path(dest)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data, encoding="utf-8")
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return data
