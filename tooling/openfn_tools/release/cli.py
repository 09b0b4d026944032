"""
openfn-tools — Release uploader (`upload-release`).

Usage:
  upload-release -i ./language-http-v1.2.3.tgz [-u] [-d]

Exit codes:
  0  uploaded (or replaced)
  1  bad arguments, missing GH_TOKEN, unknown tag, API or I/O failure
  2  build.tgz already on the release (same size, or different size without -u)
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

import httpx

from openfn_tools.core.config import load_config, validate_config
from openfn_tools.errors import OpenFnToolsError
from openfn_tools.release.github import GitHubReleasesClient
from openfn_tools.release.uploader import ReleaseUploader
from openfn_tools.utils.logging import configure_logging, logger


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="upload-release",
        description="Upload a <repo>-v<x.y.z>.tgz build as build.tgz on the matching GitHub release.",
    )
    p.add_argument("-i", "--input", required=True, help="Path to the .tgz build artifact.")
    p.add_argument(
        "-u", "--update", action="store_true",
        help="Replace an existing build.tgz whose size differs.",
    )
    p.add_argument(
        "-d", "--debug", action="store_true",
        help="Print full tracebacks on failure.",
    )
    return p.parse_args(argv)


def _report(exc: BaseException, debug: bool) -> None:
    if debug:
        if isinstance(exc, OpenFnToolsError):
            logger.error("Upload failed: %s", exc.to_dict(), exc_info=exc)
        else:
            logger.error("Upload failed", exc_info=exc)
        return
    if isinstance(exc, OpenFnToolsError):
        logger.error("%s: %s", exc.code, exc.message)
        if exc.suggestion:
            logger.error("  %s", exc.suggestion)
    else:
        logger.error("%s: %s", type(exc).__name__, exc)


def main(
    argv: Sequence[str] | None = None,
    client: GitHubReleasesClient | None = None,
) -> int:
    try:
        args = _parse_args(argv)
    except SystemExit as exc:
        # argparse exits 2 on usage errors; bad arguments are exit 1 here
        return 0 if exc.code == 0 else 1

    configure_logging(debug=args.debug)

    try:
        config = validate_config(load_config())
        uploader = ReleaseUploader(args.input, config, replace=args.update, client=client)
        result = asyncio.run(uploader.run())
    except OpenFnToolsError as exc:
        _report(exc, args.debug)
        return exc.exit_code
    except (httpx.HTTPError, httpx.InvalidURL, OSError, ValueError) as exc:
        _report(exc, args.debug)
        return 1

    print(
        f"Uploaded {config.asset_name} to {result.target.repo} {result.target.tag}"
        f" ({result.outcome.value}): {result.download_url}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
