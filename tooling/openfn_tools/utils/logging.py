"""
openfn-tools — Logger setup and step timing for the command-line tools.
"""

import logging
import os
import time
from contextlib import contextmanager
from typing import Generator

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(message)s"

logger = logging.getLogger("openfn_tools")


def configure_logging(debug: bool = False) -> None:
    """Send tool logs to stderr; LOG_LEVEL overrides the default INFO."""
    if debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), None)
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")
    logger.setLevel(level)


@contextmanager
def step_timer(step_name: str) -> Generator[None, None, None]:
    """Log the start, duration and failure (if any) of one step."""
    logger.info("▶ %s — started", step_name)
    start = time.perf_counter()
    try:
        yield
    except BaseException:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("✗ %s — failed after %.0f ms", step_name, elapsed_ms)
        raise
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("✔ %s — completed in %.0f ms", step_name, elapsed_ms)
