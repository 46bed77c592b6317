"""Logging setup shared by the entry points."""

import logging
import sys


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging to stderr, keeping stdout free for dashboard output."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
