"""Diagnostic logging for the CLI.

Recovered scan failures are reported on stderr as ``error: ...`` /
``warning: ...`` lines so that stdout stays a clean size report.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

DIAGNOSTIC_FORMAT = "%(levelname)s: %(message)s"

_LEVEL_NAMES = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}


def configure_logging(verbose: bool = False, *, stream: IO[str] | None = None) -> None:
    """Route diagnostics to *stream* (stderr by default) with lowercase tags."""
    for level, name in _LEVEL_NAMES.items():
        logging.addLevelName(level, name)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=DIAGNOSTIC_FORMAT,
        stream=stream if stream is not None else sys.stderr,
        force=True,
    )
