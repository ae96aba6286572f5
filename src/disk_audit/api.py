"""
disk_audit.api
==============

Programmatic entrypoint for using disk_audit without the CLI.

Goals:
  - No argparse / CLI dependencies
  - Stable, JSON-friendly output that matches ``size_report.schema.json``

Usage::

    from disk_audit.api import scan_tree

    report, report_dict = scan_tree("/srv", size_threshold="1GB")
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional, TextIO, Union

from disk_audit.contracts.load import validate_instance
from disk_audit.core.config import DEFAULT_SIZE_THRESHOLD, ScanConfig
from disk_audit.core.scanner import DirectoryScanner
from disk_audit.model.report import ScanReport


def scan_tree(
    root: Union[str, "os.PathLike[str]"],
    *,
    size_threshold: str = DEFAULT_SIZE_THRESHOLD,
    exclude_pattern: str = "",
    binary_units: bool = False,
    out: Optional[TextIO] = None,
    logger: Optional[logging.Logger] = None,
) -> tuple[ScanReport, dict[str, Any]]:
    """Walk *root* and return the report plus its schema-aligned dict.

    Parameters
    ----------
    root:
        Directory to scan.  An unreadable root is not an error; the report
        comes back with ``root_readable = False``.
    size_threshold:
        Human-readable threshold such as ``"100MB"`` or ``"1.5GiB"``.
    exclude_pattern:
        Regular expression searched in every directory's full path.
    out:
        Stream for the ``<path>: <size>`` text lines; ``None`` keeps quiet.

    Raises
    ------
    ConfigError
        If the threshold or the pattern is malformed.
    jsonschema.ValidationError
        If the assembled report violates its schema.
    """
    config = ScanConfig.from_flags(
        size_threshold, exclude_pattern, binary_units=binary_units
    )
    scanner = DirectoryScanner(config, out=out, log=logger)
    report = scanner.visualise(root)

    report_dict = report.to_dict()
    validate_instance(report_dict, "size_report.schema.json")
    return report, report_dict
