"""CLI entry-point for disk_audit.

Usage:
    python -m disk_audit
    python -m disk_audit -d /var -s 500MB
    python -m disk_audit -d /home -s 1GiB -i '/\\.cache$' --binary
    python -m disk_audit -d . -s 10MB --json
"""

from __future__ import annotations

import argparse
import logging
import sys

import jsonschema

from disk_audit import __version__
from disk_audit.contracts.load import validate_instance
from disk_audit.core.config import (
    DEFAULT_ROOT,
    DEFAULT_SIZE_THRESHOLD,
    ConfigError,
    ScanConfig,
)
from disk_audit.core.scanner import DirectoryScanner
from disk_audit.utils.exit_codes import ExitCode
from disk_audit.utils.json_norm import stable_json_dump
from disk_audit.utils.log import configure_logging

logger = logging.getLogger("disk_audit")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="disk-audit",
        description=(
            "Print directories and files whose size exceeds a threshold. "
            "Diagnostics go to stderr, so stdout stays pipe-friendly."
        ),
    )
    p.add_argument(
        "-d",
        "--dir",
        dest="root",
        default=DEFAULT_ROOT,
        help="Directory to search (default: %(default)s).",
    )
    p.add_argument(
        "-s",
        "--size",
        dest="size_threshold",
        default=DEFAULT_SIZE_THRESHOLD,
        help=(
            "Print directories and files exceeding this threshold "
            "(example: 100MB, 1.5GiB; default: %(default)s)."
        ),
    )
    p.add_argument(
        "-i",
        "--ignore",
        dest="exclude_pattern",
        default="",
        help="Regexp of directories to ignore, matched against the full path.",
    )
    p.add_argument(
        "--binary",
        dest="binary_units",
        action="store_true",
        default=False,
        help="Render sizes in IEC units (KiB, MiB, GiB).",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the size_report_v1 JSON to stdout instead of text lines.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log every directory as it is entered.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = scanned, 2 = bad flags)."""
    args = _build_parser().parse_args(argv)

    try:
        config = ScanConfig.from_flags(
            args.size_threshold,
            args.exclude_pattern,
            binary_units=args.binary_units,
        )
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    configure_logging(args.verbose)

    # undecodable filename bytes come back from os.scandir as lone
    # surrogates; write them out as the original bytes
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")

    scanner = DirectoryScanner(
        config,
        out=None if args.json_out else sys.stdout,
        log=logger,
    )
    report = scanner.visualise(args.root)

    if args.json_out:
        report_dict = report.to_dict()
        try:
            validate_instance(report_dict, "size_report.schema.json")
        except jsonschema.ValidationError as e:
            print(f"FAIL: {e.message}", file=sys.stderr)
            return ExitCode.VIOLATION
        stable_json_dump(report_dict, sys.stdout, indent=2)

    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
