"""Shared utilities for disk_audit."""

from disk_audit.utils.exit_codes import ExitCode
from disk_audit.utils.sizes import format_size, parse_size

__all__ = [
    "ExitCode",
    "format_size",
    "parse_size",
]
