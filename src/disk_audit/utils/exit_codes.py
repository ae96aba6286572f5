"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — scan completed (recovered failures included)
  1   Violation — report failed its schema contract
  2   Error — usage error, malformed threshold or ignore pattern
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
