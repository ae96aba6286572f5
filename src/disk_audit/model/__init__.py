"""Enums shared across the scanner and report layers."""

from __future__ import annotations

from enum import Enum


class EntryKind(str, Enum):
    """Classification of a directory entry (symlinks are never followed)."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


class SkipReason(str, Enum):
    """Why an entry contributed zero bytes to its parent."""

    UNREADABLE = "unreadable"
    STAT_FAILED = "stat_failed"
    EXCLUDED = "excluded"
