"""ScanReport — the schema-aligned result of one ``visualise`` run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from disk_audit import __version__
from disk_audit.core.config import ScanConfig
from disk_audit.model import EntryKind, SkipReason
from disk_audit.utils.sizes import format_size


@dataclass(frozen=True, slots=True)
class ReportedEntry:
    """One ``<path>: <size>`` line, in the order it was printed."""

    path: str
    kind: EntryKind
    size: int


@dataclass(frozen=True, slots=True)
class SkippedEntry:
    """A recovered failure or an excluded directory."""

    path: str
    reason: SkipReason
    detail: str = ""


@dataclass(slots=True)
class ScanReport:
    """Assembled walk result matching ``size_report.schema.json``."""

    root: str
    config: ScanConfig
    total_size: int = 0
    root_readable: bool = True
    entries: list[ReportedEntry] = field(default_factory=list)
    skipped: list[SkippedEntry] = field(default_factory=list)
    tool_version: str = __version__

    def to_dict(self) -> dict[str, Any]:
        """Produce the full report JSON matching the schema."""
        binary = self.config.binary_units
        pattern = self.config.exclude_pattern
        return {
            "schema_version": "size_report_v1",
            "run": {
                "root": self.root,
                "tool_version": self.tool_version,
                "config": {
                    "size_threshold": self.config.size_threshold,
                    "exclude_pattern": pattern.pattern if pattern else None,
                    "binary_units": binary,
                },
            },
            "summary": {
                "total_size": self.total_size,
                "total_size_human": format_size(self.total_size, binary=binary),
                "root_readable": self.root_readable,
                "counts": {
                    "reported": len(self.entries),
                    "skipped": len(self.skipped),
                },
            },
            "entries": [
                {
                    "path": e.path,
                    "kind": e.kind.value,
                    "size": e.size,
                    "size_human": format_size(e.size, binary=binary),
                }
                for e in self.entries
            ],
            "skipped": [
                {"path": s.path, "reason": s.reason.value, "detail": s.detail}
                for s in self.skipped
            ],
        }
