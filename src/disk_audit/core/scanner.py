"""Directory scanner — depth-first size walk with threshold reporting.

Sizes are folded bottom-up: a directory's size is the sum of the regular
files below it.  Any file or directory larger than the threshold is printed
the moment its size is known, so a directory line always follows the lines
of its own descendants::

    /data/logs/a.log: 120 MB
    /data/logs/b.log: 310 MB
    /data/logs: 430 MB

    /data: 1.2 GB

The walk runs on an explicit stack of frames instead of Python recursion,
so arbitrarily deep trees never hit the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, TextIO, Union

from disk_audit.core.config import ScanConfig
from disk_audit.model import EntryKind, SkipReason
from disk_audit.model.report import ReportedEntry, ScanReport, SkippedEntry
from disk_audit.utils.sizes import format_size

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class WalkResult(NamedTuple):
    """Size of one subtree and the files printed directly inside it."""

    total_size: int
    printed_files: int


@dataclass(slots=True)
class DirectoryEntry:
    """One listed entry; lives only for a single traversal level.

    ``size`` is resolved once the entry is visited: a file's own size, or a
    directory's subtree total.
    """

    name: str
    path: str
    kind: EntryKind
    size: int = 0


@dataclass(slots=True)
class _Frame:
    path: str
    entries: list[DirectoryEntry]
    index: int = 0
    total: int = 0
    printed_files: int = 0
    # directory entry whose child frame is currently on top of the stack
    pending: Optional[DirectoryEntry] = None


@dataclass(slots=True)
class _Collected:
    entries: list[ReportedEntry] = field(default_factory=list)
    skipped: list[SkippedEntry] = field(default_factory=list)


def _classify(entry: os.DirEntry[str]) -> EntryKind:
    if entry.is_file(follow_symlinks=False):
        return EntryKind.FILE
    if entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


class DirectoryScanner:
    """Walks a directory tree and prints entries exceeding the threshold.

    *out* receives the ``<path>: <size>`` lines (``None`` silences them);
    *log* receives the recovered-failure diagnostics.
    """

    def __init__(
        self,
        config: ScanConfig,
        *,
        out: Optional[TextIO] = None,
        log: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.out = out
        self.log = log or logger

    # ── public operations ───────────────────────────────────────────

    def scan(self, path: PathLike) -> WalkResult:
        """Return ``(total_size, printed_files)`` for the subtree at *path*.

        An unreadable *path* is logged and counts as ``(0, 0)``.
        """
        result = self._walk(os.fspath(path), _Collected())
        return result if result is not None else WalkResult(0, 0)

    def visualise(self, root: PathLike) -> ScanReport:
        """Scan *root*, print qualifying entries, then the root itself."""
        root_path = os.fspath(root)
        collected = _Collected()
        result = self._walk(root_path, collected)

        report = ScanReport(
            root=root_path,
            config=self.config,
            entries=collected.entries,
            skipped=collected.skipped,
        )
        if result is None:
            report.root_readable = False
            return report

        report.total_size = result.total_size
        if result.total_size > self.config.size_threshold:
            self._print_entry(root_path, result.total_size)
            self._blank()
            collected.entries.append(
                ReportedEntry(root_path, EntryKind.DIRECTORY, result.total_size)
            )
        return report

    # ── walk ────────────────────────────────────────────────────────

    def _walk(self, root: str, collected: _Collected) -> Optional[WalkResult]:
        """Fold the tree at *root*; ``None`` when *root* cannot be listed."""
        # children are joined onto the cleaned root: "." lists as "a", not "./a"
        base = os.path.normpath(root)
        listing = self._list_dir(base, collected)
        if listing is None:
            return None

        stack = [_Frame(base, listing)]
        finished: Optional[WalkResult] = None

        while True:
            frame = stack[-1]

            if finished is not None:
                child = frame.pending
                frame.pending = None
                child.size = finished.total_size
                self._account(frame, child, finished.printed_files, collected)
                finished = None

            if frame.index >= len(frame.entries):
                stack.pop()
                finished = WalkResult(frame.total, frame.printed_files)
                if not stack:
                    return finished
                continue

            entry = frame.entries[frame.index]
            frame.index += 1

            if entry.kind is EntryKind.FILE:
                size = self._file_size(entry, collected)
                if size is not None:
                    entry.size = size
                    self._account(frame, entry, 0, collected)

            elif entry.kind is EntryKind.DIRECTORY:
                if self.config.should_skip_dir(entry.path):
                    self.log.warning(
                        "ignoring directory '%s' due to matched ignore pattern",
                        entry.path,
                    )
                    collected.skipped.append(
                        SkippedEntry(
                            entry.path,
                            SkipReason.EXCLUDED,
                            self.config.exclude_pattern.pattern,
                        )
                    )
                    continue

                child_listing = self._list_dir(entry.path, collected)
                if child_listing is None:
                    continue
                frame.pending = entry
                stack.append(_Frame(entry.path, child_listing))

            # other kinds (symlinks, devices, sockets) contribute nothing

    def _list_dir(
        self, path: str, collected: _Collected
    ) -> Optional[list[DirectoryEntry]]:
        """Read the whole listing of *path*, sorted by name."""
        self.log.debug("scanning %s", path)
        try:
            with os.scandir(path) as it:
                raw = sorted(it, key=lambda e: e.name)
        except OSError as e:
            self.log.error("could not read contents of directory %s: %s", path, e)
            self.log.warning("will skip directory %s in calculations", path)
            collected.skipped.append(
                SkippedEntry(path, SkipReason.UNREADABLE, str(e))
            )
            return None

        entries: list[DirectoryEntry] = []
        for item in raw:
            full_path = os.path.join(path, item.name)
            try:
                kind = _classify(item)
            except OSError as e:
                self.log.warning("could not determine type of %s: %s", full_path, e)
                kind = EntryKind.OTHER
            entries.append(DirectoryEntry(item.name, full_path, kind))
        return entries

    def _file_size(self, entry: DirectoryEntry, collected: _Collected) -> Optional[int]:
        try:
            return os.lstat(entry.path).st_size
        except OSError as e:
            self.log.error("could not get info for file %s: %s", entry.path, e)
            self.log.warning(
                "file %s will not be included in calculations", entry.path
            )
            collected.skipped.append(
                SkippedEntry(entry.path, SkipReason.STAT_FAILED, str(e))
            )
            return None

    def _account(
        self,
        frame: _Frame,
        entry: DirectoryEntry,
        sub_printed_files: int,
        collected: _Collected,
    ) -> None:
        """Report *entry* if it exceeds the threshold and fold its size."""
        size = entry.size
        if size > self.config.size_threshold:
            is_file = entry.kind is EntryKind.FILE
            if is_file and frame.printed_files == 0:
                # separate a group of files from whatever was printed above
                self._blank()

            self._print_entry(entry.path, size)

            if entry.kind is EntryKind.DIRECTORY and sub_printed_files > 0:
                # close the block of files printed inside that directory
                self._blank()

            if is_file:
                frame.printed_files += 1
            collected.entries.append(ReportedEntry(entry.path, entry.kind, size))

        frame.total += size

    # ── output ──────────────────────────────────────────────────────

    def _print_entry(self, path: str, size: int) -> None:
        if self.out is not None:
            formatted = format_size(size, binary=self.config.binary_units)
            print(f"{path}: {formatted}", file=self.out)

    def _blank(self) -> None:
        if self.out is not None:
            print(file=self.out)
