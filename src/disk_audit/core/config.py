"""Scan configuration dataclass."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from disk_audit.utils.sizes import parse_size

DEFAULT_ROOT = "/"
DEFAULT_SIZE_THRESHOLD = "100MB"


class ConfigError(ValueError):
    """Raised for a malformed threshold or ignore pattern."""


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration, owned by the scanner for a whole run.

    ``size_threshold`` is compared strictly: only entries *larger* than it
    are reported.  ``exclude_pattern`` is searched (not anchored) in the full
    path of every directory before it is entered.
    """

    size_threshold: int
    exclude_pattern: Optional[re.Pattern[str]] = None
    binary_units: bool = False

    @classmethod
    def from_flags(
        cls,
        size_threshold: str = DEFAULT_SIZE_THRESHOLD,
        exclude_pattern: str = "",
        *,
        binary_units: bool = False,
    ) -> ScanConfig:
        """Build a config from CLI-style strings.

        Raises ``ConfigError`` when the threshold cannot be parsed or the
        pattern does not compile.  An empty pattern disables exclusion.
        """
        try:
            threshold = parse_size(size_threshold)
        except ValueError as e:
            raise ConfigError(
                f"invalid size threshold '{size_threshold}': {e}"
            ) from e

        compiled: Optional[re.Pattern[str]] = None
        if exclude_pattern:
            try:
                compiled = re.compile(exclude_pattern)
            except re.error as e:
                raise ConfigError(
                    f"could not compile regexp '{exclude_pattern}': {e}"
                ) from e

        return cls(
            size_threshold=threshold,
            exclude_pattern=compiled,
            binary_units=binary_units,
        )

    def should_skip_dir(self, path: str) -> bool:
        return self.exclude_pattern is not None and bool(
            self.exclude_pattern.search(path)
        )
