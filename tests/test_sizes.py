"""Tests for human-readable size parsing and formatting."""

from __future__ import annotations

import pytest

from disk_audit.utils.sizes import format_size, parse_size


class TestParseSize:
    """parse_size accepts SI and IEC units, case-insensitive."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", 0),
            ("42", 42),
            ("42B", 42),
            ("100MB", 100_000_000),
            ("100mb", 100_000_000),
            ("100 MB", 100_000_000),
            ("1k", 1_000),
            ("1KiB", 1_024),
            ("1.5KiB", 1_536),
            ("2Gi", 2 * 1024**3),
            ("1,000kB", 1_000_000),
            ("  3TB  ", 3 * 1000**4),
            ("0.5B", 0),
        ],
    )
    def test_valid_sizes(self, text: str, expected: int) -> None:
        assert parse_size(text) == expected

    def test_fraction_is_truncated(self) -> None:
        assert parse_size("1.9999B") == 1

    @pytest.mark.parametrize("text", ["", "MB", "-1", "1.2.3MB", "100XB", "12 bytes"])
    def test_invalid_sizes_raise(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_size(text)

    def test_unknown_unit_is_named(self) -> None:
        with pytest.raises(ValueError, match="unhandled size name: xb"):
            parse_size("100XB")


class TestFormatSize:
    """format_size keeps one decimal below 10, none above."""

    @pytest.mark.parametrize(
        "size, expected",
        [
            (0, "0 B"),
            (9, "9 B"),
            (10, "10 B"),
            (999, "999 B"),
            (1_500, "1.5 kB"),
            (150_000_000, "150 MB"),
            (200_000_000, "200 MB"),
            (1_200_000_000, "1.2 GB"),
        ],
    )
    def test_si_units(self, size: int, expected: str) -> None:
        assert format_size(size) == expected

    @pytest.mark.parametrize(
        "size, expected",
        [
            (1_024, "1.0 KiB"),
            (1_536, "1.5 KiB"),
            (150 * 1024**2, "150 MiB"),
            (1_288_490_189, "1.2 GiB"),
        ],
    )
    def test_iec_units(self, size: int, expected: str) -> None:
        assert format_size(size, binary=True) == expected

    def test_largest_unit_caps_magnitude(self) -> None:
        assert format_size(5 * 1000**9).endswith(" YB")

    @pytest.mark.parametrize(
        "size, expected",
        [
            (10_500_001, "10 MB"),
            (10_500_000, "10 MB"),
            (11_500_000, "12 MB"),
            (1_999_999, "2.0 MB"),
        ],
    )
    def test_fraction_uses_last_remainder_only(self, size: int, expected: str) -> None:
        """10_500_001 folds to exactly 10.5 MB, which rounds half to even."""
        assert format_size(size) == expected
