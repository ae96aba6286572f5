"""Tests for ScanConfig construction from CLI-style flags."""

from __future__ import annotations

import dataclasses

import pytest

from disk_audit.core.config import ConfigError, ScanConfig


class TestScanConfigFromFlags:
    def test_defaults(self) -> None:
        cfg = ScanConfig.from_flags()
        assert cfg.size_threshold == 100_000_000
        assert cfg.exclude_pattern is None
        assert cfg.binary_units is False

    def test_threshold_and_pattern(self) -> None:
        cfg = ScanConfig.from_flags("1GiB", r"/\.cache$", binary_units=True)
        assert cfg.size_threshold == 1024**3
        assert cfg.exclude_pattern is not None
        assert cfg.exclude_pattern.pattern == r"/\.cache$"
        assert cfg.binary_units is True

    def test_empty_pattern_disables_exclusion(self) -> None:
        cfg = ScanConfig.from_flags("1MB", "")
        assert cfg.exclude_pattern is None
        assert cfg.should_skip_dir("/anything") is False

    def test_malformed_threshold(self) -> None:
        with pytest.raises(ConfigError, match="invalid size threshold 'lots'"):
            ScanConfig.from_flags("lots")

    def test_malformed_pattern(self) -> None:
        with pytest.raises(ConfigError, match=r"could not compile regexp '\(unclosed'"):
            ScanConfig.from_flags("1MB", "(unclosed")

    def test_config_error_is_value_error(self) -> None:
        assert issubclass(ConfigError, ValueError)

    def test_immutable(self) -> None:
        cfg = ScanConfig.from_flags("1MB")
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.size_threshold = 0  # type: ignore[misc]


class TestShouldSkipDir:
    def test_pattern_is_searched_not_anchored(self) -> None:
        cfg = ScanConfig.from_flags("1MB", "node_modules")
        assert cfg.should_skip_dir("/srv/app/node_modules")
        assert cfg.should_skip_dir("/srv/node_modules/pkg")
        assert not cfg.should_skip_dir("/srv/app/src")

    def test_anchored_pattern(self) -> None:
        cfg = ScanConfig.from_flags("1MB", "^/root/tmp")
        assert cfg.should_skip_dir("/root/tmp")
        assert not cfg.should_skip_dir("/home/root/tmp")
