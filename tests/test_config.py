"""Tests for panel_grid.config — settings, validation, and singleton."""

from __future__ import annotations

import pytest

from panel_grid.config import PACKER_NAMES, PanelGridSettings, get_settings, reset_settings
from panel_grid.exceptions import ConfigurationError
from panel_grid.grid.definition import GridResolution
from panel_grid.grid.packing import PACKERS


class TestDefaults:
    def test_values(self):
        s = PanelGridSettings(_env_file=None)
        assert s.default_columns == 12
        assert s.default_rows == 8
        assert s.default_packer == "greedy"
        assert s.log_level == "WARNING"

    def test_default_resolution(self):
        s = PanelGridSettings(default_columns=6, default_rows=4)
        assert s.default_resolution == GridResolution(columns=6, rows=4)


class TestEnvironment:
    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("PANEL_GRID_DEFAULT_COLUMNS", "24")
        monkeypatch.setenv("PANEL_GRID_DEFAULT_PACKER", "compact")
        s = PanelGridSettings()
        assert s.default_columns == 24
        assert s.default_packer == "compact"


class TestValidation:
    def test_packer_names_follow_registry(self):
        assert PACKER_NAMES == tuple(PACKERS)
        for name in PACKERS:
            assert PanelGridSettings(default_packer=name).default_packer == name

    def test_packer_normalized(self):
        assert PanelGridSettings(default_packer=" Compact ").default_packer == "compact"

    def test_unknown_packer(self):
        with pytest.raises(ValueError, match="default_packer"):
            PanelGridSettings(default_packer="optimal")

    def test_log_level_normalized(self):
        assert PanelGridSettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValueError):
            PanelGridSettings(log_level="chatty")

    def test_zero_columns_rejected(self):
        with pytest.raises(ValueError):
            PanelGridSettings(default_columns=0)


class TestSingleton:
    def test_returns_same_instance(self):
        assert get_settings() is get_settings()

    def test_overrides_replace_instance(self):
        first = get_settings()
        second = get_settings(default_packer="compact")
        assert second is not first
        assert get_settings().default_packer == "compact"

    def test_reset(self):
        first = get_settings()
        reset_settings()
        assert get_settings() is not first

    def test_invalid_override_raises_configuration_error(self):
        with pytest.raises(ConfigurationError, match="default_packer"):
            get_settings(default_packer="nope")
