"""Tests for panel_grid.exceptions — exception hierarchy and formatting."""

from __future__ import annotations

from panel_grid.exceptions import (
    ConfigurationError,
    ItemTooWideError,
    LayoutDefinitionError,
    PanelGridError,
    ScreenNotFoundError,
    UnknownPackerError,
)


class TestHierarchy:
    def test_all_inherit_from_base(self):
        assert issubclass(ConfigurationError, PanelGridError)
        assert issubclass(LayoutDefinitionError, PanelGridError)
        assert issubclass(ScreenNotFoundError, LayoutDefinitionError)
        assert issubclass(ItemTooWideError, LayoutDefinitionError)
        assert issubclass(UnknownPackerError, PanelGridError)


class TestScreenNotFoundError:
    def test_stores_id(self):
        e = ScreenNotFoundError("kitchen")
        assert e.screen_id == "kitchen"
        assert "kitchen" in str(e)


class TestItemTooWideError:
    def test_message(self):
        e = ItemTooWideError("cam", 6, 4)
        assert (e.item_id, e.width, e.columns) == ("cam", 6, 4)
        assert "6 columns" in str(e)


class TestUnknownPackerError:
    def test_basic(self):
        assert "skyline" in str(UnknownPackerError("skyline"))

    def test_suggests_similar(self):
        e = UnknownPackerError("gready", ["greedy", "compact"])
        assert "Did you mean: greedy" in str(e)

    def test_lists_available_without_match(self):
        e = UnknownPackerError("zzz", ["greedy", "compact"])
        assert "Available: greedy, compact" in str(e)
