"""Tests for the screen layout validator."""

from panel_grid.grid.definition import GridItem, GridResolution
from panel_grid.grid.validator import items_overlap, validate_layout


def _item(id: str, x: int, y: int, w: int = 1, h: int = 1) -> GridItem:
    return GridItem(id=id, x=x, y=y, width=w, height=h)


RES = GridResolution(columns=4, rows=4)


class TestItemsOverlap:
    def test_shared_cell(self):
        assert items_overlap(_item("a", 0, 0, 2, 2), _item("b", 1, 1, 2, 2))

    def test_touching_edges_do_not_overlap(self):
        assert not items_overlap(_item("a", 0, 0, 2, 2), _item("b", 2, 0, 2, 2))
        assert not items_overlap(_item("a", 0, 0, 2, 2), _item("b", 0, 2, 2, 2))

    def test_containment(self):
        assert items_overlap(_item("outer", 0, 0, 4, 4), _item("inner", 1, 1))


class TestValidateLayout:
    def test_valid_layout_passes(self):
        result = validate_layout([_item("a", 0, 0, 2, 2), _item("b", 2, 0, 2, 2)], RES)
        assert result.valid is True
        assert result.errors == []
        assert result.warnings == []

    def test_empty_layout_passes(self):
        assert validate_layout([], RES).valid is True

    def test_overlap_is_error(self):
        result = validate_layout([_item("a", 0, 0, 2, 2), _item("b", 1, 1)], RES)
        assert result.valid is False
        assert any("overlap" in e for e in result.errors)

    def test_column_overflow_is_error(self):
        result = validate_layout([_item("wide", 3, 0, 2, 1)], RES)
        assert result.valid is False
        assert any("wide" in e and "column" in e for e in result.errors)

    def test_row_overflow_is_warning(self):
        result = validate_layout([_item("low", 0, 3, 1, 2)], RES)
        assert result.valid is True
        assert any("low" in w for w in result.warnings)

    def test_duplicate_id(self):
        result = validate_layout([_item("a", 0, 0), _item("a", 2, 0)], RES)
        assert result.valid is False
        assert any("Duplicate" in e for e in result.errors)
