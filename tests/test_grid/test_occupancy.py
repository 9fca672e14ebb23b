"""Tests for panel_grid.grid.occupancy — cell tracking and free-space queries."""

from __future__ import annotations

from panel_grid.grid.definition import GridItem
from panel_grid.grid.occupancy import OccupancyGrid


class TestOccupy:
    def test_marks_every_cell(self):
        grid = OccupancyGrid(columns=4)
        grid.occupy(1, 2, 2, 3)
        assert len(grid) == 6
        assert grid.is_occupied(1, 2)
        assert grid.is_occupied(2, 4)
        assert not grid.is_occupied(3, 2)
        assert not grid.is_occupied(1, 5)

    def test_marking_twice_is_harmless(self):
        grid = OccupancyGrid(columns=4)
        grid.occupy(0, 0, 2, 2)
        grid.occupy(1, 1, 2, 2)
        assert len(grid) == 7

    def test_from_items(self):
        items = [
            GridItem(id="a", x=0, y=0, width=2, height=1),
            GridItem(id="b", x=2, y=1, width=1, height=1),
        ]
        grid = OccupancyGrid.from_items(items, columns=4)
        assert len(grid) == 3
        assert grid.is_occupied(2, 1)


class TestIsFree:
    def test_empty_grid(self):
        assert OccupancyGrid(columns=4).is_free(0, 0, 4, 10)

    def test_blocked_by_covered_cell(self):
        grid = OccupancyGrid(columns=4)
        grid.occupy(3, 3, 1, 1)
        assert not grid.is_free(2, 2, 2, 2)
        assert grid.is_free(0, 2, 3, 2)

    def test_column_bound_is_hard(self):
        grid = OccupancyGrid(columns=4)
        assert grid.is_free(2, 0, 2, 1)
        assert not grid.is_free(3, 0, 2, 1)

    def test_negative_origin_not_free(self):
        grid = OccupancyGrid(columns=4)
        assert not grid.is_free(-1, 0, 1, 1)
        assert not grid.is_free(0, -1, 1, 1)

    def test_unbounded_rows(self):
        assert OccupancyGrid(columns=4).is_free(0, 100, 1, 50)

    def test_bounded_rows(self):
        grid = OccupancyGrid(columns=4, rows=3)
        assert grid.is_free(0, 1, 1, 2)
        assert not grid.is_free(0, 2, 1, 2)
