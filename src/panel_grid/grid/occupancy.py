"""Cell occupancy tracking shared by the placement and packing algorithms."""

from __future__ import annotations

from collections.abc import Iterable

from panel_grid.grid.definition import GridItem


class OccupancyGrid:
    """Set of covered ``(x, y)`` cells on a grid ``columns`` wide.

    With ``rows=None`` the grid grows downward without limit. With a row
    count, rectangles reaching past the last row are never free.
    Built fresh for every operation; never cached between calls.
    """

    def __init__(self, columns: int, rows: int | None = None):
        self.columns = columns
        self.rows = rows
        self._cells: set[tuple[int, int]] = set()

    @classmethod
    def from_items(
        cls, items: Iterable[GridItem], columns: int, rows: int | None = None
    ) -> OccupancyGrid:
        grid = cls(columns, rows)
        for item in items:
            grid.occupy_item(item)
        return grid

    def occupy(self, x: int, y: int, width: int, height: int) -> None:
        """Mark every cell of the rectangle as covered. Marking twice is harmless."""
        for dy in range(height):
            for dx in range(width):
                self._cells.add((x + dx, y + dy))

    def occupy_item(self, item: GridItem) -> None:
        self.occupy(item.x, item.y, item.width, item.height)

    def is_occupied(self, x: int, y: int) -> bool:
        return (x, y) in self._cells

    def is_free(self, x: int, y: int, width: int, height: int) -> bool:
        """True if the rectangle is inside the bounds and touches no covered cell."""
        if x < 0 or y < 0 or x + width > self.columns:
            return False
        if self.rows is not None and y + height > self.rows:
            return False
        return all(
            (x + dx, y + dy) not in self._cells
            for dy in range(height)
            for dx in range(width)
        )

    def __len__(self) -> int:
        return len(self._cells)
