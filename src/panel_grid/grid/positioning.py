"""Find free slots for items being added to a screen.

Both finders scan row by row, left to right, and return the first slot
that fits. Rows are not a bound here: a screen scrolls, so an item that
does not fit above the configured row count goes below it.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from panel_grid.grid.definition import GridItem, GridResolution, Position
from panel_grid.grid.occupancy import OccupancyGrid


class Sized(Protocol):
    width: int
    height: int


def find_optimal_position(
    existing_items: Sequence[GridItem],
    item_width: int,
    item_height: int,
    resolution: GridResolution,
) -> Position:
    """Find the topmost, then leftmost, free position for a new item.

    Existing items are assumed not to overlap each other. The caller must
    make sure ``item_width`` does not exceed ``resolution.columns``; when it
    does, no column fits and the fallback position is returned.

    Args:
        existing_items: Items already on the grid.
        item_width: Width of the new item in cells.
        item_height: Height of the new item in cells.
        resolution: Grid resolution; only ``columns`` constrains the search.

    Returns:
        Position of the new item's top-left cell.
    """
    columns = resolution.columns
    occupied = OccupancyGrid.from_items(existing_items, columns)

    max_y = max((item.y + item.height for item in existing_items), default=0)

    # Row max_y + 1 is always empty, so the scan below normally succeeds
    for y in range(max_y + 2):
        for x in range(columns - item_width + 1):
            if occupied.is_free(x, y, item_width, item_height):
                return Position(x=x, y=y)

    return Position(x=0, y=max_y)


def find_optimal_positions_for_batch(
    existing_items: Sequence[GridItem],
    new_items: Sequence[Sized],
    resolution: GridResolution,
) -> list[Position]:
    """Find positions for several new items so that none of them overlap.

    Items are placed one at a time in input order. Each placed item is
    added to a working copy of the grid before the next one is placed, so
    the result is first-fit per item rather than an optimal packing.
    """
    positions: list[Position] = []
    virtual_items = list(existing_items)

    for index, new_item in enumerate(new_items):
        position = find_optimal_position(
            virtual_items, new_item.width, new_item.height, resolution
        )
        positions.append(position)

        virtual_items.append(
            GridItem.model_construct(
                id=f"temp-{index}",
                x=position.x,
                y=position.y,
                width=new_item.width,
                height=new_item.height,
            )
        )

    return positions
