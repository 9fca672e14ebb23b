"""Repack a screen's items to close gaps.

Two heuristics are available. Neither backtracks, so both can leave
space a smarter packer would fill:

* ``greedy``: largest area first, each item goes in the first free slot
  scanning row by row over a bounded occupancy grid.
* ``compact``: tallest first, each item goes where the column skyline is
  lowest.

An item that does not fit inside ``columns x rows`` keeps its previous
position. Results come back in packing order; callers merge by ``id``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from panel_grid.exceptions import UnknownPackerError
from panel_grid.grid.definition import GridItem
from panel_grid.grid.occupancy import OccupancyGrid

logger = logging.getLogger(__name__)


class PlacementOutcome(str, Enum):
    PLACED = "placed"
    KEPT_ORIGINAL = "kept_original"


@dataclass(frozen=True)
class Placement:
    """Where the packer put one item, and whether it moved it at all."""

    item: GridItem
    x: int
    y: int
    outcome: PlacementOutcome

    @classmethod
    def placed(cls, item: GridItem, x: int, y: int) -> Placement:
        return cls(item, x, y, PlacementOutcome.PLACED)

    @classmethod
    def kept(cls, item: GridItem) -> Placement:
        logger.debug("No room for item %s (%dx%d), keeping (%d, %d)",
                     item.id, item.width, item.height, item.x, item.y)
        return cls(item, item.x, item.y, PlacementOutcome.KEPT_ORIGINAL)

    def apply(self) -> GridItem:
        return self.item.model_copy(update={"x": self.x, "y": self.y})


def plan_greedy(items: Sequence[GridItem], columns: int, rows: int) -> list[Placement]:
    """Placements for the largest-area-first packer."""
    # sorted() is stable: equal areas keep their input order
    sorted_items = sorted(items, key=lambda item: item.width * item.height, reverse=True)

    grid = OccupancyGrid(columns, rows)
    placements: list[Placement] = []

    for item in sorted_items:
        placement = _first_free_slot(grid, item, columns, rows)
        if placement is None:
            placements.append(Placement.kept(item))
            continue
        grid.occupy(placement.x, placement.y, item.width, item.height)
        placements.append(placement)

    return placements


def _first_free_slot(
    grid: OccupancyGrid, item: GridItem, columns: int, rows: int
) -> Placement | None:
    for y in range(rows - item.height + 1):
        for x in range(columns - item.width + 1):
            if grid.is_free(x, y, item.width, item.height):
                return Placement.placed(item, x, y)
    return None


def plan_skyline(items: Sequence[GridItem], columns: int, rows: int) -> list[Placement]:
    """Placements for the column-height packer."""
    sorted_items = sorted(items, key=lambda item: (-item.height, -item.width))

    heights = [0] * columns
    placements: list[Placement] = []

    for item in sorted_items:
        best_x = 0
        best_y: int | None = None

        for x in range(columns - item.width + 1):
            y = max(heights[x:x + item.width], default=0)
            if best_y is None or y < best_y:
                best_x, best_y = x, y

        if best_y is None or best_y + item.height > rows:
            placements.append(Placement.kept(item))
            continue

        for x in range(best_x, best_x + item.width):
            heights[x] = best_y + item.height
        placements.append(Placement.placed(item, best_x, best_y))

    return placements


def pack_grid_items(items: Sequence[GridItem], columns: int, rows: int) -> list[GridItem]:
    """Repack items largest area first into a ``columns x rows`` grid."""
    if not items:
        return []
    return [placement.apply() for placement in plan_greedy(items, columns, rows)]


def pack_grid_items_compact(
    items: Sequence[GridItem], columns: int, rows: int
) -> list[GridItem]:
    """Repack items tallest first, filling the lowest column skyline."""
    if not items:
        return []
    return [placement.apply() for placement in plan_skyline(items, columns, rows)]


Packer = Callable[[Sequence[GridItem], int, int], list[GridItem]]

PACKERS: dict[str, Packer] = {
    "greedy": pack_grid_items,
    "compact": pack_grid_items_compact,
}


def get_packer(name: str) -> Packer:
    try:
        return PACKERS[name]
    except KeyError:
        raise UnknownPackerError(name, list(PACKERS)) from None
