"""Grid placement, packing, and screen layout management."""

from panel_grid.grid.definition import (
    DashboardConfig,
    GridItem,
    GridResolution,
    ItemSize,
    NewItem,
    Position,
    ScreenConfig,
)
from panel_grid.grid.manager import LayoutManager
from panel_grid.grid.packing import pack_grid_items, pack_grid_items_compact
from panel_grid.grid.positioning import (
    find_optimal_position,
    find_optimal_positions_for_batch,
)

__all__ = [
    "DashboardConfig",
    "GridItem",
    "GridResolution",
    "ItemSize",
    "LayoutManager",
    "NewItem",
    "Position",
    "ScreenConfig",
    "find_optimal_position",
    "find_optimal_positions_for_batch",
    "pack_grid_items",
    "pack_grid_items_compact",
]
