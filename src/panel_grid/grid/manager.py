"""Screen-level layout operations built on the placement and packing engine.

The engine functions return bare positions or repositioned copies. This
module is the caller that merges them back into a ``ScreenConfig``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from panel_grid.exceptions import ItemTooWideError, LayoutDefinitionError
from panel_grid.grid.definition import (
    FALLBACK_DIMENSIONS,
    ITEM_TYPE_DIMENSIONS,
    GridItem,
    GridResolution,
    ItemSize,
    NewItem,
    ScreenConfig,
    ScreenGrid,
    default_card_dimensions,
)
from panel_grid.grid.packing import get_packer
from panel_grid.grid.positioning import find_optimal_positions_for_batch

logger = logging.getLogger(__name__)


class LayoutManager:
    """Add items to screens and tidy their grids.

    All methods are pure: they return updated copies and never mutate
    the screen passed in.
    """

    @staticmethod
    def item_dimensions(item: NewItem) -> tuple[int, int]:
        """Determine width and height for a new item."""
        if item.type in ITEM_TYPE_DIMENSIONS:
            defaults = ITEM_TYPE_DIMENSIONS[item.type]
        elif item.entity_id:
            defaults = default_card_dimensions(item.entity_id)
        else:
            defaults = FALLBACK_DIMENSIONS

        w = item.width if item.width is not None else defaults[0]
        h = item.height if item.height is not None else defaults[1]
        return w, h

    @staticmethod
    def add_items(
        screen: ScreenConfig,
        new_items: Sequence[NewItem],
        resolution: GridResolution | None = None,
    ) -> ScreenConfig:
        """Place new items in the first free slots and append them to the screen.

        ``resolution`` overrides the screen's own resolution; a screen with
        no grid yet gets one.
        """
        grid = screen.grid or ScreenGrid(resolution=resolution or GridResolution())
        resolution = resolution or grid.resolution

        sizes = []
        for item in new_items:
            w, h = LayoutManager.item_dimensions(item)
            if w > resolution.columns:
                raise ItemTooWideError(item.id, w, resolution.columns)
            sizes.append(ItemSize(width=w, height=h))

        positions = find_optimal_positions_for_batch(grid.items, sizes, resolution)

        added = []
        for item, size, pos in zip(new_items, sizes, positions):
            fields = item.model_dump()
            fields.update(x=pos.x, y=pos.y, width=size.width, height=size.height)
            added.append(GridItem(**fields))
            logger.debug("Placed %s at (%d, %d) on screen %s", item.id, pos.x, pos.y, screen.id)

        return screen.model_copy(
            update={"grid": grid.model_copy(update={"items": [*grid.items, *added]})}
        )

    @staticmethod
    def tidy(screen: ScreenConfig, packer: str = "greedy") -> ScreenConfig:
        """Repack a screen's items, keeping their order in the item list."""
        if screen.grid is None:
            raise LayoutDefinitionError(f"Screen '{screen.id}' has no grid to tidy")

        pack = get_packer(packer)
        grid = screen.grid
        packed = pack(grid.items, grid.resolution.columns, grid.resolution.rows)

        by_id = {item.id: item for item in packed}
        merged = [by_id.get(item.id, item) for item in grid.items]

        moved = sum(
            1 for old, new in zip(grid.items, merged) if (old.x, old.y) != (new.x, new.y)
        )
        logger.info("Tidied screen %s with %s packer: %d of %d items moved",
                    screen.id, packer, moved, len(merged))

        return screen.model_copy(
            update={"grid": grid.model_copy(update={"items": merged})}
        )
