"""Core data models for dashboard screens and grid items.

The layout engine only ever reads ``width``/``height`` and rewrites
``x``/``y``. Every other field, including unknown extras, is payload
and passes through untouched.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel


class PanelModel(BaseModel):
    """Accepts both snake_case and the panel's camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_serializer(mode="wrap")
    def _omit_empty_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # Declared fields holding None are left out; extras are payload and always kept
        data = handler(self)
        extras = self.model_extra or {}
        return {k: v for k, v in data.items() if v is not None or k in extras}


class GridResolution(PanelModel):
    """Grid size of a screen. Columns are a hard bound, rows are advisory."""

    columns: int = Field(default=12, ge=1)
    rows: int = Field(default=8, ge=1)


class Position(PanelModel):
    """Top-left cell of a placed item."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int


class ItemSize(PanelModel):
    """Footprint of an item that has not been placed yet."""

    width: int = Field(ge=1)
    height: int = Field(ge=1)


class GridItem(PanelModel):
    """A widget placed on a screen grid."""

    model_config = ConfigDict(extra="allow")

    id: str
    type: Literal["entity", "separator", "text"] = "entity"
    entity_id: str | None = None
    title: str | None = None
    x: int = Field(default=0, ge=0)
    y: int = Field(default=0, ge=0)
    width: int = Field(default=2, ge=1)
    height: int = Field(default=2, ge=1)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


class NewItem(PanelModel):
    """An item requested for a screen before it has a position.

    Missing dimensions are filled from the card defaults.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    type: Literal["entity", "separator", "text"] = "entity"
    entity_id: str | None = None
    title: str | None = None
    width: int | None = Field(default=None, ge=1)
    height: int | None = Field(default=None, ge=1)


class ScreenGrid(PanelModel):
    resolution: GridResolution = Field(default_factory=GridResolution)
    items: list[GridItem] = Field(default_factory=list)


class ScreenConfig(PanelModel):
    """A dashboard screen. Screens nest through ``children``."""

    id: str
    name: str
    slug: str = ""
    type: Literal["grid"] = "grid"
    parent_id: str | None = None
    children: list[ScreenConfig] = Field(default_factory=list)
    grid: ScreenGrid | None = None

    def iter_screens(self) -> Iterator[ScreenConfig]:
        """Yield this screen and all descendants, depth-first."""
        yield self
        for child in self.children:
            yield from child.iter_screens()


class DashboardConfig(PanelModel):
    """Complete dashboard configuration as exported by the panel."""

    version: str = "1.0.0"
    screens: list[ScreenConfig] = Field(default_factory=list)
    theme: Literal["light", "dark", "auto"] = "auto"

    def iter_screens(self) -> Iterator[ScreenConfig]:
        for screen in self.screens:
            yield from screen.iter_screens()

    def find_screen(self, key: str) -> ScreenConfig | None:
        """Find a screen by id or slug."""
        for screen in self.iter_screens():
            if screen.id == key or screen.slug == key:
                return screen
        return None

    def replace_screen(self, updated: ScreenConfig) -> DashboardConfig:
        """Return a copy with the screen of the same id swapped for ``updated``."""

        def _swap(screens: list[ScreenConfig]) -> list[ScreenConfig]:
            result = []
            for screen in screens:
                if screen.id == updated.id:
                    result.append(updated)
                else:
                    result.append(
                        screen.model_copy(update={"children": _swap(screen.children)})
                    )
            return result

        return self.model_copy(update={"screens": _swap(self.screens)})


# Default card footprints (width, height) by Home Assistant entity domain
CARD_DEFAULT_DIMENSIONS: dict[str, tuple[int, int]] = {
    "camera": (4, 2),
    "climate": (3, 3),
    "weather": (4, 3),
    "switch": (2, 1),
    "input_boolean": (2, 1),
    "light": (2, 2),
}

ITEM_TYPE_DIMENSIONS: dict[str, tuple[int, int]] = {
    "separator": (4, 1),
    "text": (3, 2),
}

FALLBACK_DIMENSIONS = (2, 2)


def default_card_dimensions(entity_id: str) -> tuple[int, int]:
    """Default (width, height) for an entity card, keyed by its domain."""
    domain = entity_id.split(".", 1)[0]
    return CARD_DEFAULT_DIMENSIONS.get(domain, FALLBACK_DIMENSIONS)
