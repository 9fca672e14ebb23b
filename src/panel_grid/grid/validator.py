"""Pre-flight validation for screen layouts.

Checks ids are unique, items stay inside the column bound, and no two
items cover the same cell. Reaching past the row count is only a
warning since screens scroll.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import combinations

from panel_grid.grid.definition import GridItem, GridResolution


@dataclass
class ValidationResult:
    """Result of layout validation."""

    valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)
        self.valid = False

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)


def items_overlap(a: GridItem, b: GridItem) -> bool:
    """True if the two items share at least one cell."""
    return (
        a.x < b.x + b.width
        and b.x < a.x + a.width
        and a.y < b.y + b.height
        and b.y < a.y + a.height
    )


def validate_layout(
    items: Sequence[GridItem], resolution: GridResolution
) -> ValidationResult:
    """Validate a screen's items against its resolution.

    Args:
        items: Items on one screen.
        resolution: The screen's grid resolution.

    Returns:
        ValidationResult with errors and warnings.
    """
    result = ValidationResult()

    seen: set[str] = set()
    for item in items:
        if item.id in seen:
            result.add_error(f"Duplicate item id '{item.id}'.")
        seen.add(item.id)

        if item.x + item.width > resolution.columns:
            result.add_error(
                f"Item '{item.id}' extends past column {resolution.columns}: "
                f"x({item.x}) + width({item.width}) = {item.x + item.width}."
            )
        if item.y + item.height > resolution.rows:
            result.add_warning(
                f"Item '{item.id}' extends below row {resolution.rows}."
            )

    for a, b in combinations(items, 2):
        if items_overlap(a, b):
            result.add_error(f"Items '{a.id}' and '{b.id}' overlap.")

    return result
