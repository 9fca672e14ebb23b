"""Custom exception hierarchy for panel-grid."""

from __future__ import annotations


class PanelGridError(Exception):
    """Base exception for all panel-grid errors."""


class ConfigurationError(PanelGridError):
    """Settings are missing or invalid."""


class LayoutDefinitionError(PanelGridError):
    """Error in dashboard configuration structure or content."""


class ScreenNotFoundError(LayoutDefinitionError):
    """No screen matches the given id or slug."""

    def __init__(self, screen_id: str):
        self.screen_id = screen_id
        super().__init__(f"Screen not found: {screen_id}")


class ItemTooWideError(LayoutDefinitionError):
    """An item is wider than the grid it is being placed on."""

    def __init__(self, item_id: str, width: int, columns: int):
        self.item_id = item_id
        self.width = width
        self.columns = columns
        super().__init__(
            f"Item '{item_id}' is {width} columns wide but the grid only has {columns}"
        )


class UnknownPackerError(PanelGridError):
    """Requested packing algorithm does not exist."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = available
        msg = f"Unknown packer: {name}"
        if available:
            from difflib import get_close_matches

            suggestions = get_close_matches(name, available, n=3, cutoff=0.4)
            if suggestions:
                msg += f". Did you mean: {', '.join(suggestions)}?"
            else:
                msg += f". Available: {', '.join(available)}"
        super().__init__(msg)
