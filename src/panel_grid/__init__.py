"""panel-grid: grid placement and packing for dashboard screens."""

__version__ = "0.1.0"
