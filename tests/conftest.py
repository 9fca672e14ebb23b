"""Shared test fixtures for panel-grid tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from panel_grid.config import reset_settings


@pytest.fixture(autouse=True)
def _reset_settings():
    """Reset settings singleton between tests."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_config() -> dict:
    """A two-screen dashboard as exported by the panel (camelCase keys)."""
    return {
        "version": "1.0.0",
        "theme": "dark",
        "screens": [
            {
                "id": "screen-1",
                "name": "Living Room",
                "slug": "living-room",
                "type": "grid",
                "grid": {
                    "resolution": {"columns": 4, "rows": 8},
                    "items": [
                        {"id": "lamp", "type": "entity", "entityId": "light.lamp",
                         "x": 0, "y": 3, "width": 2, "height": 1},
                        {"id": "cam", "type": "entity", "entityId": "camera.door",
                         "x": 2, "y": 5, "width": 2, "height": 2},
                    ],
                },
                "children": [
                    {
                        "id": "screen-2",
                        "name": "Lights",
                        "slug": "lights",
                        "type": "grid",
                        "parentId": "screen-1",
                        "grid": {"resolution": {"columns": 12, "rows": 8}, "items": []},
                    }
                ],
            }
        ],
    }


@pytest.fixture
def sample_config_file(tmp_path: Path, sample_config: dict) -> Path:
    import yaml

    path = tmp_path / "dashboard.yaml"
    path.write_text(yaml.dump(sample_config, sort_keys=False))
    return path
