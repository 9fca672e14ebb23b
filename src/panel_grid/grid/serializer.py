"""Read and write dashboard configurations as YAML or JSON.

Older exports grouped a screen's items into ``sections`` and had no
screen slugs. Both are migrated on load.
"""

from __future__ import annotations

import copy
import json
import logging
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from panel_grid.exceptions import LayoutDefinitionError
from panel_grid.grid.definition import DashboardConfig

logger = logging.getLogger(__name__)


def generate_slug(name: str) -> str:
    """URL-safe slug for a screen name."""
    slug = name.lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug, flags=re.ASCII)
    slug = re.sub(r"[\s_-]+", "-", slug)
    return slug.strip("-")


def ensure_unique_slug(base_slug: str, existing: set[str]) -> str:
    if base_slug not in existing:
        return base_slug
    counter = 1
    while f"{base_slug}-{counter}" in existing:
        counter += 1
    return f"{base_slug}-{counter}"


def _migrate_screen(screen: dict[str, Any], slugs: set[str]) -> None:
    grid = screen.get("grid")
    if isinstance(grid, dict):
        sections = grid.pop("sections", None)
        if sections:
            items = []
            for section in sections:
                items.extend(section.get("items") or [])
            grid["items"] = items
            logger.info("Flattened %d sections of screen %s", len(sections), screen.get("id"))
        if not grid.get("items"):
            grid["items"] = []

    if not screen.get("slug") and screen.get("name"):
        screen["slug"] = ensure_unique_slug(generate_slug(screen["name"]), slugs)
        logger.info("Assigned slug '%s' to screen %s", screen["slug"], screen.get("id"))
    if screen.get("slug"):
        slugs.add(screen["slug"])

    if not screen.get("children"):
        screen["children"] = []
    for child in screen["children"]:
        if isinstance(child, dict):
            _migrate_screen(child, slugs)


class ConfigSerializer:
    """Convert ``DashboardConfig`` to and from YAML/JSON documents."""

    @staticmethod
    def from_dict(data: Any) -> DashboardConfig:
        if not isinstance(data, dict):
            raise LayoutDefinitionError(
                f"Dashboard configuration must be a mapping, got {type(data).__name__}"
            )

        data = copy.deepcopy(data)

        slugs: set[str] = set()
        for screen in data.get("screens") or []:
            if isinstance(screen, dict):
                _migrate_screen(screen, slugs)

        try:
            return DashboardConfig.model_validate(data)
        except ValidationError as e:
            raise LayoutDefinitionError(f"Invalid dashboard configuration:\n{e}") from e

    @staticmethod
    def to_dict(config: DashboardConfig) -> dict[str, Any]:
        return config.model_dump(by_alias=True)

    @staticmethod
    def from_yaml(yaml_str: str) -> DashboardConfig:
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise LayoutDefinitionError(f"Invalid YAML: {e}") from e
        return ConfigSerializer.from_dict(data)

    @staticmethod
    def to_yaml(config: DashboardConfig) -> str:
        return yaml.dump(
            ConfigSerializer.to_dict(config), default_flow_style=False, sort_keys=False, width=120
        )

    @staticmethod
    def from_json(json_str: str) -> DashboardConfig:
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise LayoutDefinitionError(f"Invalid JSON: {e}") from e
        return ConfigSerializer.from_dict(data)

    @staticmethod
    def to_json(config: DashboardConfig) -> str:
        return json.dumps(ConfigSerializer.to_dict(config), indent=2)

    @staticmethod
    def load(text: str, fmt: str) -> DashboardConfig:
        """Parse ``text`` as ``yaml`` or ``json``."""
        if fmt == "json":
            return ConfigSerializer.from_json(text)
        if fmt in ("yaml", "yml"):
            return ConfigSerializer.from_yaml(text)
        raise LayoutDefinitionError(f"Unsupported format '{fmt}'. Use yaml or json.")

    @staticmethod
    def dump(config: DashboardConfig, fmt: str) -> str:
        if fmt == "json":
            return ConfigSerializer.to_json(config)
        if fmt in ("yaml", "yml"):
            return ConfigSerializer.to_yaml(config)
        raise LayoutDefinitionError(f"Unsupported format '{fmt}'. Use yaml or json.")

    @staticmethod
    def format_for(path: Path) -> str:
        return "json" if path.suffix.lower() == ".json" else "yaml"

    @staticmethod
    def read_file(path: Path) -> DashboardConfig:
        if not path.exists():
            raise LayoutDefinitionError(f"File not found: {path}")
        return ConfigSerializer.load(path.read_text(), ConfigSerializer.format_for(path))

    @staticmethod
    def write_file(config: DashboardConfig, path: Path) -> None:
        path.write_text(ConfigSerializer.dump(config, ConfigSerializer.format_for(path)))
        logger.info("Wrote dashboard configuration to %s", path)
