"""Configuration management for panel-grid.

Loads settings from environment variables or a .env file.
"""

from __future__ import annotations

import logging
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from panel_grid.exceptions import ConfigurationError
from panel_grid.grid.definition import GridResolution
from panel_grid.grid.packing import PACKERS

PACKER_NAMES = tuple(PACKERS)


class PanelGridSettings(BaseSettings):
    """Application settings loaded from environment variables and .env files.

    Priority (highest to lowest):
      1. Explicit constructor arguments
      2. Environment variables (PANEL_GRID_DEFAULT_COLUMNS, etc.)
      3. .env file in current directory
    """

    model_config = SettingsConfigDict(
        env_prefix="PANEL_GRID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_columns: Annotated[int, Field(ge=1, description="Grid columns for new screens")] = 12
    default_rows: Annotated[int, Field(ge=1, description="Grid rows for new screens")] = 8
    default_packer: Annotated[
        str, Field(description="Packing algorithm used by tidy: greedy or compact")
    ] = "greedy"
    log_level: Annotated[str, Field(description="Root log level for the CLI")] = "WARNING"

    @field_validator("default_packer")
    @classmethod
    def validate_packer(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in PACKER_NAMES:
            raise ValueError(f"default_packer must be one of {PACKER_NAMES}, got '{v}'")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{v}'")
        return v

    @property
    def default_resolution(self) -> GridResolution:
        return GridResolution(columns=self.default_columns, rows=self.default_rows)


_settings: PanelGridSettings | None = None


def get_settings(**overrides: str) -> PanelGridSettings:
    """Get or create the application settings singleton."""
    global _settings
    if _settings is None or overrides:
        try:
            _settings = PanelGridSettings(**overrides)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
    return _settings


def reset_settings() -> None:
    """Reset cached settings (useful for testing)."""
    global _settings
    _settings = None
