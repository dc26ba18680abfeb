"""Layout configuration.

Pixel gaps and node sizes used by the layout engine, overridable through
environment variables (``GRADIOL_LAYOUT_GAP_X=200``) or a local ``.env`` file.
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LayoutSettings(BaseSettings):
    """Geometry constants for layered layout."""

    model_config = SettingsConfigDict(
        env_prefix="GRADIOL_LAYOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    node_width: float = Field(default=140, gt=0)
    node_height: float = Field(default=60, gt=0)
    gap_x: float = Field(default=180, ge=0)  # between nodes of one layer
    gap_y: float = Field(default=100, ge=0)  # between layers
    top_margin: float = 60
    # attribute-bearing nodes: header + lines + padding
    attribute_header: float = 30
    attribute_line_height: float = 16
    attribute_padding: float = 10


settings = LayoutSettings()
