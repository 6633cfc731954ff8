"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

from surfin.config.defaults import (
    DEFAULT_GRAPH_HEIGHT,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_SPOTS_PATH,
    DEFAULT_VIEWPORT_WIDTH,
    MSW_BASE_URL,
    MSW_SITE_MAP_URL,
)
from surfin.ui.layout import Layout, east_asian_width, narrow_width


class CellWidthMode(StrEnum):
    NARROW = "narrow"          # one cell per code point
    EAST_ASIAN = "east-asian"  # wide/fullwidth glyphs take two cells


class LayoutConfig(BaseModel):
    model_config = {"extra": "forbid"}

    viewport_width: int = Field(default=DEFAULT_VIEWPORT_WIDTH, ge=20, le=400)
    graph_height: int = Field(default=DEFAULT_GRAPH_HEIGHT, ge=2, le=100)
    cell_width: CellWidthMode = CellWidthMode.NARROW

    def to_layout(self) -> Layout:
        cell_width = (
            east_asian_width if self.cell_width == CellWidthMode.EAST_ASIAN
            else narrow_width
        )
        return Layout(
            viewport_width=self.viewport_width,
            graph_height=self.graph_height,
            cell_width=cell_width,
        )


class MswConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = MSW_BASE_URL
    api_key: str | None = None  # falls back to $MSW_API_KEY
    timeout: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=3, ge=0)
    retry_base_delay: float = Field(default=2.0, ge=0.0)
    site_map_url: str = MSW_SITE_MAP_URL


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)


class SurfinConfig(BaseModel):
    model_config = {"extra": "forbid"}

    layout: LayoutConfig = LayoutConfig()
    msw: MswConfig = MswConfig()
    server: ServerConfig = ServerConfig()
    spots_path: str = DEFAULT_SPOTS_PATH
