"""
Configuration schema and loader for the filmstrip layout engine.

Defines Pydantic models representing structured configuration sections
and a TOML-based config loader with validation support.
"""

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, Field, model_validator

from filmstrip_layout.config_defaults import (
    DEFAULT_DISABLE_RESPONSIVE_TILES,
    DEFAULT_HORIZONTAL_MAX_HEIGHT,
    DEFAULT_HORIZONTAL_MIN_HEIGHT,
    DEFAULT_MAX_COLUMNS,
    DEFAULT_PANEL_OPEN,
    DEFAULT_TILE_FIXED_WIDTH,
    DEFAULT_TILE_MAX_WIDTH,
    DEFAULT_TILE_MIN_WIDTH,
)
from filmstrip_layout.constants import (
    CHAT_PANEL_WIDTH,
    HORIZONTAL_VIEW_TOP_BOTTOM_MARGIN,
    TILE_ASPECT_RATIO,
    TILE_VIEW_SIDE_MARGIN,
    TILE_VIEW_VERTICAL_MARGIN,
)
from filmstrip_layout.sizing.geometry import (
    LayoutSettings,
    ThumbnailBounds,
    round_half_up,
    size_from_width,
)
from filmstrip_layout.type_defs import LayoutFlags, ThumbnailSize


class TileViewConfig(BaseModel):
    """Control thumbnail sizing in tile view."""

    side_margin: int = Field(TILE_VIEW_SIDE_MARGIN, ge=0)
    vertical_margin: int = Field(TILE_VIEW_VERTICAL_MARGIN, ge=0)
    min_width: int = Field(DEFAULT_TILE_MIN_WIDTH, ge=1)
    max_width: int = Field(DEFAULT_TILE_MAX_WIDTH, ge=1)
    fixed_width: int = Field(DEFAULT_TILE_FIXED_WIDTH, ge=1)
    # Derived from fixed_width and the aspect ratio when omitted
    fixed_height: int | None = Field(None, ge=1)
    disable_responsive_tiles: bool = DEFAULT_DISABLE_RESPONSIVE_TILES
    max_columns: int = Field(DEFAULT_MAX_COLUMNS, ge=1)

    @model_validator(mode="after")
    def _check_bounds(self) -> "TileViewConfig":
        if self.min_width > self.max_width:
            msg = (f"min_width ({self.min_width}) must not exceed "
                   f"max_width ({self.max_width})")
            raise ValueError(msg)
        return self


class HorizontalViewConfig(BaseModel):
    """Control thumbnail sizing in horizontal view."""

    top_bottom_margin: int = Field(HORIZONTAL_VIEW_TOP_BOTTOM_MARGIN, ge=0)
    min_height: int = Field(DEFAULT_HORIZONTAL_MIN_HEIGHT, ge=1)
    max_height: int = Field(DEFAULT_HORIZONTAL_MAX_HEIGHT, ge=1)

    @model_validator(mode="after")
    def _check_bounds(self) -> "HorizontalViewConfig":
        if self.min_height > self.max_height:
            msg = (f"min_height ({self.min_height}) must not exceed "
                   f"max_height ({self.max_height})")
            raise ValueError(msg)
        return self


class PanelConfig(BaseModel):
    """Describe the side panel that reserves horizontal space."""

    open: bool = DEFAULT_PANEL_OPEN
    reserved_width: int = Field(CHAT_PANEL_WIDTH, ge=0)


class FilmstripLayoutConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml, grouping related parameters
    under logical categories.
    """

    aspect_ratio: float = Field(TILE_ASPECT_RATIO, gt=0)
    tile_view: TileViewConfig = Field(
        default_factory=lambda: TileViewConfig.model_validate({}),
    )
    horizontal_view: HorizontalViewConfig = Field(
        default_factory=lambda: HorizontalViewConfig.model_validate({}),
    )
    panel: PanelConfig = Field(
        default_factory=lambda: PanelConfig.model_validate({}),
    )

    @model_validator(mode="after")
    def _check_fixed_tile_size(self) -> "FilmstripLayoutConfig":
        tile = self.tile_view
        if not tile.min_width <= tile.fixed_width <= tile.max_width:
            msg = (f"fixed_width ({tile.fixed_width}) must lie within "
                   f"[{tile.min_width}, {tile.max_width}]")
            raise ValueError(msg)
        expected = round_half_up(tile.fixed_width / self.aspect_ratio)
        if tile.fixed_height is not None and tile.fixed_height != expected:
            msg = (f"fixed_height ({tile.fixed_height}) does not match "
                   f"fixed_width {tile.fixed_width} at aspect ratio "
                   f"{self.aspect_ratio:g} (expected {expected})")
            raise ValueError(msg)
        return self

    @property
    def fixed_tile_size(self) -> ThumbnailSize:
        """Size used when responsive tiles are disabled."""
        return size_from_width(self.tile_view.fixed_width, self.aspect_ratio)


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> FilmstripLayoutConfig:
        """
        Load a layout configuration from a TOML file.

        Returns a validated FilmstripLayoutConfig instance based on the
        file contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return FilmstripLayoutConfig.model_validate(doc.unwrap())


# CLI destination -> (config section, field)
_CLI_OVERRIDES: dict[str, tuple[str, str]] = {
    "panel_open": ("panel", "open"),
    "panel_width": ("panel", "reserved_width"),
    "disable_responsive": ("tile_view", "disable_responsive_tiles"),
    "max_columns": ("tile_view", "max_columns"),
}


def build_config_from_cli(
    cli_args: dict[str, Any],
    base_config: FilmstripLayoutConfig | None = None,
) -> FilmstripLayoutConfig:
    """
    Overlay CLI values on a base configuration.

    Keys that are missing or ``None`` keep the base value. Boolean flags
    only override when set, so an unset ``--panel-open`` never closes a
    panel the config file opened.
    """
    data = (base_config or FilmstripLayoutConfig()).model_dump()
    for dest, (section, key) in _CLI_OVERRIDES.items():
        value = cli_args.get(dest)
        if value is None or value is False:
            continue
        data[section][key] = value
    return FilmstripLayoutConfig.model_validate(data)


def settings_from_config(cfg: FilmstripLayoutConfig) -> LayoutSettings:
    """Build the numeric settings the sizers consume."""
    tile = cfg.tile_view
    horizontal = cfg.horizontal_view
    return LayoutSettings(
        side_margin=tile.side_margin,
        vertical_margin=tile.vertical_margin,
        aspect_ratio=cfg.aspect_ratio,
        tile_bounds=ThumbnailBounds(
            min_width=tile.min_width,
            max_width=tile.max_width,
            aspect_ratio=cfg.aspect_ratio,
        ),
        fixed_tile_size=cfg.fixed_tile_size,
        horizontal_margin=horizontal.top_bottom_margin,
        horizontal_min_height=horizontal.min_height,
        horizontal_max_height=horizontal.max_height,
    )


def flags_from_config(cfg: FilmstripLayoutConfig) -> LayoutFlags:
    """Build the tile view flags from the panel and responsive settings."""
    return LayoutFlags(
        panel_open=cfg.panel.open,
        panel_reserved_width=cfg.panel.reserved_width,
        responsive_disabled=cfg.tile_view.disable_responsive_tiles,
    )
