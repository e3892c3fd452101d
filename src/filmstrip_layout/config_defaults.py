"""Shared default values for user-facing configuration settings."""

# Tile view
DEFAULT_TILE_MIN_WIDTH = 120
DEFAULT_TILE_MAX_WIDTH = 1280
DEFAULT_TILE_FIXED_WIDTH = 320
DEFAULT_DISABLE_RESPONSIVE_TILES = False
DEFAULT_MAX_COLUMNS = 5

# Horizontal view
DEFAULT_HORIZONTAL_MIN_HEIGHT = 90
DEFAULT_HORIZONTAL_MAX_HEIGHT = 200

# Side panel
DEFAULT_PANEL_OPEN = False

# Preview
DEFAULT_PREVIEW_OUTPUT = "layout_preview.png"
