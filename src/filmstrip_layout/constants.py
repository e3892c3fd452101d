"""
Constants used internally by the filmstrip layout engine.

These are implementation-level geometry values that should not be
overridden via config files or CLI arguments.
"""

# Side margin reserved per column in tile view
TILE_VIEW_SIDE_MARGIN = 20
# Vertical margin reserved per row in tile view
TILE_VIEW_VERTICAL_MARGIN = 20

# Thumbnail aspect ratio (width / height)
TILE_ASPECT_RATIO = 16 / 9

# Top and bottom margin of the horizontal filmstrip
HORIZONTAL_VIEW_TOP_BOTTOM_MARGIN = 15

# Width of the chat side panel when open
CHAT_PANEL_WIDTH = 375

# Action types carried by the layout events
SET_TILE_VIEW_DIMENSIONS = "SET_TILE_VIEW_DIMENSIONS"
SET_HORIZONTAL_VIEW_DIMENSIONS = "SET_HORIZONTAL_VIEW_DIMENSIONS"
PIN_PARTICIPANT = "PIN_PARTICIPANT"

# Preview colors
COLOR_BLACK = (0, 0, 0)
COLOR_WHITE = (255, 255, 255)
COLOR_GREY = (60, 67, 74)
COLOR_PANEL = (96, 104, 112)
COLOR_TILE = (38, 128, 196)
