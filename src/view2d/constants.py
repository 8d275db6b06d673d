"""
view2d - Constants and Configuration

This module contains all constant values used throughout the viewport:
- Default view state (center, resolution)
- Zoom behaviour
- Grid geometry (margins, density, line weights)
- Rendering colours and label font

The grid and style dataclasses in models.grid_config take their defaults
from here.
"""

# ======================================================================
# VIEW STATE DEFAULTS
# ======================================================================

# Real world coordinates shown in the middle of the canvas
DEFAULT_CENTER_X = 0.0
DEFAULT_CENTER_Y = 0.0

# Zoom level measured in pixels per real world unit
DEFAULT_PIX_PER_UNIT = 5.0

# Display unit multiplier (1 real unit shown as 1 grid unit)
DEFAULT_UNIT_MULTIPLIER = 1.0

# ======================================================================
# ZOOM
# ======================================================================

# Applied once per wheel tick: > 1 zooms out, its reciprocal zooms in
WHEEL_ZOOM_FACTOR = 1.1

# ======================================================================
# GRID GEOMETRY
# ======================================================================

# Canvas inset in pixels; no grid lines are drawn inside this border
GRID_MARGIN = 15

# Target line density relative to the visible extent.
# Larger values give a coarser grid.
GRID_SIZE_FACTOR = 1.3

# Minor lines stop at GRID_MARGIN / GRID_MINOR_MARGIN_RATIO
GRID_MINOR_MARGIN_RATIO = 1.2

# Every Nth minor line is a major line
GRID_MAJOR_EVERY = 10

# Line weights in pixels
GRID_MAJOR_LINE_WIDTH = 0.4
GRID_MINOR_LINE_WIDTH = 0.15
GRID_AXIS_LINE_WIDTH = 2.0

# Label anchor distance from the near (top/left) and far (bottom/right) edge
GRID_LABEL_NEAR_INSET = 10
GRID_LABEL_FAR_INSET = 5

# ======================================================================
# RENDERING
# ======================================================================

VIEW_BACKGROUND_COLOR = '#fafad8'
GRID_LINE_COLOR = '#88c'
GRID_LABEL_COLOR = '#000000'

GRID_LABEL_FONT_FAMILY = 'monospace'
GRID_LABEL_FONT_PIXEL_SIZE = 12
GRID_LABEL_FONT_BOLD = True
