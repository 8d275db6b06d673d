"""Grid layout and viewport services."""
from view2d.services.grid_layout import (
    GridLine, AxisLabel, GridLayout,
    minor_step, step_values, split_major_minor,
    label_decimals, format_label, visible_corners, layout_grid,
)
from view2d.services.viewport import ViewState, view_center, wheel_zoom_factor

__all__ = [
    'GridLine',
    'AxisLabel',
    'GridLayout',
    'minor_step',
    'step_values',
    'split_major_minor',
    'label_decimals',
    'format_label',
    'visible_corners',
    'layout_grid',
    'ViewState',
    'view_center',
    'wheel_zoom_factor',
]
