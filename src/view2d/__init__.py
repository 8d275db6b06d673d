"""view2d - pan/zoom viewport transforms and adaptive coordinate grid."""
from view2d.models import Vector2d, Matrix3x3, NotInvertibleError, GridConfig, GridStyle
from view2d.services import GridLayout, ViewState, layout_grid

__version__ = '1.0.0'

__all__ = [
    'Vector2d',
    'Matrix3x3',
    'NotInvertibleError',
    'GridConfig',
    'GridStyle',
    'GridLayout',
    'ViewState',
    'layout_grid',
]
