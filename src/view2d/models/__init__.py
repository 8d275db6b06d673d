"""Value types: vectors, matrices and grid configuration."""
from view2d.models.vector2d import Vector2d, ORIGIN
from view2d.models.matrix3x3 import Matrix3x3, NotInvertibleError, invert_or_raise
from view2d.models.grid_config import GridConfig, GridStyle

__all__ = [
    'Vector2d',
    'ORIGIN',
    'Matrix3x3',
    'NotInvertibleError',
    'invert_or_raise',
    'GridConfig',
    'GridStyle',
]
