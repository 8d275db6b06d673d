"""Qt drawing components."""
from view2d.components.grid_painter import Overlay, matrix_to_qtransform, paint_grid, paint_view

__all__ = ['Overlay', 'matrix_to_qtransform', 'paint_grid', 'paint_view']
