"""QPainter backend for the coordinate grid.

Strokes a GridLayout onto any QPaintDevice (widget, QImage, QPixmap). The
surface is always passed in by the caller.
"""
import math
from typing import Callable, Optional

from PyQt5.QtCore import QLineF, QPointF, Qt
from PyQt5.QtGui import QColor, QFont, QFontMetricsF, QPainter, QPen, QTransform

from view2d.models.grid_config import GridConfig, GridStyle
from view2d.models.matrix3x3 import Matrix3x3, NotInvertibleError
from view2d.services.grid_layout import layout_grid
from view2d.utils.logger import loggerRaise

# Host drawing hook: receives the painter and the real -> view matrix
Overlay = Callable[[QPainter, Matrix3x3], None]


def matrix_to_qtransform(matrix: Matrix3x3) -> QTransform:
    """QTransform equivalent of an affine Matrix3x3.

    Qt uses row vectors, so its (m11, m12, m21, m22, dx, dy) are exactly the
    ctx_args() order.
    """
    return QTransform(*matrix.ctx_args())


def _line_pen(color, width):
    pen = QPen(QColor(color))
    pen.setWidthF(width)
    pen.setStyle(Qt.SolidLine)
    return pen


def _draw_lines(painter, lines, color):
    if not lines:
        return
    painter.save()
    # All lines of one kind share a width
    painter.setPen(_line_pen(color, lines[0].width))
    for line in lines:
        painter.drawLine(QLineF(line.start.x, line.start.y, line.end.x, line.end.y))
    painter.restore()


def _draw_labels(painter, labels, style):
    if not labels:
        return
    painter.save()
    font = QFont(style.font_family)
    font.setPixelSize(style.font_pixel_size)
    font.setBold(style.font_bold)
    painter.setFont(font)
    painter.setPen(QColor(style.label_color))
    metrics = QFontMetricsF(font)

    for label in labels:
        painter.save()
        painter.translate(label.position.x, label.position.y)
        if label.rotation:
            painter.rotate(math.degrees(label.rotation))
        # Centered on the anchor, anchor on the baseline
        text_width = metrics.horizontalAdvance(label.text)
        painter.drawText(QPointF(-text_width / 2, 0), label.text)
        painter.restore()

    painter.restore()


def paint_grid(painter: QPainter, layout, style: GridStyle = None):
    """Draw minor lines, major lines, axes and labels, in that order.

    Args:
        painter: Active QPainter on the target surface
        layout: GridLayout from services.grid_layout.layout_grid
        style: Colours and font; defaults to GridStyle()
    """
    style = style or GridStyle()
    _draw_lines(painter, layout.minor_lines, style.line_color)
    _draw_lines(painter, layout.major_lines, style.line_color)
    _draw_lines(painter, layout.axis_lines, style.line_color)
    _draw_labels(painter, layout.labels, style)


def paint_view(painter: QPainter, state, width: int, height: int,
               config: GridConfig = None, style: GridStyle = None,
               overlay: Optional[Overlay] = None):
    """Clear the surface, draw the grid for a view state, then the overlay.

    The overlay draws host geometry on top of the grid. It gets
    state.real_to_view(width, height), not the grid transform, so it can map
    stored real coordinates with Matrix3x3.transform or
    matrix_to_qtransform. The painter state is saved and restored around it.

    Returns:
        The GridLayout that was drawn

    Raises:
        NotInvertibleError, ValueError: if the view state cannot produce a
            grid (routed through loggerRaise)
    """
    style = style or GridStyle()
    painter.fillRect(0, 0, width, height, QColor(style.background_color))
    try:
        layout = layout_grid(state.grid_real_to_view(width, height), width, height, config)
    except NotInvertibleError as e:
        loggerRaise(e, "View transform is not invertible", "Grid")
    except ValueError as e:
        loggerRaise(e, f"Cannot lay out grid on a {width}x{height} canvas", "Grid")
    painter.setRenderHint(QPainter.Antialiasing)
    paint_grid(painter, layout, style)
    if overlay is not None:
        painter.save()
        try:
            overlay(painter, state.real_to_view(width, height))
        finally:
            painter.restore()
    return layout
