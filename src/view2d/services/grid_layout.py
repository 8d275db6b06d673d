"""Adaptive coordinate grid layout.

Given the real -> view transform of a canvas, works out which grid lines and
axis labels to draw:

1. Invert real -> view and map the margin-inset canvas corners to real space.
2. Pick a minor step: a power of ten one order below the visible extent
   (times the size factor), so roughly 10-100 minor lines span the smaller
   canvas dimension at any zoom.
3. Enumerate the integer multiples of the step inside the visible range and
   split them into major (every 10th) and minor lines.
4. Add the x/y axes when the origin is on a major line, and place numeric
   labels for major lines on both edges of the canvas.

The result is a GridLayout in view pixels, ready for a painter.
"""
import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from view2d.constants import GRID_MAJOR_EVERY, GRID_MARGIN, GRID_SIZE_FACTOR
from view2d.models.grid_config import GridConfig
from view2d.models.matrix3x3 import Matrix3x3, invert_or_raise
from view2d.models.vector2d import Vector2d, ORIGIN

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridLine:
    """A straight grid line segment in view pixels.

    value is the real coordinate the line marks (x for vertical lines,
    y for horizontal ones).
    """
    value: float
    start: Vector2d
    end: Vector2d
    width: float

    @property
    def vertical(self) -> bool:
        return self.start.x == self.end.x


@dataclass(frozen=True)
class AxisLabel:
    """Numeric label anchored at a view position.

    The anchor is the horizontal centre of the text baseline before rotation.
    rotation is in radians (-pi/2 for labels of horizontal lines).
    """
    text: str
    position: Vector2d
    rotation: float = 0.0


@dataclass(frozen=True)
class GridLayout:
    """Everything needed to draw the grid for one frame."""
    width: int
    height: int
    minor_step: float
    decimals: int
    x_multiples: Tuple[int, ...]
    y_multiples: Tuple[int, ...]
    minor_lines: Tuple[GridLine, ...]
    major_lines: Tuple[GridLine, ...]
    axis_lines: Tuple[GridLine, ...]
    labels: Tuple[AxisLabel, ...]

    @property
    def major_step(self) -> float:
        return self.minor_step * GRID_MAJOR_EVERY

    @property
    def major_x(self) -> Tuple[int, ...]:
        return split_major_minor(self.x_multiples)[0]

    @property
    def minor_x(self) -> Tuple[int, ...]:
        return split_major_minor(self.x_multiples)[1]

    @property
    def major_y(self) -> Tuple[int, ...]:
        return split_major_minor(self.y_multiples)[0]

    @property
    def minor_y(self) -> Tuple[int, ...]:
        return split_major_minor(self.y_multiples)[1]


# ========================================
# Step selection
# ========================================

def minor_step(extent: float, size_factor: float = GRID_SIZE_FACTOR) -> float:
    """Spacing between adjacent minor grid lines, in real units.

    10 ** (floor(log10(extent * size_factor)) - 1)

    Exact powers of ten belong to their own tier: extent * size_factor ==
    100 gives a step of 10, anything just below gives 1.

    Args:
        extent: Visible real-world extent (smaller of width/height)
        size_factor: Density tuning factor

    Raises:
        ValueError: if extent or size_factor is not a positive finite number
            (zero-size canvas, margin larger than the canvas, or a view
            transform without the vertical flip)
    """
    if not (math.isfinite(extent) and extent > 0):
        raise ValueError(f"Visible extent must be positive and finite, got {extent}")
    if not (math.isfinite(size_factor) and size_factor > 0):
        raise ValueError(f"size_factor must be positive and finite, got {size_factor}")

    scaled = extent * size_factor
    if not math.isfinite(scaled):
        raise ValueError(f"Visible extent overflows: {extent} * {size_factor}")

    exponent = math.floor(math.log10(scaled))
    # log10 can land one ulp off next to a power of ten
    if 10.0 ** (exponent + 1) <= scaled:
        exponent += 1
    elif 10.0 ** exponent > scaled:
        exponent -= 1
    return 10.0 ** (exponent - 1)


def step_values(low: float, high: float, step: float) -> List[int]:
    """Integer multiples of step whose value lies within [low, high].

    Example: step_values(-23.4, 57.1, 1.0) -> [-23, -22, ..., 57]
    """
    first = math.ceil(low / step)
    last = math.floor(high / step)
    return list(range(first, last + 1))


def split_major_minor(values: Sequence[int]) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """Split multiples into (major, minor); every 10th multiple is major."""
    major = tuple(v for v in values if v % GRID_MAJOR_EVERY == 0)
    minor = tuple(v for v in values if v % GRID_MAJOR_EVERY != 0)
    return major, minor


# ========================================
# Labels
# ========================================

def label_decimals(step: float) -> int:
    """Decimals needed to tell adjacent major lines apart."""
    major = step * GRID_MAJOR_EVERY
    if major > 1:
        return 0
    return max(0, int(round(-math.log10(major))))


def format_label(value: float, decimals: int) -> str:
    text = f"{value:.{decimals}f}"
    # "-0.00" for values that round to zero
    if text.startswith('-') and float(text) == 0:
        text = text[1:]
    return text


# ========================================
# Layout
# ========================================

def visible_corners(view_to_real: Matrix3x3, width: float, height: float,
                    margin: float = GRID_MARGIN) -> Tuple[Vector2d, Vector2d]:
    """Real-world (northwest, southeast) corners of the margin-inset canvas."""
    nw_corner = view_to_real.transform(Vector2d(margin, margin))
    se_corner = view_to_real.transform(Vector2d(width - margin, height - margin))
    return nw_corner, se_corner


def layout_grid(real_to_view: Matrix3x3, width: int, height: int,
                config: Optional[GridConfig] = None) -> GridLayout:
    """Compute grid lines and labels for a canvas.

    Args:
        real_to_view: Transform from real coordinates to view pixels. Must
            include the vertical flip (view y grows downward).
        width: Canvas width in pixels
        height: Canvas height in pixels
        config: Grid geometry; defaults to GridConfig()

    Returns:
        GridLayout in view pixels

    Raises:
        NotInvertibleError: if real_to_view is singular
        ValueError: if the canvas (minus margins) has no visible extent
    """
    config = config or GridConfig()
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got {width}x{height}")

    v2r = invert_or_raise(real_to_view)

    nw_corner, se_corner = visible_corners(v2r, width, height, config.margin)
    extent = min(se_corner.x - nw_corner.x, nw_corner.y - se_corner.y)
    step = minor_step(extent, config.size_factor)

    x_values = step_values(nw_corner.x, se_corner.x, step)
    y_values = step_values(se_corner.y, nw_corner.y, step)
    major_x, minor_x = split_major_minor(x_values)
    major_y, minor_y = split_major_minor(y_values)
    decimals = label_decimals(step)

    logger.debug(
        "Grid step %g (extent %.6g): %d x / %d y multiples, %d decimals",
        step, extent, len(x_values), len(y_values), decimals,
    )

    minor_lines = _lines(real_to_view, width, height, minor_x, minor_y, step,
                         config.minor_margin, config.minor_line_width)
    major_lines = _lines(real_to_view, width, height, major_x, major_y, step,
                         config.margin, config.major_line_width)
    axis_lines = _axis_lines(real_to_view, width, height, major_x, major_y, config)
    labels = _labels(real_to_view, width, height, major_x, major_y, step, decimals, config)

    return GridLayout(
        width=width,
        height=height,
        minor_step=step,
        decimals=decimals,
        x_multiples=tuple(x_values),
        y_multiples=tuple(y_values),
        minor_lines=minor_lines,
        major_lines=major_lines,
        axis_lines=axis_lines,
        labels=labels,
    )


def _lines(r2v, width, height, x_multiples, y_multiples, step, margin, line_width):
    lines = []
    for x in x_multiples:
        rx = x * step
        vx = math.floor(r2v.transform(Vector2d(rx, 0)).x)
        lines.append(GridLine(rx, Vector2d(vx, margin), Vector2d(vx, height - margin), line_width))
    for y in y_multiples:
        ry = y * step
        vy = math.floor(r2v.transform(Vector2d(0, ry)).y)
        lines.append(GridLine(ry, Vector2d(margin, vy), Vector2d(width - margin, vy), line_width))
    return tuple(lines)


def _axis_lines(r2v, width, height, major_x, major_y, config):
    v_origo = r2v.transform(ORIGIN)
    lines = []
    margin = config.margin
    if 0 in major_y:
        # x axis
        vy = math.floor(v_origo.y)
        lines.append(GridLine(0.0, Vector2d(margin, vy), Vector2d(width - margin, vy),
                              config.axis_line_width))
    if 0 in major_x:
        # y axis
        vx = math.floor(v_origo.x)
        lines.append(GridLine(0.0, Vector2d(vx, margin), Vector2d(vx, height - margin),
                              config.axis_line_width))
    return tuple(lines)


def _labels(r2v, width, height, major_x, major_y, step, decimals, config):
    near = config.label_near_inset
    far = config.label_far_inset
    labels = []
    for x in major_x:
        rx = x * step
        vx = r2v.transform(Vector2d(rx, 0)).x
        text = format_label(rx, decimals)
        labels.append(AxisLabel(text, Vector2d(vx, near)))
        labels.append(AxisLabel(text, Vector2d(vx, height - far)))
    for y in major_y:
        ry = y * step
        vy = r2v.transform(Vector2d(0, ry)).y
        text = format_label(ry, decimals)
        labels.append(AxisLabel(text, Vector2d(near, vy), -math.pi / 2))
        labels.append(AxisLabel(text, Vector2d(width - far, vy), -math.pi / 2))
    return tuple(labels)
