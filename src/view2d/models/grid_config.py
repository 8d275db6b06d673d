"""Grid configuration structures.

GridConfig controls geometry (where lines and labels go); GridStyle controls
how the painter renders them. Both are immutable and default to the values in
view2d.constants.
"""
from dataclasses import dataclass

from view2d.constants import (
    GRID_MARGIN, GRID_SIZE_FACTOR, GRID_MINOR_MARGIN_RATIO,
    GRID_MAJOR_LINE_WIDTH, GRID_MINOR_LINE_WIDTH, GRID_AXIS_LINE_WIDTH,
    GRID_LABEL_NEAR_INSET, GRID_LABEL_FAR_INSET,
    VIEW_BACKGROUND_COLOR, GRID_LINE_COLOR, GRID_LABEL_COLOR,
    GRID_LABEL_FONT_FAMILY, GRID_LABEL_FONT_PIXEL_SIZE, GRID_LABEL_FONT_BOLD,
)


@dataclass(frozen=True)
class GridConfig:
    """Grid layout parameters.

    Attributes:
        margin: Canvas inset in pixels. The visible real-world rectangle is
            measured between the inset corners, and major lines stop here.
        size_factor: Multiplies the visible extent before the step is picked.
            Raising it coarsens the grid (fewer, wider-spaced lines).
        minor_margin_ratio: Minor lines stop at margin / minor_margin_ratio.
        major_line_width, minor_line_width, axis_line_width: Stroke widths.
        label_near_inset: Distance of top/left labels from the edge.
        label_far_inset: Distance of bottom/right labels from the edge.
    """
    margin: float = GRID_MARGIN
    size_factor: float = GRID_SIZE_FACTOR
    minor_margin_ratio: float = GRID_MINOR_MARGIN_RATIO
    major_line_width: float = GRID_MAJOR_LINE_WIDTH
    minor_line_width: float = GRID_MINOR_LINE_WIDTH
    axis_line_width: float = GRID_AXIS_LINE_WIDTH
    label_near_inset: float = GRID_LABEL_NEAR_INSET
    label_far_inset: float = GRID_LABEL_FAR_INSET

    def __post_init__(self):
        if self.margin < 0:
            raise ValueError(f"margin must be >= 0, got {self.margin}")
        if not self.size_factor > 0:
            raise ValueError(f"size_factor must be positive, got {self.size_factor}")
        if not self.minor_margin_ratio > 0:
            raise ValueError(f"minor_margin_ratio must be positive, got {self.minor_margin_ratio}")
        for name in ('major_line_width', 'minor_line_width', 'axis_line_width',
                     'label_near_inset', 'label_far_inset'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")

    @property
    def minor_margin(self) -> float:
        return self.margin / self.minor_margin_ratio


@dataclass(frozen=True)
class GridStyle:
    """Colours and label font used by the painter."""
    background_color: str = VIEW_BACKGROUND_COLOR
    line_color: str = GRID_LINE_COLOR
    label_color: str = GRID_LABEL_COLOR
    font_family: str = GRID_LABEL_FONT_FAMILY
    font_pixel_size: int = GRID_LABEL_FONT_PIXEL_SIZE
    font_bold: bool = GRID_LABEL_FONT_BOLD
