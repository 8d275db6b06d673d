"""View state and pan/zoom transitions.

The host owns a ViewState and replaces it on every pan or zoom. All
transitions are done with the matrix algebra: invert the current
real -> view transform, compose the correction in view space, and read the
new real-world center off the view center.

Transform chain (read backwards):
1. translate real world center to origo
2. divide out the display unit multiplier
3. scale to resolution, flipping y (view y grows downward)
4. translate origo to the middle of the canvas
"""
import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from view2d.constants import (
    DEFAULT_CENTER_X, DEFAULT_CENTER_Y, DEFAULT_PIX_PER_UNIT,
    DEFAULT_UNIT_MULTIPLIER, WHEEL_ZOOM_FACTOR,
)
from view2d.models.matrix3x3 import Matrix3x3, invert_or_raise
from view2d.models.vector2d import Vector2d

logger = logging.getLogger(__name__)


def view_center(width: float, height: float) -> Vector2d:
    """Middle of the canvas in view pixels."""
    return Vector2d(width / 2, height / 2)


def wheel_zoom_factor(delta_y: float) -> float:
    """Zoom factor for one wheel tick: scrolling down (positive delta) zooms out."""
    return WHEEL_ZOOM_FACTOR if delta_y > 0 else 1 / WHEEL_ZOOM_FACTOR


@dataclass(frozen=True)
class ViewState:
    """Pan/zoom state of a viewport.

    Attributes:
        real_center: Real world coordinates shown in the middle of the canvas
        pix_per_unit: Zoom level in pixels per real world unit
        unit_multiplier: Display scale of the real axis. Stored coordinates
            are divided by it on the way to the screen, and grid labels are
            shown in multiplied units.
    """
    real_center: Vector2d = field(default_factory=lambda: Vector2d(DEFAULT_CENTER_X, DEFAULT_CENTER_Y))
    pix_per_unit: float = DEFAULT_PIX_PER_UNIT
    unit_multiplier: float = DEFAULT_UNIT_MULTIPLIER

    def __post_init__(self):
        if not self.pix_per_unit > 0:
            raise ValueError(f"pix_per_unit must be positive, got {self.pix_per_unit}")
        if not self.unit_multiplier > 0:
            raise ValueError(f"unit_multiplier must be positive, got {self.unit_multiplier}")

    # ========================================
    # Transforms
    # ========================================

    def real_to_view(self, width: float, height: float) -> Matrix3x3:
        """Matrix mapping real world coordinates to view pixels."""
        p = self.pix_per_unit
        u = self.unit_multiplier
        return Matrix3x3.chain([
            Matrix3x3.translate(view_center(width, height)),
            Matrix3x3.scale(p, -p),
            Matrix3x3.scale(1 / u, 1 / u),
            Matrix3x3.translate(self.real_center.neg()),
        ])

    def view_to_real(self, width: float, height: float) -> Matrix3x3:
        """Inverse of real_to_view.

        Raises:
            NotInvertibleError: if the state has degenerated
        """
        return invert_or_raise(self.real_to_view(width, height))

    def grid_real_to_view(self, width: float, height: float) -> Matrix3x3:
        """real_to_view for the grid, which counts in display units."""
        u = self.unit_multiplier
        return Matrix3x3.chain([self.real_to_view(width, height), Matrix3x3.scale(u, u)])

    # ========================================
    # Transitions
    # ========================================

    def zoomed_at(self, pivot: Vector2d, factor: float, width: float, height: float) -> 'ViewState':
        """Zoom about a view-space pivot.

        The real point under the pivot stays under the pivot.

        Args:
            pivot: View pixel to zoom about (usually the cursor)
            factor: > 1 zooms out, < 1 zooms in
            width, height: Canvas size in pixels

        Raises:
            ValueError: if factor is not positive
            NotInvertibleError: if the current transform is singular
        """
        if not factor > 0:
            raise ValueError(f"Zoom factor must be positive, got {factor}")
        v2r = self.view_to_real(width, height)
        v2r_zoomed = Matrix3x3.multiply(v2r, Matrix3x3.scale_at(factor, factor, pivot))
        new_center = v2r_zoomed.transform(view_center(width, height))
        logger.debug("Zoom x%g at %s: center %s -> %s", factor, pivot, self.real_center, new_center)
        return replace(self, real_center=new_center, pix_per_unit=self.pix_per_unit / factor)

    def wheel_zoomed(self, pivot: Vector2d, delta_y: float, width: float, height: float,
                     zoom_allowed: bool = True) -> 'ViewState':
        """One mouse wheel tick of zoom at the cursor position."""
        if not zoom_allowed:
            return self
        return self.zoomed_at(pivot, wheel_zoom_factor(delta_y), width, height)

    def panned(self, view_delta: Vector2d, width: float, height: float,
               pan_allowed: bool = True) -> 'ViewState':
        """Move the view so content follows a pointer drag of view_delta pixels.

        Raises:
            NotInvertibleError: if the current transform is singular
        """
        if not pan_allowed or view_delta.is_zero():
            return self
        v2r = self.view_to_real(width, height)
        v2r_translated = Matrix3x3.multiply(v2r, Matrix3x3.translate(view_delta.neg()))
        new_center = v2r_translated.transform(view_center(width, height))
        logger.debug("Pan by %s: center %s -> %s", view_delta, self.real_center, new_center)
        return replace(self, real_center=new_center)

    def with_unit_multiplier(self, unit_multiplier: Optional[float]) -> 'ViewState':
        """Switch display units, keeping the on-screen size of real geometry.

        A missing or zero multiplier means 1.
        """
        new_unit = unit_multiplier or DEFAULT_UNIT_MULTIPLIER
        if new_unit == self.unit_multiplier:
            return self
        pix = self.pix_per_unit * new_unit / self.unit_multiplier
        return replace(self, pix_per_unit=pix, unit_multiplier=new_unit)
