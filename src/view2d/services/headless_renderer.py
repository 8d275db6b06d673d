"""Headless Viewport Renderer Service.

Renders the background and coordinate grid of a view state into an offscreen
QImage, using the same painter code an interactive host would use.

Output can be taken as a numpy RGBA array or written to PNG through Pillow.
"""

import sys
import os
import logging
from typing import Optional

import numpy as np
from PIL import Image

from PyQt5.QtGui import QImage, QPainter
from PyQt5.QtWidgets import QApplication

from view2d.components.grid_painter import Overlay, paint_view
from view2d.models.grid_config import GridConfig, GridStyle

logger = logging.getLogger(__name__)


class HeadlessRenderer:
    """Offscreen renderer that produces grid snapshots of a viewport."""

    def __init__(self, config: GridConfig = None, style: GridStyle = None):
        """Ensure a QApplication exists (fonts need one) and store settings."""
        self._app = self._ensure_qapp()
        self.config = config or GridConfig()
        self.style = style or GridStyle()

    @staticmethod
    def _ensure_qapp():
        """Return existing QApplication or create a headless one."""
        app = QApplication.instance()
        if app is None:
            os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')
            app = QApplication(sys.argv[:1])
        return app

    def render_image(self, state, width: int, height: int,
                     overlay: Optional[Overlay] = None) -> QImage:
        """Paint a view state into a new width x height QImage.

        overlay, if given, draws host geometry over the grid (see
        components.grid_painter.paint_view).

        Raises:
            ValueError: for non-positive canvas sizes
            NotInvertibleError: for a degenerate view state
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")

        image = QImage(width, height, QImage.Format_RGBA8888)
        painter = QPainter(image)
        try:
            layout = paint_view(painter, state, width, height, self.config, self.style, overlay)
        finally:
            painter.end()

        logger.debug(
            "Rendered %dx%d view at %s, %g px/unit: step %g, %d labels",
            width, height, state.real_center, state.pix_per_unit,
            layout.minor_step, len(layout.labels),
        )
        return image

    @staticmethod
    def image_to_array(image: QImage) -> np.ndarray:
        """Copy a QImage into an (h, w, 4) uint8 RGBA array."""
        image = image.convertToFormat(QImage.Format_RGBA8888)
        width = image.width()
        height = image.height()
        ptr = image.constBits()
        ptr.setsize(image.bytesPerLine() * height)
        rows = np.frombuffer(ptr, dtype=np.uint8).reshape(height, image.bytesPerLine())
        # Rows may be padded past width * 4
        return rows[:, :width * 4].reshape(height, width, 4).copy()

    def render_array(self, state, width: int, height: int,
                     overlay: Optional[Overlay] = None) -> np.ndarray:
        return self.image_to_array(self.render_image(state, width, height, overlay))

    def render_to_file(self, state, width: int, height: int, output_path: str,
                       overlay: Optional[Overlay] = None):
        """Render a view state and save it as PNG.

        Args:
            state: ViewState to render
            width, height: Canvas size in pixels
            output_path: Destination PNG file path
            overlay: Optional host drawing hook, called after the grid
        """
        pixel_array = self.render_array(state, width, height, overlay)

        img = Image.fromarray(pixel_array)
        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        img.save(output_path, "PNG")
        logger.info("Saved %s", output_path)
