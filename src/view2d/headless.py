"""Headless Viewport Renderer: CLI entry point.

Renders the coordinate grid of a viewport (center, zoom, canvas size) to a
PNG image without opening a window.

Usage:
    python -m view2d.headless [-o OUTPUT] [--width W] [--height H]
                              [--center X Y] [--pix-per-unit P]

Examples:
    python -m view2d.headless -o grid.png
    python -m view2d.headless --center 120 -40 --pix-per-unit 0.5 -o far.png
    python -m view2d.headless --unit-multiplier 1000 --size-factor 2 -v
"""

import sys
import os
import argparse
import logging

from view2d.constants import (
    DEFAULT_CENTER_X, DEFAULT_CENTER_Y, DEFAULT_PIX_PER_UNIT,
    DEFAULT_UNIT_MULTIPLIER, GRID_SIZE_FACTOR, GRID_MARGIN,
)
from view2d.models.grid_config import GridConfig
from view2d.models.vector2d import Vector2d
from view2d.services.viewport import ViewState

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description='Render a 2D viewport grid to a PNG image (headless).',
    )
    parser.add_argument(
        '-o', '--output',
        default='./output/view2d.png',
        help='Output PNG path (default: ./output/view2d.png).',
    )
    parser.add_argument('--width', type=int, default=800, help='Canvas width in pixels (default: 800).')
    parser.add_argument('--height', type=int, default=600, help='Canvas height in pixels (default: 600).')
    parser.add_argument(
        '--center',
        type=float, nargs=2, metavar=('X', 'Y'),
        default=[DEFAULT_CENTER_X, DEFAULT_CENTER_Y],
        help='Real world coordinates at the canvas center (default: 0 0).',
    )
    parser.add_argument(
        '--pix-per-unit',
        type=float, default=DEFAULT_PIX_PER_UNIT,
        help=f'Zoom level in pixels per real unit (default: {DEFAULT_PIX_PER_UNIT}).',
    )
    parser.add_argument(
        '--unit-multiplier',
        type=float, default=DEFAULT_UNIT_MULTIPLIER,
        help='Display unit multiplier for grid labels (default: 1).',
    )
    parser.add_argument(
        '--size-factor',
        type=float, default=GRID_SIZE_FACTOR,
        help=f'Grid density factor; larger is coarser (default: {GRID_SIZE_FACTOR}).',
    )
    parser.add_argument(
        '--margin',
        type=float, default=GRID_MARGIN,
        help=f'Canvas border kept free of grid lines, in pixels (default: {GRID_MARGIN}).',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Logging
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        state = ViewState(
            real_center=Vector2d(*args.center),
            pix_per_unit=args.pix_per_unit,
            unit_multiplier=args.unit_multiplier,
        )
        config = GridConfig(margin=args.margin, size_factor=args.size_factor)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    # Qt is only needed once the inputs are known to be valid
    from view2d.services.headless_renderer import HeadlessRenderer

    output_path = os.path.abspath(args.output)
    renderer = HeadlessRenderer(config=config)
    try:
        renderer.render_to_file(state, args.width, args.height, output_path)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"Saved {output_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
