"""
Shared fixtures for view2d tests.

Provides canvas sizes, view states and the matching transforms.
"""
import sys
import os
import pytest

# Ensure src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

# Qt tests render offscreen
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from view2d.models.vector2d import Vector2d
from view2d.services.viewport import ViewState


CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600


@pytest.fixture
def canvas_size():
    """Default canvas (width, height) in pixels"""
    return CANVAS_WIDTH, CANVAS_HEIGHT


@pytest.fixture
def default_state():
    """View centered on the origin at 5 px per unit"""
    return ViewState()


@pytest.fixture
def zoomed_state():
    """View off the origin, zoomed in far enough for fractional steps"""
    return ViewState(real_center=Vector2d(3.25, -1.5), pix_per_unit=2000.0)


@pytest.fixture
def default_r2v(default_state, canvas_size):
    """real -> view for the default state on the default canvas"""
    return default_state.real_to_view(*canvas_size)
