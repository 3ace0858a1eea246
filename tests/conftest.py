"""
Pytest configuration and shared fixtures for Biome Flock tests.
"""

import random
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from vector import Vector2  # noqa: E402
from world.tilemap import Seed  # noqa: E402
from world.generation import generate_from_seeds  # noqa: E402


class RecordingSurface:
    """DrawingSurface that records calls instead of drawing."""

    def __init__(self):
        self.buffers = []
        self.polygons = []

    def put_image_buffer(self, buffer, origin_x, origin_y):
        self.buffers.append((buffer, origin_x, origin_y))

    def fill_polygon(self, points, translate, rotation, color):
        self.polygons.append((list(points), translate, rotation, color))


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests"""
    return random.Random(42)


@pytest.fixture
def diagonal_map():
    """4x4 map split by seeds at (0,0) kind 0 and (3,3) kind 1"""
    return generate_from_seeds(4, 4, [Seed(0, 0, 0), Seed(3, 3, 1)])


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture
def origin():
    return Vector2(0.0, 0.0)
