"""
utils.py - Common utility functions for Biome Flock

Provides shared, stateless helper functions used across different modules.
"""
from __future__ import annotations

import math
from typing import List, Tuple

from vector import Vector2

Point = Tuple[int, int]


def clamp(val: float, low: float, high: float) -> float:
    """Clamp a value between low and high bounds."""
    return max(low, min(high, val))


# =============================================================================
# 8-Neighbor Utilities
# =============================================================================

# 8 neighboring directions (cardinal + diagonal)
NEIGHBORS_8 = [
    (-1, -1), (0, -1), (1, -1),
    (-1,  0),          (1,  0),
    (-1,  1), (0,  1), (1,  1),
]


def get_neighbors_8(x: int, y: int, width: int, height: int) -> List[Point]:
    """Return the in-bounds 8-connected neighbors of a cell (no wrapping)."""
    options = []
    for dx, dy in NEIGHBORS_8:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            options.append((nx, ny))
    return options


# =============================================================================
# Host <-> map coordinate conversions
# =============================================================================

def map_size_for_viewport(viewport_width: int, viewport_height: int,
                          pixel_size: int) -> Point:
    """Map dimensions in tiles for a viewport in host pixels.

    Example: (1280, 721) at pixel_size 8 -> (160, 91)
    """
    return (math.ceil(viewport_width / pixel_size),
            math.ceil(viewport_height / pixel_size))


def screen_to_map(screen_pos: Tuple[float, float], pixel_size: int,
                  width: int, height: int) -> Vector2:
    """Convert a host pointer position to map-local coordinates.

    The result is clamped to [0, width] x [0, height] so a pointer outside
    the window still yields a usable target.
    """
    return Vector2(
        clamp(screen_pos[0] / pixel_size, 0, width),
        clamp(screen_pos[1] / pixel_size, 0, height),
    )
