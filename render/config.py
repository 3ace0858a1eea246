"""
Configuration constants for the rendering domain.
Includes terrain colors, boid shape, and other visual tuning values.
"""
from __future__ import annotations

from typing import Dict, Tuple

# =============================================================================
# COLORS
# =============================================================================
# UI Colors
COLOR_BG_DARK = (20, 20, 25)
COLOR_TEXT_WHITE = (230, 230, 230)
COLOR_TEXT_HIGHLIGHT = (220, 200, 120)

# Terrain base colors by kind (0 = water, 1 = land)
KIND_COLORS: Dict[int, Tuple[int, int, int]] = {
    0: (0, 0, 255),
    1: (0, 255, 0),
}

# Lightness removed per edge-factor level, on the 0-100 HSL lightness scale
EDGE_DARKEN_PER_LEVEL = 30

# =============================================================================
# BOIDS
# =============================================================================
COLOR_BOID = (255, 0, 0)
BOID_TRIANGLE_SIZE = 3.0    # Vertex radius in map tiles

# =============================================================================
# TEXT
# =============================================================================
FONT_SIZE = 18
LINE_HEIGHT = 20
