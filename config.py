# config.py
"""
Centralized configuration for Biome Flock.

This file contains high-level, cross-cutting constants.
Domain-specific constants are in:
- simulation/config.py (flocking rule weights, thresholds)
- render/config.py (colors, boid shape)
"""
from __future__ import annotations

from typing import Tuple

# =============================================================================
# MAP & SCALE
# =============================================================================
# One map tile is drawn as a PIXEL_SIZE x PIXEL_SIZE block of window pixels.
# Map dimensions are derived from the window: ceil(viewport / PIXEL_SIZE).
PIXEL_SIZE = 8

DEFAULT_VIEWPORT: Tuple[int, int] = (1280, 720)

# Voronoi generators per map
# TODO: Scale with map area so small windows aren't dominated by tiny cells
SEED_COUNT = 80

# Number of edge-smoothing passes (1 = boundary cells only)
LIMINAL_PASSES = 1

# =============================================================================
# FLOCK
# =============================================================================
AGENT_COUNT = 20

# =============================================================================
# TIME & SIMULATION
# =============================================================================
TICK_INTERVAL = 0.1        # Seconds per simulation tick
TARGET_FPS = 60            # Redraw cadence
MAX_TICKS_PER_FRAME = 5    # Backlog beyond this is dropped (e.g. after a window drag)

# =============================================================================
# LOGGING
# =============================================================================
LOG_LEVEL = "INFO"
