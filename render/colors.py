"""Color calculations for tile rendering.

Provides utilities for:
- HSL darkening of base colors
- Per-tile color lookup from kind and edge-factor
"""
from __future__ import annotations

from functools import lru_cache
from typing import Tuple

import pygame

from render.config import KIND_COLORS, EDGE_DARKEN_PER_LEVEL

Color = Tuple[int, int, int]


def darken(color: Color, amount: float) -> Color:
    """Lower HSL lightness by `amount` (0-100 scale), clamped at black."""
    if amount <= 0:
        return color
    c = pygame.Color(*color)
    h, s, l, a = c.hsla
    c.hsla = (h, s, max(0.0, min(100.0, l - amount)), a)
    return (c.r, c.g, c.b)


@lru_cache(maxsize=None)
def color_for_tile(kind: int, edge_factor: int) -> Color:
    """Display color of a tile: base color of its kind, darkened at edges."""
    return darken(KIND_COLORS[kind], edge_factor * EDGE_DARKEN_PER_LEVEL)
