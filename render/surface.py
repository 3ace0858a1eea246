"""Drawing surface interface.

The core draws through exactly two primitives:
- put_image_buffer: blit a full RGB pixel buffer
- fill_polygon: fill a local-space polygon after rotate + translate

PygameSurface implements them over a pygame.Surface.
"""
from __future__ import annotations

import math
from typing import Protocol, Sequence, Tuple

import numpy as np
import pygame

Color = Tuple[int, int, int]
PointF = Tuple[float, float]


class DrawingSurface(Protocol):
    def put_image_buffer(self, buffer: np.ndarray, origin_x: int, origin_y: int) -> None:
        ...

    def fill_polygon(self, points: Sequence[PointF], translate: PointF,
                     rotation: float, color: Color) -> None:
        ...


def transform_points(points: Sequence[PointF], translate: PointF, rotation: float) -> list:
    """Rotate local-space points about the origin, then translate them."""
    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)
    tx, ty = translate
    return [
        (tx + x * cos_r - y * sin_r, ty + x * sin_r + y * cos_r)
        for x, y in points
    ]


class PygameSurface:
    """DrawingSurface backed by a pygame.Surface."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def put_image_buffer(self, buffer: np.ndarray, origin_x: int, origin_y: int) -> None:
        # surfarray buffers are indexed [x, y], matching the map grids
        if origin_x == 0 and origin_y == 0 and buffer.shape[:2] == self.surface.get_size():
            pygame.surfarray.blit_array(self.surface, buffer)
        else:
            self.surface.blit(pygame.surfarray.make_surface(buffer), (origin_x, origin_y))

    def fill_polygon(self, points: Sequence[PointF], translate: PointF,
                     rotation: float, color: Color) -> None:
        pygame.draw.polygon(self.surface, color, transform_points(points, translate, rotation))
