"""Tile map rendering.

The map is static once generated, so it is converted to an RGB pixel buffer
once per generation and blitted every frame.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from render.colors import color_for_tile

if TYPE_CHECKING:
    from world.tilemap import TileMap
    from render.surface import DrawingSurface


def build_pixel_buffer(tile_map: "TileMap") -> np.ndarray:
    """Create a (width, height, 3) uint8 RGB buffer, one pixel per tile.

    Only a handful of (kind, edge_factor) pairs exist, so colors are resolved
    once per pair and written with boolean masks.
    """
    buffer = np.zeros((tile_map.width, tile_map.height, 3), dtype=np.uint8)
    pairs = np.stack([tile_map.kind_grid.astype(np.int32), tile_map.edge_grid], axis=-1)
    for kind, edge in np.unique(pairs.reshape(-1, 2), axis=0):
        mask = (tile_map.kind_grid == kind) & (tile_map.edge_grid == edge)
        buffer[mask] = color_for_tile(int(kind), int(edge))
    return buffer


def render_map(surface: "DrawingSurface", pixel_buffer: np.ndarray) -> None:
    """Draw the precomputed map buffer at the surface origin."""
    surface.put_image_buffer(pixel_buffer, 0, 0)
