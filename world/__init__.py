"""
World module: tile map and map generation.

Provides:
- Tile map, tiles, seeds and generation errors (from tilemap.py)
- Seed placement and map generation (from generation.py)
"""

from world.tilemap import (
    MapGenerationError,
    InvalidDimensionError,
    InvalidSeedCountError,
    Seed,
    Tile,
    TileMap,
)

from world.generation import (
    KIND_WATER,
    KIND_LAND,
    make_seeds,
    generate,
    generate_from_seeds,
)

__all__ = [
    # Tile map
    "MapGenerationError",
    "InvalidDimensionError",
    "InvalidSeedCountError",
    "Seed",
    "Tile",
    "TileMap",
    # Generation
    "KIND_WATER",
    "KIND_LAND",
    "make_seeds",
    "generate",
    "generate_from_seeds",
]
