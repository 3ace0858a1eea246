"""
Map generation for Biome Flock.

Handles:
- Random seed (Voronoi generator) placement
- Nearest-seed classification
- Edge smoothing (liminalize)
"""
from __future__ import annotations

import logging
import random
from typing import List, Optional

from config import LIMINAL_PASSES
from world.tilemap import (
    InvalidDimensionError,
    InvalidSeedCountError,
    Seed,
    TileMap,
)

logger = logging.getLogger(__name__)

# Terrain kinds
KIND_WATER = 0
KIND_LAND = 1
KINDS = (KIND_WATER, KIND_LAND)


def make_seeds(width: int, height: int, seed_count: int, rng: random.Random) -> List[Seed]:
    """Place `seed_count` seeds uniformly on the grid, each with a random kind.

    Coordinates may repeat; duplicates resolve to the first seed during
    classification.
    """
    if seed_count <= 0:
        raise InvalidSeedCountError(f"Seed count must be positive, got {seed_count}")
    return [
        Seed(rng.randrange(width), rng.randrange(height), rng.choice(KINDS))
        for _ in range(seed_count)
    ]


def generate(
    width: int,
    height: int,
    seed_count: int,
    rng_seed: Optional[int] = None,
    passes: int = LIMINAL_PASSES,
) -> TileMap:
    """
    Generate a classified, edge-smoothed two-biome map.

    Args:
        width: Map width in tiles (> 0)
        height: Map height in tiles (> 0)
        seed_count: Number of Voronoi seeds (> 0)
        rng_seed: Seed for the random generator; a fixed value reproduces the map
        passes: Edge-smoothing passes

    Returns:
        A TileMap with final kinds and edge-factors

    Raises:
        InvalidDimensionError: width or height <= 0
        InvalidSeedCountError: seed_count <= 0
    """
    if width <= 0 or height <= 0:
        raise InvalidDimensionError(f"Map dimensions must be positive, got {width}x{height}")

    rng = random.Random(rng_seed)
    seeds = make_seeds(width, height, seed_count, rng)
    tile_map = generate_from_seeds(width, height, seeds, passes=passes)
    logger.info("Generated %dx%d map from %d seeds", width, height, seed_count)
    return tile_map


def generate_from_seeds(width: int, height: int, seeds: List[Seed],
                        passes: int = LIMINAL_PASSES) -> TileMap:
    """Build a map from an explicit seed list (deterministic)."""
    tile_map = TileMap(width, height)
    tile_map.classify(seeds)
    tile_map.liminalize(passes)
    return tile_map
