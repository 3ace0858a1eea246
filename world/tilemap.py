"""
tilemap.py - Classified tile grid for Biome Flock

The map stores its data array-first, like the rest of the codebase:
- kind_grid: (width, height) int8, terrain class of each tile (0 or 1)
- edge_grid: (width, height) int32, edge-factor of each tile (0 = interior)

Grids are indexed [x, y]. A tile's flat index is y * width + x.
Tile objects are read-only snapshots built on demand by the map.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

import numpy as np
from scipy import ndimage

from utils import get_neighbors_8

logger = logging.getLogger(__name__)

Point = Tuple[int, int]

# 3x3 ring: the 8 neighbors of a cell, excluding the cell itself
NEIGHBOR_FOOTPRINT = np.array([[1, 1, 1],
                               [1, 0, 1],
                               [1, 1, 1]], dtype=bool)


class MapGenerationError(ValueError):
    """Base class for errors raised while building a map."""


class InvalidDimensionError(MapGenerationError):
    """Width or height is not a positive integer."""


class InvalidSeedCountError(MapGenerationError):
    """Seed count is not a positive integer."""


@dataclass(frozen=True)
class Seed:
    """A Voronoi generator: a grid point and the terrain kind it spreads."""
    x: int
    y: int
    kind: int


@dataclass(frozen=True)
class Tile:
    """One map cell: coordinate, terrain kind and edge-factor."""
    x: int
    y: int
    kind: int
    edge_factor: int


class TileMap:
    """
    A width x height grid of classified tiles.

    Built in two steps: classify() assigns every cell the kind of its
    nearest seed, liminalize() computes edge-factors from the result.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidDimensionError(f"Map dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.kind_grid = np.zeros((width, height), dtype=np.int8)
        self.edge_grid = np.zeros((width, height), dtype=np.int32)
        self.seed_cell_grid = np.zeros((width, height), dtype=bool)

    # === Tile access ===
    def __len__(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        """Flat index of a tile."""
        return y * self.width + x

    def get(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"Tile ({x}, {y}) outside {self.width}x{self.height} map")
        return Tile(x, y, int(self.kind_grid[x, y]), int(self.edge_grid[x, y]))

    def tile_at(self, index: int) -> Tile:
        """Get a tile by flat index (y * width + x)."""
        y, x = divmod(index, self.width)
        return self.get(x, y)

    def tiles(self) -> Iterator[Tile]:
        """All tiles in flat-index order (row by row)."""
        for y in range(self.height):
            for x in range(self.width):
                yield self.get(x, y)

    def neighbors(self, x: int, y: int) -> List[Tile]:
        """In-bounds 8-connected neighbor tiles of (x, y)."""
        return [self.get(nx, ny) for nx, ny in get_neighbors_8(x, y, self.width, self.height)]

    @property
    def center(self) -> Tuple[float, float]:
        return (self.width / 2, self.height / 2)

    def is_seed_cell(self, x: int, y: int) -> bool:
        """True if a seed sits exactly on this cell."""
        return bool(self.seed_cell_grid[x, y])

    # === Generation steps ===
    def classify(self, seeds: Sequence[Seed]) -> None:
        """Assign each cell the kind of its nearest seed (squared distance).

        Ties go to the seed that appears first in `seeds`.
        """
        if not seeds:
            raise InvalidSeedCountError("At least one seed is required to classify a map")

        seed_xy = np.array([(s.x, s.y) for s in seeds], dtype=np.int64)
        seed_kinds = np.array([s.kind for s in seeds], dtype=np.int8)

        # (width, height) coordinate grids, broadcast against all seeds at once
        gx, gy = np.meshgrid(np.arange(self.width, dtype=np.int64),
                             np.arange(self.height, dtype=np.int64), indexing="ij")
        dx = gx[:, :, np.newaxis] - seed_xy[:, 0]
        dy = gy[:, :, np.newaxis] - seed_xy[:, 1]
        squared = dx * dx + dy * dy  # (width, height, n_seeds), exact integers

        # argmin returns the first minimal index, which preserves seed order tie-breaks
        nearest = np.argmin(squared, axis=2)
        self.kind_grid[:, :] = seed_kinds[nearest]

        self.seed_cell_grid[:, :] = False
        for seed in seeds:
            if self.in_bounds(seed.x, seed.y):
                self.seed_cell_grid[seed.x, seed.y] = True

    def liminalize(self, passes: int = 1) -> None:
        """Compute edge-factors from the current classification.

        A cell with any in-bounds neighbor of a different kind gets at least 1.
        Otherwise it takes the largest edge-factor its neighbors had in the
        previous pass. Every pass reads only the previous pass's values, so
        neighbor order never matters. Each call starts from zero, which makes
        the result a pure function of kind_grid.
        """
        if passes < 1:
            raise ValueError(f"passes must be >= 1, got {passes}")

        # Edge replication never introduces a foreign kind, so out-of-bounds cells are effectively skipped
        neighbor_max = ndimage.maximum_filter(self.kind_grid, footprint=NEIGHBOR_FOOTPRINT, mode="nearest")
        neighbor_min = ndimage.minimum_filter(self.kind_grid, footprint=NEIGHBOR_FOOTPRINT, mode="nearest")
        differs = (neighbor_max != self.kind_grid) | (neighbor_min != self.kind_grid)

        previous = np.zeros((self.width, self.height), dtype=np.int32)
        for _ in range(passes):
            propagated = ndimage.maximum_filter(previous, footprint=NEIGHBOR_FOOTPRINT, mode="constant", cval=0)
            previous = np.where(differs, np.maximum(propagated, 1), propagated).astype(np.int32)

        self.edge_grid[:, :] = previous
        logger.debug("Liminalized %dx%d map: %d edge tiles", self.width, self.height, int(np.count_nonzero(previous)))
