"""Core scene state data structures."""
from __future__ import annotations

import collections
import random
from dataclasses import dataclass, field
from typing import Deque, Optional

import numpy as np

from config import SEED_COUNT, PIXEL_SIZE
from simulation.flock import FlockSimulator
from vector import Vector2
from world.tilemap import TileMap


@dataclass
class SceneState:
    """Everything the simulation and renderer share, passed explicitly.

    Mutated only by simulate_tick and the resize/regenerate handlers;
    the redraw path only reads it.
    """
    tile_map: TileMap
    flock: FlockSimulator
    pixel_buffer: np.ndarray                    # (width, height, 3) uint8, rebuilt per generation
    rng: random.Random = field(default_factory=random.Random)
    seed_count: int = SEED_COUNT
    pixel_size: int = PIXEL_SIZE

    # Simulation clock
    tick: int = 0

    # Last known pointer in map coordinates (None until the host reports one)
    pointer: Optional[Vector2] = None
    follow_pointer: bool = False

    messages: Deque[str] = field(default_factory=lambda: collections.deque(maxlen=20))

    # === Convenience properties ===
    @property
    def width(self) -> int:
        return self.tile_map.width

    @property
    def height(self) -> int:
        return self.tile_map.height

    @property
    def attraction_pointer(self) -> Optional[Vector2]:
        """Pointer handed to the flock: only when following is enabled."""
        return self.pointer if self.follow_pointer else None
