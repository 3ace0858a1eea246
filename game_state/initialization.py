"""Scene state initialization and map generation."""
from __future__ import annotations

import logging
import random
from typing import Optional

from config import AGENT_COUNT, PIXEL_SIZE, SEED_COUNT
from game_state.state import SceneState
from render.map import build_pixel_buffer
from simulation.flock import FlockSimulator
from utils import map_size_for_viewport
from world.generation import generate

logger = logging.getLogger(__name__)


def build_initial_state(
    viewport_width: int,
    viewport_height: int,
    rng_seed: Optional[int] = None,
    seed_count: int = SEED_COUNT,
    agent_count: int = AGENT_COUNT,
    pixel_size: int = PIXEL_SIZE,
) -> SceneState:
    """Create a new scene sized for a host viewport.

    Map size is ceil(viewport / pixel_size) in each dimension. One RNG drives
    both map seeds and agent spawns, so a fixed rng_seed reproduces the scene.
    """
    width, height = map_size_for_viewport(viewport_width, viewport_height, pixel_size)

    rng = random.Random(rng_seed)
    tile_map = generate(width, height, seed_count, rng_seed=rng.getrandbits(32))
    flock = FlockSimulator.spawn(width, height, agent_count, rng=rng)

    logger.info("Scene ready: %dx%d tiles, %d agents", width, height, agent_count)

    return SceneState(
        tile_map=tile_map,
        flock=flock,
        pixel_buffer=build_pixel_buffer(tile_map),
        rng=rng,
        seed_count=seed_count,
        pixel_size=pixel_size,
    )
