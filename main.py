# main.py
"""
Biome Flock - Voronoi terrain with a flock of boids.

Scene operations shared by the renderer and the pygame host:
simulation ticks, map regeneration, resizing, and pointer-follow toggling.
"""
from __future__ import annotations

import logging

from game_state import SceneState, build_initial_state
from render.map import build_pixel_buffer
from utils import map_size_for_viewport
from world.generation import generate

logger = logging.getLogger(__name__)

__all__ = [
    "SceneState",
    "build_initial_state",
    "simulate_tick",
    "regenerate_map",
    "handle_resize",
    "toggle_follow_pointer",
]


def simulate_tick(state: SceneState) -> None:
    """Run one complete flock step, then advance the tick counter."""
    state.flock.step(state.tick, state.attraction_pointer)
    state.tick += 1


def regenerate_map(state: SceneState) -> None:
    """Replace the map with a freshly seeded one of the same size."""
    state.tile_map = generate(state.width, state.height, state.seed_count,
                              rng_seed=state.rng.getrandbits(32))
    state.pixel_buffer = build_pixel_buffer(state.tile_map)
    state.messages.append("New map generated.")


def handle_resize(state: SceneState, viewport_width: int, viewport_height: int) -> bool:
    """Rebuild the map for a new viewport and clamp agents into its bounds.

    Returns True if the map size changed.
    """
    width, height = map_size_for_viewport(viewport_width, viewport_height, state.pixel_size)
    if (width, height) == (state.width, state.height):
        return False

    logger.info("Resizing map %dx%d -> %dx%d", state.width, state.height, width, height)
    state.tile_map = generate(width, height, state.seed_count, rng_seed=state.rng.getrandbits(32))
    state.pixel_buffer = build_pixel_buffer(state.tile_map)
    state.flock.resize(width, height)
    if state.pointer is not None:
        state.pointer = state.flock.attraction_target(state.pointer)
    return True


def toggle_follow_pointer(state: SceneState) -> None:
    state.follow_pointer = not state.follow_pointer
    target = "pointer" if state.follow_pointer else "map center"
    state.messages.append(f"Flock follows the {target}.")
