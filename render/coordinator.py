"""Render coordinator: ties the scene to the host on two cadences.

- draw_frame(): every display refresh, reads state and draws it
- advance(dt): accumulates wall time and runs one simulate_tick per
  TICK_INTERVAL elapsed

The coordinator holds no simulation logic of its own.
"""
from __future__ import annotations

import logging
from typing import Tuple, TYPE_CHECKING

from config import TICK_INTERVAL, MAX_TICKS_PER_FRAME
from main import simulate_tick, handle_resize
from render.map import render_map
from utils import screen_to_map

if TYPE_CHECKING:
    from game_state import SceneState
    from render.surface import DrawingSurface

logger = logging.getLogger(__name__)


class RenderCoordinator:
    """Drives redraws and fixed-interval simulation ticks for a scene."""

    def __init__(
        self,
        state: "SceneState",
        surface: "DrawingSurface",
        tick_interval: float = TICK_INTERVAL,
        max_ticks_per_frame: int = MAX_TICKS_PER_FRAME,
    ):
        self.state = state
        self.surface = surface
        self.tick_interval = tick_interval
        self.max_ticks_per_frame = max_ticks_per_frame
        self._tick_timer = 0.0

    def draw_frame(self) -> None:
        """Draw the cached map buffer, then every agent on top."""
        render_map(self.surface, self.state.pixel_buffer)
        self.state.flock.render(self.surface)

    def advance(self, dt: float) -> int:
        """Accumulate `dt` seconds and run any due ticks. Returns ticks run."""
        self._tick_timer += dt
        ticks = 0
        while self._tick_timer >= self.tick_interval and ticks < self.max_ticks_per_frame:
            simulate_tick(self.state)
            self._tick_timer -= self.tick_interval
            ticks += 1

        if self._tick_timer >= self.tick_interval:
            dropped = int(self._tick_timer // self.tick_interval)
            logger.debug("Dropping %d overdue ticks", dropped)
            self._tick_timer %= self.tick_interval
        return ticks

    def update_pointer(self, screen_pos: Tuple[float, float]) -> None:
        """Record the host pointer in map coordinates."""
        self.state.pointer = screen_to_map(
            screen_pos, self.state.pixel_size, self.state.width, self.state.height
        )

    def resize(self, viewport_size: Tuple[int, int]) -> bool:
        """Rebuild the scene for a new viewport. Returns True if the map size changed.

        The host must hand over a surface of the new map size when it does.
        """
        return handle_resize(self.state, *viewport_size)
