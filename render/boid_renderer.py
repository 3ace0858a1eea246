"""Boid rendering module."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Sequence, Tuple

from render.config import COLOR_BOID, BOID_TRIANGLE_SIZE

if TYPE_CHECKING:
    from simulation.flock import Agent
    from render.surface import DrawingSurface


def boid_triangle(size: float = BOID_TRIANGLE_SIZE) -> List[Tuple[float, float]]:
    """Equilateral triangle in local space with its tip on +x."""
    step = (2 * math.pi) / 3
    return [(math.cos(i * step) * size, math.sin(i * step) * size) for i in (-1, 0, 1)]


BOID_SHAPE = boid_triangle()


def boid_pose(agent: "Agent") -> Tuple[Tuple[float, float], float]:
    """(translate, rotation) for an agent: floored position, velocity heading."""
    origin = agent.position.floor()
    return (origin.x, origin.y), agent.velocity.angle()


def render_flock(surface: "DrawingSurface", agents: Sequence["Agent"]) -> None:
    """Draw each agent as a triangle pointing along its velocity."""
    for agent in agents:
        translate, rotation = boid_pose(agent)
        surface.fill_polygon(BOID_SHAPE, translate, rotation, COLOR_BOID)
