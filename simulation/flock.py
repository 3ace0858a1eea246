"""
Boid flocking simulation.

Agents hold only their own data (id, position, velocity). The simulator owns
the agent list and resolves peer sets by index, so agents never reference
their flock.

Per tick, each agent in order:
1. Evaluates every rule against all other agents (O(n^2) per tick)
2. Adds the weighted sum to its velocity (unbounded, no speed clamp)
3. Integrates position += velocity (velocity / N when rules are throttled)

Agents update in place, so later agents see the already-updated state of
earlier ones within the same tick.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

from vector import Vector2, ZERO
from simulation.config import RULE_INTERVAL_TICKS
from simulation.rules import BehaviorRule, apply_rule, default_rules

if TYPE_CHECKING:
    from render.surface import DrawingSurface

logger = logging.getLogger(__name__)


@dataclass
class Agent:
    """A single boid with continuous position and velocity in map tiles."""
    id: int
    position: Vector2
    velocity: Vector2 = ZERO


@dataclass
class FlockSimulator:
    """
    A fixed population of agents steered by weighted behavior rules.

    Bounds (width, height) come from the tile map and are used for spawning,
    the default attraction point and clamping.
    """
    width: int
    height: int
    agents: List[Agent] = field(default_factory=list)
    rules: List[BehaviorRule] = field(default_factory=default_rules)
    rule_interval: int = RULE_INTERVAL_TICKS

    def __post_init__(self) -> None:
        if self.rule_interval < 1:
            raise ValueError(f"rule_interval must be >= 1, got {self.rule_interval}")

    @classmethod
    def spawn(
        cls,
        width: int,
        height: int,
        agent_count: int,
        rng: Optional[random.Random] = None,
        rules: Optional[List[BehaviorRule]] = None,
        rule_interval: int = RULE_INTERVAL_TICKS,
    ) -> "FlockSimulator":
        """Create a flock with agents at random integer positions inside bounds."""
        if agent_count < 0:
            raise ValueError(f"agent_count must be >= 0, got {agent_count}")
        rng = rng or random.Random()
        agents = [
            Agent(id=i, position=Vector2(rng.randrange(width), rng.randrange(height)))
            for i in range(agent_count)
        ]
        return cls(
            width=width,
            height=height,
            agents=agents,
            rules=rules if rules is not None else default_rules(),
            rule_interval=rule_interval,
        )

    # === Queries ===
    @property
    def center(self) -> Vector2:
        return Vector2(self.width / 2, self.height / 2)

    def peers_of(self, index: int) -> List[Agent]:
        """All agents except the one at `index`."""
        return self.agents[:index] + self.agents[index + 1:]

    def attraction_target(self, pointer: Optional[Vector2] = None) -> Vector2:
        """Pointer position clamped into bounds, or the map center."""
        if pointer is None:
            return self.center
        return pointer.clamped(ZERO, Vector2(self.width, self.height))

    def steering(self, index: int, target: Vector2) -> Vector2:
        """Weighted sum of all rules for the agent at `index`."""
        agent = self.agents[index]
        peers = self.peers_of(index)
        total = ZERO
        for rule in self.rules:
            total = total + apply_rule(rule, agent, peers, target)
        return total

    # === Simulation ===
    def step(self, tick: int = 0, pointer: Optional[Vector2] = None) -> None:
        """Advance every agent exactly once.

        Args:
            tick: Current tick count (selects rule-evaluation ticks when throttled)
            pointer: Attraction point in map coordinates, or None for map center
        """
        target = self.attraction_target(pointer)
        evaluate = tick % self.rule_interval == 0

        for i, agent in enumerate(self.agents):
            if evaluate:
                agent.velocity = agent.velocity + self.steering(i, target)
            agent.position = agent.position + agent.velocity * (1.0 / self.rule_interval)
            self._recover_if_non_finite(agent)

    def _recover_if_non_finite(self, agent: Agent) -> None:
        """Reset an agent whose state overflowed so the loop keeps running."""
        if agent.velocity.is_finite() and agent.position.is_finite():
            return
        logger.warning(
            "Agent %d has non-finite state (pos=%s, vel=%s); resetting",
            agent.id, agent.position.as_tuple(), agent.velocity.as_tuple(),
        )
        agent.velocity = ZERO
        if agent.position.is_finite():
            agent.position = agent.position.clamped(ZERO, Vector2(self.width, self.height))
        else:
            agent.position = self.center

    def resize(self, width: int, height: int) -> None:
        """Adopt new map bounds and clamp every agent into them."""
        self.width = width
        self.height = height
        high = Vector2(width, height)
        for agent in self.agents:
            agent.position = agent.position.clamped(ZERO, high)

    # === Rendering ===
    def render(self, surface: "DrawingSurface") -> None:
        """Draw every agent; never mutates the flock."""
        from render.boid_renderer import render_flock
        render_flock(surface, self.agents)

    def positions(self) -> List[Vector2]:
        return [agent.position for agent in self.agents]

    def velocities(self) -> List[Vector2]:
        return [agent.velocity for agent in self.agents]
