"""
Unit tests for simulation/flock.py

Verifies:
- Spawning inside bounds with zero velocity
- Single-agent and damping-only scenarios
- Rule throttling preserves average speed
- Non-finite state recovery
- Resize clamping and read-only rendering
"""

import math
import random

import pytest

from simulation.flock import Agent, FlockSimulator
from simulation.rules import BehaviorRule, RuleKind, default_rules
from vector import Vector2, ZERO


class TestSpawn:

    def test_agents_inside_bounds_at_rest(self, rng):
        flock = FlockSimulator.spawn(40, 25, 30, rng=rng)
        assert len(flock.agents) == 30
        for agent in flock.agents:
            assert 0 <= agent.position.x < 40
            assert 0 <= agent.position.y < 25
            assert agent.velocity == ZERO

    def test_ids_are_unique(self, rng):
        flock = FlockSimulator.spawn(10, 10, 12, rng=rng)
        assert len({a.id for a in flock.agents}) == 12

    def test_same_rng_seed_same_flock(self):
        a = FlockSimulator.spawn(30, 30, 5, rng=random.Random(8))
        b = FlockSimulator.spawn(30, 30, 5, rng=random.Random(8))
        assert a.positions() == b.positions()

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            FlockSimulator.spawn(10, 10, -1)

    def test_rule_interval_must_be_positive(self):
        with pytest.raises(ValueError):
            FlockSimulator(10, 10, rule_interval=0)


class TestStep:

    def test_peers_exclude_self(self):
        agents = [Agent(i, Vector2(i, i)) for i in range(4)]
        flock = FlockSimulator(10, 10, agents=agents)
        peers = flock.peers_of(2)
        assert [p.id for p in peers] == [0, 1, 3]

    def test_single_agent_never_crashes(self):
        flock = FlockSimulator(20, 20, agents=[Agent(0, Vector2(3, 4))])
        cohesion = BehaviorRule(RuleKind.COHESION, 1.0)
        matching = BehaviorRule(RuleKind.VELOCITY_MATCHING, 1.0)
        flock.rules = [cohesion, matching]
        for tick in range(25):
            flock.step(tick)
            assert flock.steering(0, flock.center) == ZERO
        agent = flock.agents[0]
        assert agent.position == Vector2(3, 4)
        assert agent.velocity.is_finite()

    def test_damping_only_keeps_resting_agents_still(self):
        agents = [Agent(0, Vector2(0, 0)), Agent(1, Vector2(10, 10))]
        flock = FlockSimulator(20, 20, agents=agents, rules=[BehaviorRule(RuleKind.DAMPING, 0.5)])
        flock.step(0)
        assert flock.velocities() == [Vector2(0, 0), Vector2(0, 0)]
        assert flock.positions() == [Vector2(0, 0), Vector2(10, 10)]

    def test_damping_slows_moving_agent(self):
        agent = Agent(0, Vector2(5, 5), Vector2(4, 0))
        flock = FlockSimulator(20, 20, agents=[agent], rules=[BehaviorRule(RuleKind.DAMPING, 0.5)])
        flock.step(0)
        assert agent.velocity == Vector2(2, 0)
        assert agent.position == Vector2(7, 5)

    def test_attraction_pulls_toward_center(self):
        agent = Agent(0, Vector2(0, 0))
        flock = FlockSimulator(20, 10, agents=[agent], rules=[BehaviorRule(RuleKind.ATTRACT_TO_POINT, 0.1)])
        flock.step(0)
        assert agent.velocity == Vector2(1.0, 0.5)
        assert agent.position == Vector2(1.0, 0.5)

    def test_pointer_target_is_clamped(self):
        flock = FlockSimulator(20, 10)
        assert flock.attraction_target(None) == Vector2(10, 5)
        assert flock.attraction_target(Vector2(50, -4)) == Vector2(20, 0)

    def test_velocity_accumulates_without_clamp(self):
        agent = Agent(0, Vector2(0, 0))
        flock = FlockSimulator(100, 100, agents=[agent], rules=[BehaviorRule(RuleKind.ATTRACT_TO_POINT, 1.0)])
        flock.step(0, pointer=Vector2(100, 0))
        assert agent.velocity == Vector2(100, 0)
        assert agent.position == Vector2(100, 0)

    def test_default_flock_stays_finite(self, rng):
        flock = FlockSimulator.spawn(60, 40, 20, rng=rng, rules=default_rules())
        for tick in range(200):
            flock.step(tick)
        assert all(a.position.is_finite() and a.velocity.is_finite() for a in flock.agents)


class TestThrottling:

    def test_rules_only_on_interval_ticks(self):
        agent = Agent(0, Vector2(0, 0))
        flock = FlockSimulator(
            20, 20, agents=[agent],
            rules=[BehaviorRule(RuleKind.ATTRACT_TO_POINT, 0.1)],
            rule_interval=4,
        )
        flock.step(0)
        assert agent.velocity == Vector2(1.0, 1.0)
        flock.step(1)
        flock.step(2)
        flock.step(3)
        assert agent.velocity == Vector2(1.0, 1.0)

    def test_integration_uses_scaled_velocity(self):
        agent = Agent(0, Vector2(0, 0), Vector2(4, 0))
        flock = FlockSimulator(100, 100, agents=[agent], rules=[], rule_interval=4)
        for tick in range(4):
            flock.step(tick)
        # Same distance as one unthrottled tick
        assert agent.position.x == pytest.approx(4.0)


class TestRecovery:

    def test_non_finite_velocity_is_reset(self, caplog):
        agent = Agent(7, Vector2(5, 5), Vector2(math.inf, 0))
        flock = FlockSimulator(20, 20, agents=[agent], rules=[])
        with caplog.at_level("WARNING"):
            flock.step(0)
        assert agent.velocity == ZERO
        assert agent.position == Vector2(10, 10)
        assert "Agent 7" in caplog.text

    def test_finite_position_is_kept_in_bounds(self):
        agent = Agent(0, Vector2(30, -5), Vector2(0, math.nan))
        flock = FlockSimulator(20, 20, agents=[agent], rules=[])
        flock.step(0)
        assert agent.velocity == ZERO
        assert agent.position.is_finite()
        assert 0 <= agent.position.x <= 20
        assert 0 <= agent.position.y <= 20


class TestResizeAndRender:

    def test_resize_clamps_positions(self):
        agents = [Agent(0, Vector2(50, 30)), Agent(1, Vector2(2, 3))]
        flock = FlockSimulator(60, 40, agents=agents)
        flock.resize(20, 10)
        assert flock.positions() == [Vector2(20, 10), Vector2(2, 3)]
        assert flock.center == Vector2(10, 5)

    def test_render_draws_each_agent_without_mutation(self, recording_surface):
        agents = [Agent(0, Vector2(1.5, 2.5), Vector2(0, 1)), Agent(1, Vector2(4, 4))]
        flock = FlockSimulator(10, 10, agents=agents)
        flock.render(recording_surface)
        assert len(recording_surface.polygons) == 2
        assert recording_surface.polygons[0][1] == (1, 2)
        assert recording_surface.polygons[0][2] == pytest.approx(math.pi / 2)
        assert flock.positions() == [Vector2(1.5, 2.5), Vector2(4, 4)]
