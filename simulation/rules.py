"""
Flocking behavior rules.

Rules are a closed set of tagged variants. Each variant maps to one plain
function computing the raw (unweighted) steering vector; apply_rule() looks the
function up, evaluates it and scales the result by the rule's weight.

All rule functions are read-only: they never touch agent state.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Sequence, TYPE_CHECKING

from vector import Vector2, ZERO
from simulation.config import (
    COHESION_WEIGHT,
    SEPARATION_WEIGHT,
    VELOCITY_MATCHING_WEIGHT,
    ATTRACT_TO_POINT_WEIGHT,
    DAMPING_WEIGHT,
    SEPARATION_DISTANCE_SQ,
    ENABLE_DAMPING,
)

if TYPE_CHECKING:
    from simulation.flock import Agent


class RuleKind(Enum):
    COHESION = "cohesion"
    SEPARATION = "separation"
    VELOCITY_MATCHING = "velocity_matching"
    ATTRACT_TO_POINT = "attract_to_point"
    DAMPING = "damping"


@dataclass(frozen=True)
class BehaviorRule:
    """A rule variant and its fixed weight. Shared read-only by all agents."""
    kind: RuleKind
    weight: float


RuleFn = Callable[["Agent", Sequence["Agent"], Vector2], Vector2]


def cohesion(agent: "Agent", peers: Sequence["Agent"], target: Vector2) -> Vector2:
    """Vector from the agent to the mean peer position."""
    if not peers:
        return ZERO
    sx = sum(p.position.x for p in peers)
    sy = sum(p.position.y for p in peers)
    n = len(peers)
    return Vector2(sx / n, sy / n) - agent.position


def separation(agent: "Agent", peers: Sequence["Agent"], target: Vector2,
               threshold_sq: float = SEPARATION_DISTANCE_SQ) -> Vector2:
    """Sum of (self - peer) over peers strictly inside the threshold."""
    push = ZERO
    for peer in peers:
        if agent.position.dist_sq(peer.position) < threshold_sq:
            push = push + (agent.position - peer.position)
    return push


def velocity_matching(agent: "Agent", peers: Sequence["Agent"], target: Vector2) -> Vector2:
    """Vector from the agent's velocity to the mean peer velocity."""
    if not peers:
        return ZERO
    sx = sum(p.velocity.x for p in peers)
    sy = sum(p.velocity.y for p in peers)
    n = len(peers)
    return Vector2(sx / n, sy / n) - agent.velocity


def attract_to_point(agent: "Agent", peers: Sequence["Agent"], target: Vector2) -> Vector2:
    return target - agent.position


def damping(agent: "Agent", peers: Sequence["Agent"], target: Vector2) -> Vector2:
    return -agent.velocity


RULE_FUNCTIONS: Dict[RuleKind, RuleFn] = {
    RuleKind.COHESION: cohesion,
    RuleKind.SEPARATION: separation,
    RuleKind.VELOCITY_MATCHING: velocity_matching,
    RuleKind.ATTRACT_TO_POINT: attract_to_point,
    RuleKind.DAMPING: damping,
}


def apply_rule(rule: BehaviorRule, agent: "Agent", peers: Sequence["Agent"],
               target: Vector2) -> Vector2:
    """Evaluate one rule for an agent and scale it by the rule weight.

    Args:
        rule: The rule to evaluate
        agent: Agent being steered
        peers: All other agents in the flock
        target: Attraction point in map coordinates (used by ATTRACT_TO_POINT)
    """
    return RULE_FUNCTIONS[rule.kind](agent, peers, target) * rule.weight


def default_rules(enable_damping: bool = ENABLE_DAMPING) -> List[BehaviorRule]:
    """The standard flocking rule set, optionally with velocity damping."""
    rules = [
        BehaviorRule(RuleKind.COHESION, COHESION_WEIGHT),
        BehaviorRule(RuleKind.SEPARATION, SEPARATION_WEIGHT),
        BehaviorRule(RuleKind.VELOCITY_MATCHING, VELOCITY_MATCHING_WEIGHT),
        BehaviorRule(RuleKind.ATTRACT_TO_POINT, ATTRACT_TO_POINT_WEIGHT),
    ]
    if enable_damping:
        rules.append(BehaviorRule(RuleKind.DAMPING, DAMPING_WEIGHT))
    return rules
