"""Simulation modules for Biome Flock.

- rules: Tagged flocking rule variants and their evaluation
- flock: Agents and the per-tick flock update
"""

from simulation.rules import BehaviorRule, RuleKind, apply_rule, default_rules
from simulation.flock import Agent, FlockSimulator

__all__ = [
    "BehaviorRule",
    "RuleKind",
    "apply_rule",
    "default_rules",
    "Agent",
    "FlockSimulator",
]
