"""
Configuration constants for the simulation domain.
Includes flocking rule weights and thresholds.
"""
from __future__ import annotations

# =============================================================================
# RULE WEIGHTS
# =============================================================================
# Each rule's raw vector is multiplied by its weight before being added to velocity
COHESION_WEIGHT = 1.0 / 100.0           # Pull toward flock centroid
SEPARATION_WEIGHT = 1.0                 # Push away from crowding peers
VELOCITY_MATCHING_WEIGHT = 1.0 / 8.0    # Align with average peer velocity
ATTRACT_TO_POINT_WEIGHT = 1.0 / 50.0    # Pull toward map center / pointer
DAMPING_WEIGHT = 1.0 / 20.0             # Velocity decay
ENABLE_DAMPING = False                  # Damping is opt-in; the classic flock has none

# =============================================================================
# THRESHOLDS
# =============================================================================
# Peers closer than this (squared tiles, strict less-than) trigger separation
SEPARATION_DISTANCE_SQ = 10.0

# =============================================================================
# CADENCE
# =============================================================================
# Rules are evaluated every N ticks; positions integrate velocity / N every tick
RULE_INTERVAL_TICKS = 1
