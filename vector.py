# vector.py
"""
vector.py - Minimal immutable 2D vector math for Biome Flock

Used by the flock simulation, map seeds and the boid renderer.
"""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector. Equality is exact component equality."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def scale(self, factor: float) -> "Vector2":
        return self * factor

    def dist_sq(self, other: "Vector2") -> float:
        """Squared Euclidean distance to another vector."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def angle(self) -> float:
        """Heading in radians, atan2(y, x). Zero vector faces +x."""
        return math.atan2(self.y, self.x)

    def floor(self) -> "Vector2":
        return Vector2(math.floor(self.x), math.floor(self.y))

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def clamped(self, low: "Vector2", high: "Vector2") -> "Vector2":
        """Clamp each component into [low, high]."""
        return Vector2(
            max(low.x, min(high.x, self.x)),
            max(low.y, min(high.y, self.y)),
        )

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def random(cls, rng: Optional[random.Random] = None, scale: float = 1.0) -> "Vector2":
        """Random direction with length `scale`."""
        rng = rng or random
        theta = rng.uniform(0.0, 2.0 * math.pi)
        return cls(math.cos(theta) * scale, math.sin(theta) * scale)


ZERO = Vector2(0.0, 0.0)
