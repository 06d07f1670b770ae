"""Immutable 2-D vector."""

import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np


@dataclass(frozen=True)
class Vec2:
    """A 2-D vector with value semantics."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> "Vec2":
        return cls(0.0, 0.0)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vec2":
        x, y = values
        return cls(float(x), float(y))

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Vec2":
        return self.scale(k)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def scale(self, k: float) -> "Vec2":
        return Vec2(self.x * k, self.y * k)

    def length_squared(self) -> float:
        """Magnitude measure used for distances and accelerations."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normal(self) -> "Vec2":
        """Unit vector in the same direction; the zero vector maps to itself."""
        length = self.length()
        if length == 0.0:
            return Vec2.zero()
        return Vec2(self.x / length, self.y / length)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def __iter__(self):
        yield self.x
        yield self.y
