"""Axis-aligned rectangular regions."""

from dataclasses import dataclass
from typing import Union

from gravity_sim.geometry.vector import Vec2


@dataclass(frozen=True)
class Rectangle:
    """Immutable axis-aligned rectangle.

    ``(x, y)`` is the minimum corner. The north half covers the smaller ``y``
    values and the west half the smaller ``x`` values, so that
    ``west(north(R))``, ``east(north(R))``, ``west(south(R))`` and
    ``east(south(R))`` tile ``R`` exactly.

    Containment is closed on every side; a point on a shared edge belongs to
    both neighbours and callers pick a side by testing north/west first.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def position(self) -> Vec2:
        """Centre of the rectangle."""
        return Vec2(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def contains(self, where: Union[Vec2, object]) -> bool:
        """Check whether a point (or anything with a ``position``) lies inside."""
        point = where if isinstance(where, Vec2) else where.position
        return (
            self.x <= point.x <= self.max_x
            and self.y <= point.y <= self.max_y
        )

    def contains_rect(self, other: "Rectangle") -> bool:
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.max_x <= self.max_x
            and other.max_y <= self.max_y
        )

    def north(self) -> "Rectangle":
        return Rectangle(self.x, self.y, self.width, self.height / 2)

    def south(self) -> "Rectangle":
        half = self.height / 2
        return Rectangle(self.x, self.y + half, self.width, self.height - half)

    def west(self) -> "Rectangle":
        return Rectangle(self.x, self.y, self.width / 2, self.height)

    def east(self) -> "Rectangle":
        half = self.width / 2
        return Rectangle(self.x + half, self.y, self.width - half, self.height)

    @property
    def area(self) -> float:
        return self.width * self.height
