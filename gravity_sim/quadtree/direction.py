"""Quadrant directions and node paths."""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Child quadrant of an internal node."""

    NW = "NW"
    NE = "NE"
    SW = "SW"
    SE = "SE"

    def __repr__(self) -> str:
        return f"Direction.{self.name}"


# Fold and traversal order of an internal node's children
CHILD_ORDER: Tuple[Direction, ...] = (Direction.NW, Direction.NE, Direction.SW, Direction.SE)

# Sequence of directions from the root; the root itself is ()
Path = Tuple[Direction, ...]

ROOT_PATH: Path = ()


def path_to_str(path: Path) -> str:
    """Render a path as e.g. ``"NW/SE"`` (the root is ``"/"``)."""
    if not path:
        return "/"
    return "/".join(d.value for d in path)


def path_key(path: Path) -> Tuple[str, ...]:
    """Sort key giving paths a stable order."""
    return tuple(d.value for d in path)
