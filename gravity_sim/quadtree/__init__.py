"""Region quadtree spatial index."""

from gravity_sim.quadtree.direction import Direction, Path, ROOT_PATH, path_key, path_to_str
from gravity_sim.quadtree.folder import QuadtreeFolder
from gravity_sim.quadtree.quadtree import (
    DEFAULT_MAX_DEPTH,
    EmptyLeaf,
    InternalNode,
    OccupiedLeaf,
    Quadtree,
    direction_for,
    quadrant_region,
)

__all__ = [
    "Direction",
    "Path",
    "ROOT_PATH",
    "path_key",
    "path_to_str",
    "QuadtreeFolder",
    "Quadtree",
    "EmptyLeaf",
    "OccupiedLeaf",
    "InternalNode",
    "DEFAULT_MAX_DEPTH",
    "direction_for",
    "quadrant_region",
]
