"""Bottom-up visitor protocol for quadtree folds."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from gravity_sim.quadtree.direction import Path

T = TypeVar("T")
R = TypeVar("R")


class QuadtreeFolder(ABC, Generic[T, R]):
    """Reduces a quadtree to one value per node, children before parents.

    ``Quadtree.apply_fold`` calls ``visit_empty`` for empty leaves,
    ``visit_leaf`` for occupied leaves and ``visit_quad`` for internal nodes
    once their four children (NW, NE, SW, SE) have been folded.
    """

    @abstractmethod
    def visit_empty(self, path: Path) -> R:
        """Result for an empty leaf."""

    @abstractmethod
    def visit_leaf(self, path: Path, elem: T) -> R:
        """Result for a leaf holding ``elem``."""

    @abstractmethod
    def visit_quad(self, path: Path, nw: R, ne: R, sw: R, se: R) -> R:
        """Combine the results of an internal node's children."""
