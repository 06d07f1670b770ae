"""Centre-of-mass aggregation over a quadtree."""

from typing import Dict

from gravity_sim.geometry.vector import Vec2
from gravity_sim.physics.mass_point import MassPoint
from gravity_sim.quadtree.direction import Path
from gravity_sim.quadtree.folder import QuadtreeFolder
from gravity_sim.quadtree.quadtree import Quadtree


class CalculateWeights(QuadtreeFolder):
    """Fold computing a mass point for every occupied leaf and internal node.

    Results are recorded in ``centres_of_mass`` keyed by node path. Empty
    leaves have no entry.
    """

    def __init__(self):
        self.centres_of_mass: Dict[Path, MassPoint] = {}

    def calculate(self, tree: Quadtree) -> Dict[Path, MassPoint]:
        """Run the fold over ``tree`` and return the path -> mass point table."""
        tree.apply_fold(self)
        return self.centres_of_mass

    def visit_empty(self, path: Path) -> MassPoint:
        # No mass, so the position never weighs in a merge
        return MassPoint(Vec2.zero(), 0.0)

    def visit_leaf(self, path: Path, elem) -> MassPoint:
        mass_point = MassPoint(elem.position, elem.mass, elem)
        self.centres_of_mass[path] = mass_point
        return mass_point

    def visit_quad(self, path: Path, nw: MassPoint, ne: MassPoint, sw: MassPoint, se: MassPoint) -> MassPoint:
        mass_point = nw.merge(ne).merge(sw).merge(se)
        self.centres_of_mass[path] = mass_point
        return mass_point


def calculate_weights(tree: Quadtree) -> Dict[Path, MassPoint]:
    """Path -> mass point table for ``tree``."""
    return CalculateWeights().calculate(tree)
