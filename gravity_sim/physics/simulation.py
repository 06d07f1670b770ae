"""Barnes-Hut gravity step over a quadtree.

Each call to ``MassSimulation.run_simulation``:

1. builds a fresh quadtree over the field and inserts every particle,
2. folds it once with ``CalculateWeights`` into a path -> mass point table,
3. for every particle (in parallel) picks the frontier of subtrees that pass
   the opening-angle test, resolves them to mass points, drops the particle's
   own point and integrates its motion against the rest,
4. returns the tree's region map.

The tree and table only live for the duration of one step.
"""

import math
import warnings
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from gravity_sim.geometry.rectangle import Rectangle
from gravity_sim.geometry.vector import Vec2
from gravity_sim.physics.integrators.base import Integrator
from gravity_sim.physics.integrators.four_stage import FourStageIntegrator
from gravity_sim.physics.mass_point import MassPoint
from gravity_sim.physics.particle import SimulatedParticle
from gravity_sim.physics.weights import CalculateWeights
from gravity_sim.quadtree.direction import Path, path_key
from gravity_sim.quadtree.quadtree import DEFAULT_MAX_DEPTH, Quadtree

T = TypeVar("T", bound=SimulatedParticle)

DEFAULT_THETA = 1.2
DEFAULT_G = 1e-6


def opening_angle_criterion(position: Vec2, theta: float) -> Callable[[Rectangle], bool]:
    """Predicate admitting regions that are small compared to their distance.

    A region is admissible when ``((height + width) / 2) / distance < theta``,
    where distance runs from the region's centre to ``position``. A region
    centred exactly on ``position`` is never admissible.
    """

    def admissible(region: Rectangle) -> bool:
        avg_width = (region.height + region.width) / 2.0
        dist = math.sqrt((region.position - position).length_squared())
        if dist == 0.0:
            return False
        return (avg_width / dist) < theta

    return admissible


def accel_for_point(position: Vec2, point: MassPoint, g: float) -> Vec2:
    """Acceleration at ``position`` due to one mass point."""
    dist = point.position - position

    separation = math.sqrt(dist.length_squared())
    if separation < 1:
        separation = 1

    accel = (g * point.mass) / separation
    return dist.normal().scale(accel)


def accel_from_points(position: Vec2, points: Sequence[MassPoint], g: float) -> Vec2:
    """Summed acceleration at ``position``; non-finite sums become zero."""
    total = Vec2.zero()
    for point in points:
        total = total + accel_for_point(position, point, g)

    if not total.is_finite():
        return Vec2.zero()
    return total


class MassSimulation(Generic[T]):
    """Gravity simulation of massive particles in a rectangular field.

    Particles need ``position``, ``velocity`` and ``mass`` attributes plus
    ``set_position`` and ``set_velocity`` methods. They are updated in place.
    """

    def __init__(
        self,
        elems: List[T],
        width: float,
        height: float,
        theta: float = DEFAULT_THETA,
        g: float = DEFAULT_G,
        integrator: Optional[Integrator] = None,
        max_workers: Optional[int] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        warn_on_skip: bool = False,
    ):
        """Initialize the simulation.

        Args:
            elems: Particles to simulate (owned by the caller)
            width: Field width
            height: Field height
            theta: Opening-angle threshold
            g: Gravitational constant
            integrator: Integrator to use (default: FourStageIntegrator)
            max_workers: Worker threads for the per-particle update; 1 runs inline
            max_depth: Deepest quadtree level; closer particles are skipped
            warn_on_skip: Emit a warning when particles are left out of a step
        """
        self.elems = elems
        self.width = width
        self.height = height
        self.theta = theta
        self.g = g
        self.integrator = integrator or FourStageIntegrator()
        self.max_workers = max_workers
        self.max_depth = max_depth
        self.warn_on_skip = warn_on_skip

        self.last_skipped: List[T] = []

    def build_tree(self) -> Tuple[Quadtree, List[T], List[T]]:
        """Insert every particle into a new quadtree.

        Returns:
            Tuple of (tree, inserted, skipped)
        """
        tree: Quadtree = Quadtree(self.width, self.height, max_depth=self.max_depth)
        inserted: List[T] = []
        skipped: List[T] = []
        for elem in self.elems:
            if tree.insert(elem):
                inserted.append(elem)
            else:
                skipped.append(elem)
        return tree, inserted, skipped

    def run_simulation(self, ts: float) -> Dict[Path, Rectangle]:
        """Advance every particle by ``ts`` and return the tree's regions."""
        tree, inserted, skipped = self.build_tree()
        self.last_skipped = skipped
        if skipped and self.warn_on_skip:
            warnings.warn(
                f"{len(skipped)} particle(s) outside the field or too close to another "
                f"were not updated this step",
                RuntimeWarning,
                stacklevel=2,
            )

        weights = CalculateWeights().calculate(tree)

        def update(elem: T):
            points = self.masses_for(elem, tree, weights)
            new_position, new_velocity = self.calc_values_from_gravity(elem, points, ts)
            elem.set_position(new_position)
            elem.set_velocity(new_velocity)

        if self.max_workers == 1:
            for elem in inserted:
                update(elem)
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                # list() re-raises any worker exception here
                list(executor.map(update, inserted))

        return tree.get_regions()

    def masses_for(self, elem: T, tree: Quadtree, weights: Dict[Path, MassPoint]) -> List[MassPoint]:
        """Mass points acting on ``elem``, excluding its own."""
        paths = tree.get_paths_fitting(opening_angle_criterion(elem.position, self.theta))

        points = []
        for path in sorted(paths, key=path_key):
            point = weights.get(path)
            # Admissible empty leaves have no entry
            if point is None or point.is_linked_to(elem):
                continue
            points.append(point)
        return points

    def calc_accel(self, position: Vec2, points: Sequence[MassPoint]) -> Vec2:
        return accel_from_points(position, points, self.g)

    def calc_values_from_gravity(self, elem: T, points: Sequence[MassPoint], ts: float) -> Tuple[Vec2, Vec2]:
        """New (position, velocity) of ``elem`` after ``ts`` under ``points``.

        The same set of mass points is used for every integrator stage.
        """
        return self.integrator.step(
            elem.position,
            elem.velocity,
            lambda position: self.calc_accel(position, points),
            ts,
        )
