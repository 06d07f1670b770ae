"""Region quadtree over positioned elements.

The tree is a sum of three node variants:

- ``EmptyLeaf``: a region with nothing in it
- ``OccupiedLeaf``: a region holding exactly one element
- ``InternalNode``: a region split into four child nodes (NW, NE, SW, SE)

A node only ever moves forward through empty -> occupied -> internal, and
there is no removal. Nodes are addressed from outside through their path
from the root, a tuple of ``Direction`` values.
"""

from typing import Callable, Dict, Generic, Iterator, List, Optional, Set, Tuple, TypeVar, Union

from gravity_sim.geometry.rectangle import Rectangle
from gravity_sim.geometry.vector import Vec2
from gravity_sim.quadtree.direction import CHILD_ORDER, Direction, Path, ROOT_PATH
from gravity_sim.quadtree.folder import QuadtreeFolder

T = TypeVar("T")
R = TypeVar("R")

# Leaves below this depth are never created; see Quadtree.insert
DEFAULT_MAX_DEPTH = 64


class EmptyLeaf:
    """Leaf with no element."""

    __slots__ = ("region",)

    def __init__(self, region: Rectangle):
        self.region = region

    def __repr__(self) -> str:
        return f"EmptyLeaf({self.region!r})"


class OccupiedLeaf:
    """Leaf holding a single element (not owned by the tree)."""

    __slots__ = ("region", "elem")

    def __init__(self, region: Rectangle, elem):
        self.region = region
        self.elem = elem

    def __repr__(self) -> str:
        return f"OccupiedLeaf({self.region!r}, {self.elem!r})"


class InternalNode:
    """Node split into four quadrant children."""

    __slots__ = ("region", "nw", "ne", "sw", "se")

    def __init__(self, region: Rectangle):
        self.region = region
        self.nw: Node = EmptyLeaf(quadrant_region(region, Direction.NW))
        self.ne: Node = EmptyLeaf(quadrant_region(region, Direction.NE))
        self.sw: Node = EmptyLeaf(quadrant_region(region, Direction.SW))
        self.se: Node = EmptyLeaf(quadrant_region(region, Direction.SE))

    def child(self, direction: Direction) -> "Node":
        return getattr(self, direction.name.lower())

    def set_child(self, direction: Direction, node: "Node"):
        setattr(self, direction.name.lower(), node)

    def children(self) -> Iterator[Tuple[Direction, "Node"]]:
        """Children paired with their direction, in NW, NE, SW, SE order."""
        for direction in CHILD_ORDER:
            yield direction, self.child(direction)

    def __repr__(self) -> str:
        return f"InternalNode({self.region!r})"


Node = Union[EmptyLeaf, OccupiedLeaf, InternalNode]


def quadrant_region(region: Rectangle, direction: Direction) -> Rectangle:
    """The quarter of ``region`` in ``direction``."""
    if direction is Direction.NW:
        return region.north().west()
    if direction is Direction.NE:
        return region.north().east()
    if direction is Direction.SW:
        return region.south().west()
    return region.south().east()


def direction_for(region: Rectangle, where: Vec2) -> Direction:
    """Quadrant of ``region`` that ``where`` falls into.

    Assumes ``where`` lies inside ``region``. North is tested before west,
    so points on a shared edge go north, then west.
    """
    in_top = region.north().contains(where)
    in_left = region.west().contains(where)

    if in_top:
        return Direction.NW if in_left else Direction.NE
    return Direction.SW if in_left else Direction.SE


def _insert(node: Node, elem) -> Node:
    """Insert ``elem`` below ``node`` and return the node that replaces it."""
    if isinstance(node, EmptyLeaf):
        return OccupiedLeaf(node.region, elem)

    if isinstance(node, OccupiedLeaf):
        # Split: the held element moves down into a fresh internal node
        split = InternalNode(node.region)
        _insert(split, node.elem)
        return _insert(split, elem)

    direction = direction_for(node.region, elem.position)
    node.set_child(direction, _insert(node.child(direction), elem))
    return node


def _separable(region: Rectangle, depth: int, first: Vec2, second: Vec2, max_depth: int) -> bool:
    """Whether splitting a leaf at ``depth`` separates two points by ``max_depth``."""
    while depth < max_depth:
        a = direction_for(region, first)
        b = direction_for(region, second)
        if a is not b:
            return True
        region = quadrant_region(region, a)
        depth += 1
    return False


class Quadtree(Generic[T]):
    """Quadtree over the rectangle ``(0, 0, width, height)``.

    Elements must expose a ``position`` attribute (a ``Vec2``).
    """

    def __init__(self, width: float, height: float, max_depth: int = DEFAULT_MAX_DEPTH):
        """Create an empty tree.

        Args:
            width: Width of the root region
            height: Height of the root region
            max_depth: Deepest level a leaf may be created at
        """
        self.bounds = Rectangle(0.0, 0.0, width, height)
        self.max_depth = max_depth
        self._root: Node = EmptyLeaf(self.bounds)
        self._count = 0

    def __len__(self) -> int:
        return self._count

    @property
    def root(self) -> Node:
        return self._root

    def insert(self, elem: T) -> bool:
        """Insert an element.

        Returns False, leaving the tree unchanged, when the root region has
        no area, when the element lies outside it, or when it is too close to
        an existing element to be separated within ``max_depth`` levels
        (e.g. coincident positions).
        """
        if self.bounds.width <= 0 or self.bounds.height <= 0:
            return False
        position = elem.position
        if not self.bounds.contains(position):
            return False
        if not self._can_place(position):
            return False

        self._root = _insert(self._root, elem)
        self._count += 1
        return True

    def _can_place(self, position: Vec2) -> bool:
        node = self._root
        depth = 0
        while isinstance(node, InternalNode):
            node = node.child(direction_for(node.region, position))
            depth += 1
        if isinstance(node, OccupiedLeaf):
            return _separable(node.region, depth, node.elem.position, position, self.max_depth)
        return True

    def apply_fold(self, folder: QuadtreeFolder[T, R]) -> R:
        """Post-order fold over the whole tree; returns the root's result."""
        return self._fold(self._root, folder, ROOT_PATH)

    def _fold(self, node: Node, folder: QuadtreeFolder[T, R], path: Path) -> R:
        if isinstance(node, EmptyLeaf):
            return folder.visit_empty(path)
        if isinstance(node, OccupiedLeaf):
            return folder.visit_leaf(path, node.elem)

        nw, ne, sw, se = (
            self._fold(child, folder, path + (direction,))
            for direction, child in node.children()
        )
        return folder.visit_quad(path, nw, ne, sw, se)

    def get_regions(self) -> Dict[Path, Rectangle]:
        """Region of every node, keyed by path, regardless of occupancy."""
        collector: Dict[Path, Rectangle] = {}
        for path, node in self._walk():
            collector[path] = node.region
        return collector

    def get_paths_fitting(self, pred: Callable[[Rectangle], bool]) -> Set[Path]:
        """Paths of the frontier of nodes where descent stops.

        A node whose region satisfies ``pred`` is taken whole and its children
        are not visited. Otherwise internal nodes are descended into and
        occupied leaves are taken individually; empty leaves contribute
        nothing.
        """
        collector: Set[Path] = set()
        self._paths_fitting(self._root, pred, ROOT_PATH, collector)
        return collector

    def _paths_fitting(self, node: Node, pred, path: Path, collector: Set[Path]):
        if pred(node.region):
            collector.add(path)
            return

        if isinstance(node, InternalNode):
            for direction, child in node.children():
                self._paths_fitting(child, pred, path + (direction,), collector)
        elif isinstance(node, OccupiedLeaf):
            collector.add(path)

    def occupied_paths(self) -> Dict[Path, T]:
        """Element held by each occupied leaf, keyed by path."""
        return {
            path: node.elem
            for path, node in self._walk()
            if isinstance(node, OccupiedLeaf)
        }

    def node_at(self, path: Path) -> Optional[Node]:
        """Node addressed by ``path``, or None when the path leads nowhere."""
        node = self._root
        for direction in path:
            if not isinstance(node, InternalNode):
                return None
            node = node.child(direction)
        return node

    def depth(self) -> int:
        """Length of the longest path in the tree."""
        return max(len(path) for path, _ in self._walk())

    def _walk(self) -> Iterator[Tuple[Path, Node]]:
        """Pre-order iteration over (path, node)."""
        stack: List[Tuple[Path, Node]] = [(ROOT_PATH, self._root)]
        while stack:
            path, node = stack.pop()
            yield path, node
            if isinstance(node, InternalNode):
                for direction, child in reversed(list(node.children())):
                    stack.append((path + (direction,), child))
