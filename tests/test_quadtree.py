"""Tests for the region quadtree."""

import numpy as np
import pytest

from gravity_sim.geometry import Rectangle, Vec2
from gravity_sim.physics.particle import Particle
from gravity_sim.quadtree import (
    Direction,
    EmptyLeaf,
    InternalNode,
    OccupiedLeaf,
    Quadtree,
    QuadtreeFolder,
    direction_for,
    path_to_str,
)

NW, NE, SW, SE = Direction.NW, Direction.NE, Direction.SW, Direction.SE


def make(x, y, mass=1.0):
    return Particle(Vec2(x, y), mass=mass)


def random_particles(n, seed=0, size=100.0):
    rng = np.random.default_rng(seed)
    # Strictly inside the field
    xs = rng.uniform(0.01, size - 0.01, n)
    ys = rng.uniform(0.01, size - 0.01, n)
    masses = rng.uniform(1.0, 5.0, n)
    return [make(float(x), float(y), float(m)) for x, y, m in zip(xs, ys, masses)]


class RecordingFolder(QuadtreeFolder):
    """Records the order of visits and counts elements."""

    def __init__(self):
        self.calls = []

    def visit_empty(self, path):
        self.calls.append(("empty", path))
        return 0

    def visit_leaf(self, path, elem):
        self.calls.append(("leaf", path))
        return 1

    def visit_quad(self, path, nw, ne, sw, se):
        self.calls.append(("quad", path))
        return nw + ne + sw + se


class TestDirection:
    """Tests for quadrant selection."""

    def test_quadrants(self):
        r = Rectangle(0.0, 0.0, 100.0, 100.0)
        assert direction_for(r, Vec2(25.0, 25.0)) is NW
        assert direction_for(r, Vec2(75.0, 25.0)) is NE
        assert direction_for(r, Vec2(25.0, 75.0)) is SW
        assert direction_for(r, Vec2(75.0, 75.0)) is SE

    def test_ties_go_north_then_west(self):
        r = Rectangle(0.0, 0.0, 100.0, 100.0)
        assert direction_for(r, Vec2(50.0, 50.0)) is NW
        assert direction_for(r, Vec2(75.0, 50.0)) is NE
        assert direction_for(r, Vec2(50.0, 75.0)) is SW

    def test_path_to_str(self):
        assert path_to_str(()) == "/"
        assert path_to_str((NW, SE)) == "NW/SE"


class TestInsertion:
    """Tests for Quadtree.insert."""

    def test_empty_tree(self):
        tree = Quadtree(100.0, 100.0)
        assert len(tree) == 0
        assert isinstance(tree.root, EmptyLeaf)
        assert tree.get_regions() == {(): Rectangle(0.0, 0.0, 100.0, 100.0)}

    def test_insert_single(self):
        tree = Quadtree(100.0, 100.0)
        p = make(25.0, 25.0)
        assert tree.insert(p)
        assert isinstance(tree.root, OccupiedLeaf)
        assert tree.root.elem is p
        assert len(tree) == 1

    def test_insert_out_of_bounds(self):
        tree = Quadtree(100.0, 100.0)
        assert not tree.insert(make(150.0, 50.0))
        assert not tree.insert(make(-1.0, 50.0))
        assert len(tree) == 0
        assert isinstance(tree.root, EmptyLeaf)

    def test_zero_size_field_rejects_everything(self):
        tree = Quadtree(0.0, 0.0)
        assert not tree.insert(make(0.0, 0.0))
        assert not tree.insert(make(1.0, 1.0))
        assert len(tree) == 0
        assert isinstance(tree.root, EmptyLeaf)

    def test_zero_width_field_rejects_edge(self):
        tree = Quadtree(0.0, 100.0)
        assert not tree.insert(make(0.0, 50.0))
        tree = Quadtree(100.0, 0.0)
        assert not tree.insert(make(50.0, 0.0))
        assert len(tree) == 0

    def test_split(self):
        tree = Quadtree(100.0, 100.0)
        a, b = make(25.0, 25.0), make(75.0, 75.0)
        tree.insert(a)
        tree.insert(b)

        assert isinstance(tree.root, InternalNode)
        assert tree.node_at((NW,)).elem is a
        assert tree.node_at((SE,)).elem is b
        assert isinstance(tree.node_at((NE,)), EmptyLeaf)
        assert isinstance(tree.node_at((SW,)), EmptyLeaf)
        assert len(tree.get_regions()) == 5

    def test_deep_split(self):
        tree = Quadtree(100.0, 100.0)
        a, b = make(1.0, 1.0), make(2.0, 2.0)
        tree.insert(a)
        tree.insert(b)
        occupied = tree.occupied_paths()
        assert set(occupied.values()) == {a, b}
        assert all(len(path) > 3 for path in occupied)
        assert all(path[:3] == (NW, NW, NW) for path in occupied)

    def test_coincident_positions_rejected(self):
        tree = Quadtree(100.0, 100.0)
        a, b = make(10.0, 10.0), make(10.0, 10.0)
        assert tree.insert(a)
        assert not tree.insert(b)
        assert len(tree) == 1
        assert isinstance(tree.root, OccupiedLeaf)
        assert tree.root.elem is a

    def test_max_depth(self):
        tree = Quadtree(100.0, 100.0, max_depth=1)
        assert tree.insert(make(10.0, 10.0))
        assert not tree.insert(make(20.0, 20.0))
        assert tree.insert(make(90.0, 90.0))
        assert tree.depth() == 1
        assert len(tree) == 2

    def test_insertion_totality(self):
        particles = random_particles(200, seed=1)
        tree = Quadtree(100.0, 100.0)
        for p in particles:
            assert tree.insert(p)

        occupied = tree.occupied_paths()
        assert len(occupied) == 200
        assert {id(p) for p in occupied.values()} == {id(p) for p in particles}

        regions = tree.get_regions()
        internal = [path for path in regions if isinstance(tree.node_at(path), InternalNode)]
        assert len(regions) == 4 * len(internal) + 1

    def test_order_does_not_change_occupancy(self):
        particles = random_particles(100, seed=2)
        forward = Quadtree(100.0, 100.0)
        backward = Quadtree(100.0, 100.0)
        for p in particles:
            forward.insert(p)
        for p in reversed(particles):
            backward.insert(p)

        f = {path: id(p) for path, p in forward.occupied_paths().items()}
        b = {path: id(p) for path, p in backward.occupied_paths().items()}
        assert f == b


class TestPartition:
    """Every internal node is tiled by its four children."""

    def test_children_tile_parent(self):
        tree = Quadtree(100.0, 60.0)
        for p in random_particles(150, seed=3, size=60.0):
            tree.insert(p)

        regions = tree.get_regions()
        checked = 0
        for path, region in regions.items():
            if not isinstance(tree.node_at(path), InternalNode):
                continue
            quads = [regions[path + (d,)] for d in (NW, NE, SW, SE)]
            assert sum(q.area for q in quads) == pytest.approx(region.area)
            for q in quads:
                assert region.contains_rect(q)
            assert quads[0].max_x == quads[1].x == quads[2].max_x == quads[3].x
            assert quads[0].max_y == quads[2].y == quads[1].max_y == quads[3].y
            checked += 1
        assert checked > 0


class TestFold:
    """Tests for Quadtree.apply_fold."""

    def test_fold_empty(self):
        folder = RecordingFolder()
        assert Quadtree(10.0, 10.0).apply_fold(folder) == 0
        assert folder.calls == [("empty", ())]

    def test_fold_order_is_post_order(self):
        tree = Quadtree(100.0, 100.0)
        tree.insert(make(25.0, 25.0))
        tree.insert(make(75.0, 75.0))

        folder = RecordingFolder()
        assert tree.apply_fold(folder) == 2
        assert folder.calls == [
            ("leaf", (NW,)),
            ("empty", (NE,)),
            ("empty", (SW,)),
            ("leaf", (SE,)),
            ("quad", ()),
        ]

    def test_fold_counts_elements(self):
        tree = Quadtree(100.0, 100.0)
        for p in random_particles(64, seed=4):
            tree.insert(p)
        assert tree.apply_fold(RecordingFolder()) == 64


class TestPathsFitting:
    """Tests for Quadtree.get_paths_fitting."""

    def _tree(self):
        tree = Quadtree(100.0, 100.0)
        tree.insert(make(25.0, 25.0))
        tree.insert(make(75.0, 75.0))
        return tree

    def test_always_true_stops_at_root(self):
        assert self._tree().get_paths_fitting(lambda region: True) == {()}

    def test_always_false_returns_occupied_leaves(self):
        assert self._tree().get_paths_fitting(lambda region: False) == {(NW,), (SE,)}

    def test_empty_tree(self):
        tree = Quadtree(100.0, 100.0)
        assert tree.get_paths_fitting(lambda region: False) == set()
        assert tree.get_paths_fitting(lambda region: True) == {()}

    def test_admitted_empty_leaf_is_returned(self):
        tree = self._tree()
        paths = tree.get_paths_fitting(lambda region: region.width < 100.0)
        assert paths == {(NW,), (NE,), (SW,), (SE,)}

    def test_frontier_covers_every_particle_once(self):
        tree = Quadtree(100.0, 100.0)
        for p in random_particles(120, seed=5):
            tree.insert(p)

        paths = tree.get_paths_fitting(lambda region: region.width <= 12.5)
        occupied = tree.occupied_paths()
        for leaf_path in occupied:
            covering = [p for p in paths if leaf_path[:len(p)] == p]
            assert len(covering) == 1
