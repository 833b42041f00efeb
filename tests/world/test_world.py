#!filepath: tests/world/test_world.py
from __future__ import annotations

import pytest

from election.random_source import NumpyRandomSource
from election.utils.errors import InvalidArgument, InvalidState
from election.world import Distribution, Removal, World

TOL = 1e-9


def assert_partition(world: World):
    assert len(world.points) == len(world.areas) == len(world)
    assert all(a >= 0.0 for a in world.areas)
    assert sum(world.areas) == pytest.approx(1.0, abs=TOL)
    assert list(world.points) == sorted(world.points)


# =============================================================================
# construction
# =============================================================================

def test_from_points_sorts_and_keeps_input():
    raw = [0.9, 0.2, 0.5]
    world = World.from_points(raw)

    assert world.points == (0.2, 0.5, 0.9)
    assert world.areas == pytest.approx((0.35, 0.35, 0.3))
    assert raw == [0.9, 0.2, 0.5]


def test_singleton_world():
    world = World.from_points([0.37])
    assert world.areas == (1.0,)
    assert len(world) == 1


def test_empty_points_rejected():
    with pytest.raises(InvalidArgument):
        World.from_points([])


@pytest.mark.parametrize("count", [0, -3])
def test_non_positive_count_rejected(rng, count):
    with pytest.raises(InvalidArgument):
        World.from_distribution(count, Distribution.UNIFORM, rng)


def test_unknown_distribution_rejected(rng):
    with pytest.raises(InvalidArgument, match="unknown distribution"):
        World.from_distribution(10, "cauchy", rng)


@pytest.mark.parametrize("dist", ["uniform", "normal", Distribution.NORMAL])
@pytest.mark.parametrize("count", [1, 2, 3, 50, 400])
def test_partition_invariant_after_construction(dist, count):
    world = World.from_distribution(count, dist, NumpyRandomSource(count))

    assert len(world) == count
    assert all(0.0 <= p <= 1.0 for p in world.points)
    assert_partition(world)


def test_normal_distribution_is_folded_into_unit_interval():
    world = World.from_distribution(2000, Distribution.NORMAL, NumpyRandomSource(7))
    pts = world.points

    # 折叠后质量集中在 0 和 1 附近
    near_edges = sum(1 for p in pts if p < 0.2 or p > 0.8)
    assert near_edges > 0.6 * len(pts)


def test_normal_draws_are_scaled_then_folded(scripted):
    rng = scripted(normals=[-0.5, 1.0, 6.0])

    world = World.from_distribution(3, Distribution.NORMAL, rng)

    # -0.1 mod 1 = 0.9, 0.2, 1.2 mod 1 = 0.2
    assert world.points == pytest.approx((0.2, 0.2, 0.9))
    assert_partition(world)


def test_same_seed_same_world():
    a = World.from_distribution(30, "uniform", NumpyRandomSource(3))
    b = World.from_distribution(30, "uniform", NumpyRandomSource(3))
    assert a.points == b.points


# =============================================================================
# removal
# =============================================================================

def test_remove_interior_of_three_recomputes_two_point_rule():
    world = World.from_points([0.2, 0.5, 0.9])

    record = world.remove(1)

    assert record.point == 0.5
    assert record.area == pytest.approx(0.35)
    assert world.points == (0.2, 0.9)
    assert world.areas == pytest.approx((0.55, 0.45))


def test_remove_down_to_singleton():
    world = World.from_points([0.3, 0.6])
    record = world.remove(0)

    assert record == Removal(point=0.3, area=pytest.approx(0.45))
    assert world.points == (0.6,)
    assert world.areas == (1.0,)


def test_remove_from_singleton_is_invalid_state():
    world = World.from_points([0.37])

    with pytest.raises(InvalidState):
        world.remove(0)

    assert world.points == (0.37,)
    assert world.areas == (1.0,)


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_remove_out_of_range(index):
    world = World.from_points([0.1, 0.5, 0.8])

    with pytest.raises(InvalidArgument):
        world.remove(index)

    assert len(world) == 3


@pytest.mark.parametrize("n", range(2, 13))
def test_incremental_matches_full_recompute(n):
    base = World.from_distribution(n, "uniform", NumpyRandomSource(100 + n))

    for i in range(n):
        world = base.copy()
        record = world.remove(i)

        remaining = [p for k, p in enumerate(base.points) if k != i]
        expected = World.from_points(remaining)

        assert record.point == base.points[i]
        assert record.area == base.areas[i]
        assert world.points == expected.points
        assert world.areas == pytest.approx(expected.areas, abs=TOL)
        assert_partition(world)


def test_interior_removal_touches_only_neighbours():
    world = World.from_points([0.05, 0.15, 0.3, 0.45, 0.6, 0.8, 0.95])
    before = world.areas

    world.remove(3)
    after = world.areas

    # old 0,1 and old 5,6 keep their cells; old 2 and old 4 grow
    assert after[0:2] == before[0:2]
    assert after[4:] == before[5:]
    assert after[2] > before[2]
    assert after[3] > before[4]


def test_repeated_removal_keeps_partition(rng):
    world = World.from_distribution(200, "uniform", rng)

    while len(world) > 1:
        size = len(world)
        world.remove(size // 3)
        assert len(world) == size - 1
        assert_partition(world)

    assert world.areas == (1.0,)


def test_argmin_first_occurrence():
    world = World.from_points([0.125, 0.25, 0.5, 0.75, 0.875])
    # areas = [0.1875, 0.1875, 0.25, 0.1875, 0.1875]
    assert world.argmin() == 0


def test_copy_is_independent():
    world = World.from_points([0.1, 0.4, 0.7])
    clone = world.copy()
    clone.remove(1)

    assert len(world) == 3
    assert len(clone) == 2


# =============================================================================
# direct constructor
# =============================================================================

def test_direct_constructor_accepts_consistent_state():
    world = World([0.2, 0.9], [0.55, 0.45])

    assert world.points == (0.2, 0.9)
    assert world.argmin() == 1


@pytest.mark.parametrize(
    "points, areas, match",
    [
        ([], [], "at least one point"),
        ([0.2, 0.9], [1.0], "not aligned"),
        ([0.9, 0.1], [0.5, 0.5], "sorted"),
        ([0.2, 0.9], [0.5, 0.2], "partition"),
        ([0.2, 0.9], [1.5, -0.5], "partition"),
    ],
)
def test_direct_constructor_rejects_broken_state(points, areas, match):
    with pytest.raises(InvalidArgument, match=match):
        World(points, areas)


def test_direct_constructor_copies_inputs():
    points, areas = [0.2, 0.9], [0.55, 0.45]
    world = World(points, areas)

    world.remove(0)

    assert points == [0.2, 0.9]
    assert areas == [0.55, 0.45]
