#!filepath: election/backward/sampler.py
from __future__ import annotations

import bisect

from election import logs
from election.random_source import RandomSource
from election.utils.errors import InvalidArgument, SamplingExhausted
from election.world import World, compute_areas


def _check_bound(max_attempts: int | None) -> None:
    if max_attempts is not None and max_attempts < 1:
        raise InvalidArgument(f"max_attempts must be >= 1 or None, got {max_attempts}")


def grow_one(
    world: World,
    rng: RandomSource,
    max_attempts: int | None = None,
) -> World:
    """
    Backward step: insert one point that would lose the very next election.

    Rejection sampling:
      1. x ~ U[0, 1]
      2. candidate = sorted(points + [x]), areas recomputed from scratch
      3. accept iff x sits at the global-minimum index of the candidate

    Experimental: this is not known to sample true predecessor states.
    `max_attempts=None` keeps the unbounded loop; otherwise
    SamplingExhausted is raised after that many rejected draws.
    The input world is left untouched.
    """
    _check_bound(max_attempts)

    base = list(world.points)
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        x = rng.uniform()

        pts = list(base)
        bisect.insort(pts, x)
        areas = compute_areas(pts)

        # 同值时取第一个位置
        i = bisect.bisect_left(pts, x)
        loser = min(range(len(areas)), key=areas.__getitem__)
        if i == loser:
            logs.debug(f"[Backward] accepted x={x:.6f} n={len(pts)} attempts={attempts}")
            return World._from_sorted(pts, areas)

    raise SamplingExhausted(
        f"no losing insertion found for n={len(world)} in {max_attempts} attempts",
        attempts=attempts,
    )


def grow_to(
    world: World,
    target_size: int,
    rng: RandomSource,
    max_attempts: int | None = None,
) -> World:
    """Repeat grow_one until the World holds `target_size` points."""
    if target_size <= len(world):
        raise InvalidArgument(
            f"target_size={target_size} must exceed current size {len(world)}"
        )
    _check_bound(max_attempts)

    while len(world) < target_size:
        world = grow_one(world, rng, max_attempts=max_attempts)
    return world
