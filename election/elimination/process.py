# election/elimination/process.py
from __future__ import annotations

from election.elimination.policy import (
    EliminationPolicy,
    GlobalMinimumPolicy,
    SampledMinimumPolicy,
)
from election.random_source import RandomSource
from election.utils.errors import InvalidArgument, InvalidState
from election.world import Removal, World


class EliminationProcess:
    """
    EliminationProcess

    统一淘汰循环：
        select(policy) → World.remove → Removal
    World 原地修改；返回按淘汰顺序排列的记录。
    """

    def __init__(
        self,
        policy: EliminationPolicy,
        rng: RandomSource | None = None,
    ) -> None:
        self._policy = policy
        self._rng = rng

    @property
    def policy(self) -> EliminationPolicy:
        return self._policy

    def run(self, world: World, rounds: int) -> list[Removal]:
        if rounds < 0:
            raise InvalidArgument(f"rounds must be >= 0, got {rounds}")
        if rounds > len(world):
            raise InvalidArgument(
                f"rounds={rounds} exceeds population {len(world)}"
            )

        removals: list[Removal] = []
        for _ in range(rounds):
            if len(world) == 1:
                raise InvalidState(
                    f"round {len(removals) + 1}/{rounds} would empty the World",
                    removals=removals,
                )
            loser = self._policy.select(world, self._rng)
            removals.append(world.remove(loser))

        return removals


def run_global(world: World, rounds: int) -> list[Removal]:
    return EliminationProcess(GlobalMinimumPolicy()).run(world, rounds)


def run_sampled(
    world: World,
    rounds: int,
    sample_size: int,
    rng: RandomSource,
) -> list[Removal]:
    return EliminationProcess(SampledMinimumPolicy(sample_size), rng).run(world, rounds)
