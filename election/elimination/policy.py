# election/elimination/policy.py
from __future__ import annotations

from abc import ABC, abstractmethod

from election.random_source import RandomSource
from election.utils.errors import InvalidArgument
from election.world import World


class EliminationPolicy(ABC):
    """
    EliminationPolicy

    纯选择器：
      World -> 本轮被淘汰的 index
    不修改 World。
    """

    name: str = ""

    @abstractmethod
    def select(self, world: World, rng: RandomSource | None) -> int:
        ...


class GlobalMinimumPolicy(EliminationPolicy):
    """Smallest area over the whole population; ties go to the lowest index."""

    name = "global"

    def select(self, world: World, rng: RandomSource | None = None) -> int:
        return world.argmin()


class SampledMinimumPolicy(EliminationPolicy):
    """
    Smallest area among `sample_size` distinct, uniformly drawn indices.

    When the population is smaller than the sample, everyone is compared.
    """

    name = "sampled"

    def __init__(self, sample_size: int):
        if sample_size < 1:
            raise InvalidArgument(f"sample_size must be >= 1, got {sample_size}")
        self.sample_size = sample_size

    def select(self, world: World, rng: RandomSource | None) -> int:
        if rng is None:
            raise InvalidArgument("SampledMinimumPolicy needs a random source")

        picked = rng.sample(len(world), min(self.sample_size, len(world)))
        # 同值时取 index 最小者（与全局策略一致）
        return min(picked, key=lambda i: (world.area(i), i))
