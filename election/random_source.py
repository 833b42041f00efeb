#!filepath: election/random_source.py
from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """
    Randomness capability consumed by the simulator.

    Every construction / sampling / growth call receives one explicitly;
    there is no module-level generator.
    """

    def uniform(self) -> float:
        ...

    def uniforms(self, n: int) -> np.ndarray:
        ...

    def normals(self, n: int) -> np.ndarray:
        ...

    def sample(self, population: int, k: int) -> list[int]:
        ...


class NumpyRandomSource:
    """
    RandomSource over numpy.random.Generator.

    - NumpyRandomSource(seed)        → 可复现
    - NumpyRandomSource(generator)   → 复用已有 Generator
    - NumpyRandomSource()            → OS entropy
    """

    def __init__(self, seed: int | np.random.Generator | None = None):
        if isinstance(seed, np.random.Generator):
            self._gen = seed
        else:
            self._gen = np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        return self._gen

    def uniform(self) -> float:
        return float(self._gen.random())

    def uniforms(self, n: int) -> np.ndarray:
        return self._gen.random(n)

    def normals(self, n: int) -> np.ndarray:
        return self._gen.standard_normal(n)

    def sample(self, population: int, k: int) -> list[int]:
        # 无放回抽样；k > population 由 numpy 抛 ValueError
        picked = self._gen.choice(population, size=k, replace=False)
        return [int(i) for i in picked]

    def spawn(self, n: int) -> list["NumpyRandomSource"]:
        """
        Independent child streams (one per trial / worker).
        """
        return [NumpyRandomSource(g) for g in self._gen.spawn(n)]
