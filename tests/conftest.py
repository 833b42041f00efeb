# tests/conftest.py
from __future__ import annotations

import matplotlib
import pytest
from loguru import logger

from election.random_source import NumpyRandomSource

matplotlib.use("Agg")


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def rng() -> NumpyRandomSource:
    return NumpyRandomSource(20240601)


@pytest.fixture
def make_rng():
    """
    Factory: make_rng(seed) → fresh, independent NumpyRandomSource.
    """

    def _make(seed: int = 0) -> NumpyRandomSource:
        return NumpyRandomSource(seed)

    return _make


class ScriptedRandom:
    """
    Deterministic RandomSource for selection / rejection tests.

    - uniform() cycles through `uniforms`, normals(n) through `normals`
    - sample() returns the next scripted index list (truncated to k)
    """

    def __init__(self, uniforms=(0.5,), samples=(), normals=(0.0,)):
        self._uniforms = list(uniforms)
        self._normals = list(normals)
        self._samples = [list(s) for s in samples]
        self.uniform_calls = 0
        self.sample_calls = 0

    def uniform(self) -> float:
        value = self._uniforms[self.uniform_calls % len(self._uniforms)]
        self.uniform_calls += 1
        return value

    def uniforms(self, n):
        import numpy as np

        return np.array([self.uniform() for _ in range(n)])

    def normals(self, n):
        import numpy as np

        return np.array([self._normals[i % len(self._normals)] for i in range(n)])

    def sample(self, population, k):
        picked = self._samples[self.sample_calls % len(self._samples)]
        self.sample_calls += 1
        return [i for i in picked if i < population][:k]


@pytest.fixture
def scripted():
    return ScriptedRandom
