# election/stats/rank_stats.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from election.utils.errors import InvalidArgument


@dataclass(frozen=True)
class RankStatistics:
    """
    RankStatistics

    Per-rank mean / sample stdev over many run results.
    mean[r] and stdev[r] describe the r-th surviving point (sorted).
    """

    mean: np.ndarray
    stdev: np.ndarray
    n_runs: int

    def __len__(self) -> int:
        return len(self.mean)

    def scaled_stdev(self) -> tuple[np.ndarray, np.ndarray]:
        """
        (rank / L, stdev * sqrt(L)) — puts experiments with different
        survivor counts L on one axis.
        """
        length = len(self.stdev)
        ranks = np.arange(1, length + 1) / length
        return ranks, self.stdev * np.sqrt(length)


def rank_columns(runs: Sequence[Sequence[float]]) -> np.ndarray:
    """
    Stack run results into a (n_runs, length) matrix; column r is rank r.
    """
    if len(runs) == 0:
        raise InvalidArgument("rank statistics need at least one run")

    length = len(runs[0])
    for k, run in enumerate(runs):
        if len(run) != length:
            raise InvalidArgument(
                f"run {k} has length {len(run)}, expected {length}"
            )

    return np.asarray(runs, dtype=float).reshape(len(runs), length)


def compute_rank_statistics(runs: Sequence[Sequence[float]]) -> RankStatistics:
    matrix = rank_columns(runs)

    mean = matrix.mean(axis=0)
    if matrix.shape[0] > 1:
        stdev = matrix.std(axis=0, ddof=1)
    else:
        # 单次 run 的样本标准差无定义
        stdev = np.full(matrix.shape[1], np.nan)

    return RankStatistics(mean=mean, stdev=stdev, n_runs=matrix.shape[0])
