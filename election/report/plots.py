# election/report/plots.py
from __future__ import annotations

from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from election.experiment.result import ExperimentResult
from election.report.base import Report
from election.stats import RankStatistics

BIN_WIDTH = 0.005


def _bins() -> np.ndarray:
    return np.arange(0.0, 1.0 + BIN_WIDTH, BIN_WIDTH)


class WinnersHistogramReport(Report):
    """Normalised histogram of the rank-1 survivor."""

    def __init__(self, output_path):
        self._path = output_path

    def render(self, result: ExperimentResult) -> None:
        plt.figure(figsize=(8, 4))
        plt.hist(result.rank(0), bins=_bins(), density=True, label="Winners")
        plt.title("Histogram of winning points")
        plt.xlabel("Winning point")
        plt.ylabel("Probability")
        plt.tight_layout()
        plt.savefig(self._path)
        plt.close()


class WinnersDensityReport(Report):
    """One density curve per surviving rank."""

    def __init__(self, output_path, ylim: tuple[float, float] | None = None):
        self._path = output_path
        self._ylim = ylim

    def render(self, result: ExperimentResult) -> None:
        bins = _bins()
        centers = 0.5 * (bins[1:] + bins[:-1])

        plt.figure(figsize=(8, 4))
        for r in range(result.num_left):
            density, _ = np.histogram(result.rank(r), bins=bins, density=True)
            plt.plot(centers, density, linewidth=1)
        if self._ylim is not None:
            plt.ylim(*self._ylim)
        plt.title("Density of winning points")
        plt.xlabel("Winning point")
        plt.ylabel("Density")
        plt.tight_layout()
        plt.savefig(self._path)
        plt.close()


class RankStatsReport(Report):
    """Mean and stdev per rank, side by side."""

    def __init__(self, output_path):
        self._path = output_path

    def render(self, result: ExperimentResult) -> None:
        stats = result.statistics()
        ranks = np.arange(1, len(stats) + 1)

        fig, (ax_mean, ax_std) = plt.subplots(1, 2, figsize=(10, 4))
        ax_mean.plot(ranks, stats.mean, marker="o", markersize=2, label="Mean")
        ax_mean.set_xlabel("Rank")
        ax_mean.legend()
        ax_std.plot(ranks, stats.stdev, marker="o", markersize=2, label="Stdev")
        ax_std.set_xlabel("Rank")
        ax_std.legend()
        fig.tight_layout()
        fig.savefig(self._path)
        plt.close(fig)


class StdevScalingReport:
    """
    stdev * sqrt(L) against rank / L for several experiments.

    Takes RankStatistics directly: it compares experiments, so it is not
    a single-result Report.
    """

    def __init__(self, output_path):
        self._path = output_path

    def render(self, stats: Sequence[RankStatistics]) -> None:
        plt.figure(figsize=(8, 4))
        for s in stats:
            x, y = s.scaled_stdev()
            plt.plot(x, y, marker="o", markersize=2, label=f"Stdev {len(s)}")
        plt.xlabel("Rank / L")
        plt.ylabel("Stdev * sqrt(L)")
        plt.legend()
        plt.tight_layout()
        plt.savefig(self._path)
        plt.close()
