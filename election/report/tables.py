# election/report/tables.py
from __future__ import annotations

import pandas as pd

from election.experiment.result import ExperimentResult
from election.report.base import Report


class WinnersCsvReport(Report):
    """One row per run, one column per rank."""

    def __init__(self, output_path):
        self._path = output_path

    def render(self, result: ExperimentResult) -> None:
        if not result.winners:
            return

        columns = [f"rank_{r + 1}" for r in range(result.num_left)]
        df = pd.DataFrame(result.winners, columns=columns)
        df.to_csv(self._path, index_label="run")


class RankStatsCsvReport(Report):
    def __init__(self, output_path):
        self._path = output_path

    def render(self, result: ExperimentResult) -> None:
        stats = result.statistics()
        df = pd.DataFrame(
            {
                "rank": range(1, len(stats) + 1),
                "mean": stats.mean,
                "stdev": stats.stdev,
            }
        )
        df.to_csv(self._path, index=False)
