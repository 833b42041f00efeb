# election/report/base.py
from __future__ import annotations

from abc import ABC, abstractmethod

from election import logs
from election.experiment.result import ExperimentResult


class Report(ABC):
    """
    Report

    ExperimentResult -> side effects (files, figures)

    - 只读消费 ExperimentResult
    - 派生统计一律来自 election.stats
    - 删除任何 report 不影响实验结果
    """

    @abstractmethod
    def render(self, result: ExperimentResult) -> None:
        ...


class ReportPipeline:
    def __init__(self, reports: list[Report]):
        self._reports = reports

    def render_all(self, result: ExperimentResult) -> None:
        for r in self._reports:
            r.render(result)
            logs.info(f"[Report] {r.__class__.__name__} rendered for {result.name}")
