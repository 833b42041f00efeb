#!filepath: election/observability/instrumentation.py
from __future__ import annotations

from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Dict

from election import logs
from election.observability.progress import ProgressReporter


@dataclass
class TimerSpan:
    name: str
    elapsed: float = 0.0


@dataclass
class Instrumentation:
    """
    Experiment 级可观测性：timer + progress + metrics。

    - timer(name) 产出 TimerSpan；enabled 时同时写入 timeline（按进入顺序）
    - metrics 只在冷路径记录（实验结束后）
    - 淘汰 / 抽样热循环中不调用
    """

    enabled: bool = True
    progress_every: int = 1

    def __post_init__(self):
        self.progress = ProgressReporter(enabled=self.enabled, every=self.progress_every)
        self.metrics: Dict[str, Any] = {}
        self.timeline: Dict[str, float] = OrderedDict()

    @contextmanager
    def timer(self, name: str):
        span = TimerSpan(name)
        start = perf_counter()
        try:
            yield span
        finally:
            span.elapsed = perf_counter() - start
            if self.enabled:
                self.timeline[name] = span.elapsed

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        self.metrics[name] = value
        logs.info(f"[Metric] {name} = {value}")

    def report(self, title: str):
        if not self.enabled:
            return
        logs.info(f"[Timeline] ===== {title} =====")

        total = 0.0
        for name, sec in self.timeline.items():
            logs.info(f"[Timeline] {name:<30} {sec:>8.3f}s")
            total += sec

        logs.info(f"[Timeline] Total{'':<27} {total:>8.3f}s")
