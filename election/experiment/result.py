# election/experiment/result.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from election.stats import RankStatistics, compute_rank_statistics


@dataclass(frozen=True)
class ExperimentResult:
    """
    ExperimentResult

    不可变事实结果：
      - winners[k] = 第 k 次 trial 的存活点（升序）
      - 所有 winners 长度一致
      - 统计 / 报告都是它的纯函数
    """

    name: str
    num_points: int
    num_left: int
    policy: str
    distribution: str
    winners: List[List[float]]
    elapsed: float = 0.0
    params: Dict = field(default_factory=dict)

    @property
    def n_runs(self) -> int:
        return len(self.winners)

    def rank(self, r: int) -> List[float]:
        """All r-th survivors (0-based rank) across runs."""
        return [w[r] for w in self.winners]

    def statistics(self) -> RankStatistics:
        return compute_rank_statistics(self.winners)
