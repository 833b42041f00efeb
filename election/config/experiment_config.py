#!filepath: election/config/experiment_config.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

from election.world import Distribution


class ExperimentConfig(BaseModel):
    """
    ExperimentConfig

    语义：
      - 一次“选举实验”的定义：多少点、跑多少次、剩多少个
      - 不定义输出路径（由 CLI / report 决定）
    """

    name: str = "default"

    num_points: int = Field(200, ge=1)
    num_elections: int = Field(1000, ge=1)
    num_left: int = Field(1, ge=1)

    distribution: Distribution = Distribution.UNIFORM

    # global: 全局最小淘汰；sampled: 随机 sample_size 个中最小的淘汰
    policy: Literal["global", "sampled"] = "global"
    sample_size: int = Field(2, ge=1)

    seed: Optional[int] = None
    workers: Optional[int] = Field(None, ge=1)
    progress_every: int = Field(1000, ge=1)

    @model_validator(mode="after")
    def _survivors_fit(self) -> "ExperimentConfig":
        if self.num_left > self.num_points:
            raise ValueError(
                f"num_left={self.num_left} exceeds num_points={self.num_points}"
            )
        return self

    @property
    def rounds(self) -> int:
        return self.num_points - self.num_left


class BackwardConfig(BaseModel):
    """
    Backward growth of surviving configurations (experimental).
    """

    grow_to: int = Field(3, ge=2)
    num_samples: int = Field(1000, ge=1)

    # None = 不设上限（可能无限循环）
    max_attempts: Optional[int] = Field(1_000_000, ge=1)
