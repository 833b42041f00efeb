#!filepath: election/world/world.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

import numpy as np

from election.random_source import RandomSource
from election.utils.errors import InvalidArgument, InvalidState
from election.world.areas import compute_areas, inner_area, left_area, right_area

# normal 分布折叠到 [0, 1] 前的缩放（1/5 标准差）
NORMAL_SCALE = 0.2
PARTITION_TOL = 1e-6


class Distribution(str, Enum):
    UNIFORM = "uniform"
    NORMAL = "normal"


@dataclass(frozen=True)
class Removal:
    """
    Removal record: the point and its area, captured before deletion.
    """

    point: float
    area: float


class World:
    """
    World = 有序点集 + 对齐的 Voronoi 区间长度

    约束：
      - points 始终升序
      - len(points) == len(areas) >= 1
      - areas 构成 [0, 1] 的划分（和为 1）

    唯一的变更入口是 remove()，每次只重算 0~2 个受影响的区间。
    """

    __slots__ = ("_points", "_areas")

    def __init__(self, points: list[float], areas: list[float]):
        if not points:
            raise InvalidArgument("World requires at least one point")
        if len(points) != len(areas):
            raise InvalidArgument(
                f"points ({len(points)}) and areas ({len(areas)}) are not aligned"
            )
        if any(a > b for a, b in zip(points, points[1:])):
            raise InvalidArgument("World points must be sorted ascending")
        if any(a < 0.0 for a in areas) or abs(sum(areas) - 1.0) > PARTITION_TOL:
            raise InvalidArgument("World areas must partition [0, 1]")

        self._points = list(points)
        self._areas = list(areas)

    @classmethod
    def _from_sorted(cls, points: list[float], areas: list[float]) -> "World":
        # 内部构造：调用方保证非空、已排序且 areas 对齐（不复制）
        world = cls.__new__(cls)
        world._points = points
        world._areas = areas
        return world

    # --------------------------------------------------
    # construction
    # --------------------------------------------------
    @classmethod
    def from_points(cls, points: Iterable[float]) -> "World":
        pts = sorted(float(p) for p in points)
        if not pts:
            raise InvalidArgument("World requires at least one point")
        if len(pts) == 1:
            return cls._from_sorted(pts, [1.0])
        return cls._from_sorted(pts, compute_areas(pts))

    @classmethod
    def from_distribution(
        cls,
        count: int,
        distribution: Distribution | str,
        rng: RandomSource,
    ) -> "World":
        if count < 1:
            raise InvalidArgument(f"World count must be >= 1, got {count}")

        try:
            dist = Distribution(distribution)
        except ValueError:
            raise InvalidArgument(f"unknown distribution: {distribution!r}") from None

        if dist is Distribution.UNIFORM:
            draws = rng.uniforms(count)
        else:
            draws = np.mod(rng.normals(count) * NORMAL_SCALE, 1.0)

        return cls.from_points(draws.tolist())

    # --------------------------------------------------
    # read-only views
    # --------------------------------------------------
    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"World(n={len(self)})"

    @property
    def points(self) -> tuple[float, ...]:
        return tuple(self._points)

    @property
    def areas(self) -> tuple[float, ...]:
        return tuple(self._areas)

    def area(self, index: int) -> float:
        return self._areas[index]

    def total_area(self) -> float:
        return float(sum(self._areas))

    def argmin(self) -> int:
        """Index of the smallest area; the first one wins a tie."""
        areas = self._areas
        return min(range(len(areas)), key=areas.__getitem__)

    def copy(self) -> "World":
        return World._from_sorted(list(self._points), list(self._areas))

    # --------------------------------------------------
    # mutation
    # --------------------------------------------------
    def remove(self, index: int) -> Removal:
        """
        Delete the point at `index` and patch the neighbouring areas.

        Only the cells that bordered the removed point change, so the
        recomputation is O(1) in the number of points.
        """
        n = len(self._points)
        if n == 1:
            raise InvalidState("cannot remove the last point of a World")
        if not 0 <= index < n:
            raise InvalidArgument(f"remove index {index} out of range for size {n}")

        record = Removal(point=self._points[index], area=self._areas[index])

        pts = self._points
        areas = self._areas
        del pts[index]
        del areas[index]

        if n - 1 == 1:
            areas[0] = 1.0
        elif n - 1 == 2:
            # 两点时边界公式退化，整体重算
            areas[:] = compute_areas(pts)
        elif index == 0:
            areas[0] = left_area(pts)
        elif index == n - 1:
            areas[-1] = right_area(pts)
        elif index == n - 2:
            areas[-2] = inner_area(pts, len(pts) - 2)
            areas[-1] = right_area(pts)
        elif index == 1:
            areas[0] = left_area(pts)
            areas[1] = inner_area(pts, 1)
        else:
            areas[index] = inner_area(pts, index)
            areas[index - 1] = inner_area(pts, index - 1)

        return record
