#!filepath: election/world/areas.py
from __future__ import annotations

from typing import Sequence

from election.utils.errors import InvalidArgument


def left_area(points: Sequence[float]) -> float:
    """[0, p0] 加上到右邻居的一半。"""
    return points[0] + 0.5 * (points[1] - points[0])


def right_area(points: Sequence[float]) -> float:
    """[p_last, 1] 加上到左邻居的一半。"""
    return 1.0 - points[-1] + 0.5 * (points[-1] - points[-2])


def inner_area(points: Sequence[float], i: int) -> float:
    """两侧中点之间的距离。"""
    return 0.5 * (points[i + 1] - points[i - 1])


def compute_areas(points: Sequence[float]) -> list[float]:
    """
    1-D Voronoi cell lengths of a sorted point sequence on [0, 1].

    The cells partition [0, 1]: every area is non-negative and they sum to 1.
    `points` must already be sorted ascending.
    """
    n = len(points)
    if n == 0:
        raise InvalidArgument("compute_areas: empty point sequence")
    if n == 1:
        return [1.0]

    areas = [left_area(points)]
    areas.extend(inner_area(points, i) for i in range(1, n - 1))
    areas.append(right_area(points))
    return areas
