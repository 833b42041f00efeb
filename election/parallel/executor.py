# election/parallel/executor.py
from __future__ import annotations

import os
from concurrent.futures import ProcessPoolExecutor
from typing import Any, Callable, Iterable

from election import logs


class ParallelExecutor:
    """
    ParallelExecutor

    - 独立 trial 之间零共享状态，可直接分发到进程池
    - 结果顺序与 items 顺序一致（不是完成顺序）
    - workers == 1 时串行执行（测试 / 调试）
    """

    @staticmethod
    def run(
            *,
            items: Iterable[Any],
            handler: Callable[[Any], Any],
            max_workers: int | None = None,
            on_result: Callable[[int], None] | None = None,
    ) -> list[Any]:
        items = list(items)
        if not items:
            logs.info("[ParallelExecutor] no items to process")
            return []

        workers = ParallelExecutor._resolve_workers(items, max_workers)
        logs.info(f"[ParallelExecutor] start total={len(items)} workers={workers}")

        if workers == 1:
            return ParallelExecutor._run_sequential(items, handler, on_result)
        return ParallelExecutor._run_parallel(items, handler, workers, on_result)

    # ---------------- internal ----------------

    @staticmethod
    def _resolve_workers(items: list, max_workers: int | None) -> int:
        cpu = os.cpu_count() or 1
        if max_workers is None:
            return min(cpu, len(items))
        return max(1, min(max_workers, len(items)))

    @staticmethod
    def _run_sequential(
            items: list,
            handler: Callable[[Any], Any],
            on_result: Callable[[int], None] | None,
    ) -> list[Any]:
        results = []
        for item in items:
            results.append(handler(item))
            if on_result is not None:
                on_result(len(results))
        return results

    @staticmethod
    def _run_parallel(
            items: list,
            handler: Callable[[Any], Any],
            workers: int,
            on_result: Callable[[int], None] | None,
    ) -> list[Any]:
        chunksize = max(1, len(items) // (workers * 4))

        results = []
        with ProcessPoolExecutor(max_workers=workers) as pool:
            for result in pool.map(handler, items, chunksize=chunksize):
                results.append(result)
                if on_result is not None:
                    on_result(len(results))

        return results
