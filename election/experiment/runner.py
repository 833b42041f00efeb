#!filepath: election/experiment/runner.py
from __future__ import annotations

from functools import partial
from typing import Callable, Dict, List, Sequence

from election import logs
from election.backward import grow_to
from election.config.experiment_config import BackwardConfig, ExperimentConfig
from election.elimination import (
    EliminationPolicy,
    EliminationProcess,
    GlobalMinimumPolicy,
    SampledMinimumPolicy,
)
from election.experiment.result import ExperimentResult
from election.observability.instrumentation import Instrumentation
from election.parallel.executor import ParallelExecutor
from election.random_source import NumpyRandomSource, RandomSource
from election.utils.errors import InvalidArgument
from election.world import World

# ------------------------------------------------------------------
# policy registry
# ------------------------------------------------------------------
_POLICY_REGISTRY: Dict[str, Callable[[ExperimentConfig], EliminationPolicy]] = {
    "global": lambda cfg: GlobalMinimumPolicy(),
    "sampled": lambda cfg: SampledMinimumPolicy(cfg.sample_size),
}


def build_policy(cfg: ExperimentConfig) -> EliminationPolicy:
    try:
        factory = _POLICY_REGISTRY[cfg.policy]
    except KeyError:
        raise InvalidArgument(f"unknown elimination policy: {cfg.policy!r}") from None
    return factory(cfg)


# ------------------------------------------------------------------
# single trial（module-level：进程池需要可 pickle）
# ------------------------------------------------------------------
def run_trial(cfg: ExperimentConfig, rng: RandomSource) -> List[float]:
    world = World.from_distribution(cfg.num_points, cfg.distribution, rng)
    EliminationProcess(build_policy(cfg), rng).run(world, cfg.rounds)
    return list(world.points)


class ElectionExperiment:
    """
    ElectionExperiment

    num_elections 个独立 trial：
      seed → SeedSequence.spawn → 每个 trial 一个随机源
      → ParallelExecutor → 按 trial 顺序收集 winners
    """

    def __init__(
        self,
        cfg: ExperimentConfig,
        inst: Instrumentation | None = None,
    ):
        self.cfg = cfg
        self.inst = inst if inst is not None else Instrumentation(
            progress_every=cfg.progress_every
        )

    @logs.catch("election experiment failed")
    def run(self) -> ExperimentResult:
        cfg = self.cfg
        task = f"elections[{cfg.name}]"

        logs.info(
            f"[Experiment] {cfg.name} points={cfg.num_points} "
            f"elections={cfg.num_elections} left={cfg.num_left} "
            f"policy={cfg.policy} distribution={cfg.distribution.value}"
        )

        rngs = NumpyRandomSource(cfg.seed).spawn(cfg.num_elections)

        self.inst.progress.start(task, cfg.num_elections, "elections")
        with self.inst.timer(task) as span:
            winners = ParallelExecutor.run(
                items=rngs,
                handler=partial(run_trial, cfg),
                max_workers=cfg.workers,
                on_result=lambda done: self.inst.progress.update(
                    task, done, cfg.num_elections, "elections"
                ),
            )
        elapsed = span.elapsed
        self.inst.progress.done(task)
        self.inst.record(f"{task}.elapsed_s", round(elapsed, 3))
        self.inst.report(cfg.name)

        return ExperimentResult(
            name=cfg.name,
            num_points=cfg.num_points,
            num_left=cfg.num_left,
            policy=cfg.policy,
            distribution=cfg.distribution.value,
            winners=winners,
            elapsed=elapsed,
            params=cfg.model_dump(mode="json"),
        )


@logs.catch("backward growth failed")
def run_backward(
    winners: Sequence[Sequence[float]],
    cfg: BackwardConfig,
    rng: RandomSource,
    inst: Instrumentation | None = None,
) -> List[List[float]]:
    """
    Grow randomly chosen survivor sets back up to `cfg.grow_to` points.
    """
    if len(winners) == 0:
        raise InvalidArgument("run_backward needs at least one run result")

    inst = inst if inst is not None else Instrumentation(enabled=False)
    task = f"backward[grow_to={cfg.grow_to}]"

    grown: List[List[float]] = []
    inst.progress.start(task, cfg.num_samples, "samples")
    with inst.timer(task):
        for k in range(cfg.num_samples):
            pick = rng.sample(len(winners), 1)[0]
            world = World.from_points(winners[pick])
            world = grow_to(world, cfg.grow_to, rng, max_attempts=cfg.max_attempts)
            grown.append(list(world.points))
            inst.progress.update(task, k + 1, cfg.num_samples, "samples")
    inst.progress.done(task)
    inst.report(task)

    return grown
