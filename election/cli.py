#!filepath: election/cli.py
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.table import Table

from election import AppConfig, Logging, __version__
from election.config.experiment_config import BackwardConfig, ExperimentConfig
from election.experiment import ElectionExperiment, ExperimentResult, run_backward
from election.random_source import NumpyRandomSource
from election.report import (
    RankStatsCsvReport,
    RankStatsReport,
    ReportPipeline,
    WinnersCsvReport,
    WinnersDensityReport,
    WinnersHistogramReport,
)
from election.stats import RankStatistics
from election.world import Distribution

app = typer.Typer(help="Voronoi election simulator")


def _load(config: Optional[Path]) -> AppConfig:
    cfg = AppConfig.load(str(config) if config is not None else None)
    Logging.from_config(cfg.log, console=True)
    return cfg


def _override(cfg: ExperimentConfig, **options) -> ExperimentConfig:
    updates = {k: v for k, v in options.items() if v is not None}
    # model_validate 重新校验（num_left <= num_points 等）
    return ExperimentConfig.model_validate({**cfg.model_dump(), **updates})


def _print_stats(title: str, stats: RankStatistics, limit: int = 20) -> None:
    table = Table(title=f"{title} (runs={stats.n_runs})")
    table.add_column("rank", justify="right")
    table.add_column("mean", justify="right")
    table.add_column("stdev", justify="right")
    for r in range(min(limit, len(stats))):
        table.add_row(str(r + 1), f"{stats.mean[r]:.5f}", f"{stats.stdev[r]:.5f}")
    print(table)


def _render(result: ExperimentResult, out: Path) -> None:
    out.mkdir(parents=True, exist_ok=True)
    ReportPipeline(
        [
            WinnersHistogramReport(out / f"{result.name}_histogram.png"),
            WinnersDensityReport(out / f"{result.name}_density.png"),
            RankStatsReport(out / f"{result.name}_rank_stats.png"),
            WinnersCsvReport(out / f"{result.name}_winners.csv"),
            RankStatsCsvReport(out / f"{result.name}_rank_stats.csv"),
        ]
    ).render_all(result)
    print(f"[green]Reports written to {out}[/green]")


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def elect(
    config: Optional[Path] = typer.Option(None, help="YAML config (default: base.yml)"),
    points: Optional[int] = typer.Option(None, help="points per world"),
    elections: Optional[int] = typer.Option(None, help="independent runs"),
    left: Optional[int] = typer.Option(None, help="survivors per run"),
    distribution: Optional[Distribution] = typer.Option(None),
    policy: Optional[str] = typer.Option(None, help="global | sampled"),
    sample_size: Optional[int] = typer.Option(None),
    seed: Optional[int] = typer.Option(None),
    workers: Optional[int] = typer.Option(None),
    out: Optional[Path] = typer.Option(None, help="directory for plots / csv"),
):
    """
    Run independent elections and print per-rank statistics.
    """
    app_cfg = _load(config)
    cfg = _override(
        app_cfg.experiment,
        num_points=points,
        num_elections=elections,
        num_left=left,
        distribution=distribution,
        policy=policy,
        sample_size=sample_size,
        seed=seed,
        workers=workers,
    )

    print(f"[blue]Running {cfg.num_elections} elections: {cfg.name}[/blue]")
    result = ElectionExperiment(cfg).run()
    _print_stats(cfg.name, result.statistics())

    if out is not None:
        _render(result, out)


@app.command()
def backward(
    config: Optional[Path] = typer.Option(None, help="YAML config (default: base.yml)"),
    grow_to: Optional[int] = typer.Option(None, help="target population"),
    samples: Optional[int] = typer.Option(None, help="number of grown worlds"),
    seed: Optional[int] = typer.Option(None),
    out: Optional[Path] = typer.Option(None, help="directory for plots / csv"),
):
    """
    Elect survivors, then grow them backward (experimental).
    """
    app_cfg = _load(config)
    cfg = _override(app_cfg.experiment, seed=seed)
    updates = {k: v for k, v in {"grow_to": grow_to, "num_samples": samples}.items() if v is not None}
    bcfg = BackwardConfig.model_validate({**app_cfg.backward.model_dump(), **updates})

    result = ElectionExperiment(cfg).run()
    grown = run_backward(result.winners, bcfg, NumpyRandomSource(seed))

    grown_result = ExperimentResult(
        name=f"{cfg.name}_backward",
        num_points=bcfg.grow_to,
        num_left=bcfg.grow_to,
        policy="backward",
        distribution=cfg.distribution.value,
        winners=grown,
    )
    _print_stats(grown_result.name, grown_result.statistics())

    if out is not None:
        _render(grown_result, out)


if __name__ == "__main__":
    app()

# python -m election.cli elect --points 200 --elections 1000 --left 2
