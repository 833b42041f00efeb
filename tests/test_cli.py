#!filepath: tests/test_cli.py
import pytest
from typer.testing import CliRunner

from election.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    # CLI 会在 cwd 下创建 logs/
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ELECTION_SEED", raising=False)
    monkeypatch.delenv("ELECTION_WORKERS", raising=False)


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "v0.1.0" in result.output


def test_elect_prints_rank_table(tmp_path):
    out = tmp_path / "reports"
    result = runner.invoke(
        app,
        [
            "elect", "--points", "20", "--elections", "6", "--left", "2",
            "--seed", "1", "--workers", "1", "--out", str(out),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "rank" in result.output
    assert (out / "uniform_200_global_winners.csv").exists()
    assert (out / "uniform_200_global_rank_stats.png").exists()


def test_elect_sampled_policy():
    result = runner.invoke(
        app,
        [
            "elect", "--points", "15", "--elections", "4", "--left", "3",
            "--policy", "sampled", "--sample-size", "2",
            "--distribution", "normal", "--seed", "3", "--workers", "1",
        ],
    )
    assert result.exit_code == 0, result.output


def test_elect_rejects_bad_survivor_count():
    result = runner.invoke(
        app, ["elect", "--points", "5", "--left", "6", "--elections", "1", "--workers", "1"]
    )
    assert result.exit_code != 0


def test_backward(tmp_path):
    config = tmp_path / "cfg.yml"
    config.write_text(
        "experiment:\n"
        "  name: tiny\n"
        "  num_points: 12\n"
        "  num_elections: 5\n"
        "  num_left: 1\n"
        "  workers: 1\n"
        "backward:\n"
        "  grow_to: 3\n"
        "  num_samples: 4\n"
        "  max_attempts: 100000\n",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["backward", "--config", str(config), "--seed", "2"])

    assert result.exit_code == 0, result.output
    assert "tiny_backward" in result.output
