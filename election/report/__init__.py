from election.report.base import Report, ReportPipeline
from election.report.plots import (
    RankStatsReport,
    StdevScalingReport,
    WinnersDensityReport,
    WinnersHistogramReport,
)
from election.report.tables import RankStatsCsvReport, WinnersCsvReport

__all__ = [
    "Report",
    "ReportPipeline",
    "RankStatsReport",
    "StdevScalingReport",
    "WinnersDensityReport",
    "WinnersHistogramReport",
    "RankStatsCsvReport",
    "WinnersCsvReport",
]
