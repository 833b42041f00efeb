from election.stats.rank_stats import RankStatistics, compute_rank_statistics, rank_columns

__all__ = ["RankStatistics", "compute_rank_statistics", "rank_columns"]
