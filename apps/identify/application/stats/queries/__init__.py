"""Stats Queries."""

from apps.identify.application.stats.queries.get_stats import GetStatsQuery, StatsView

__all__ = ["GetStatsQuery", "StatsView"]
