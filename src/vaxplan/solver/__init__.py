# vaxplan/solver - Allocation engine, capacity views and statistics
from .allocation import QUOTA_SHARE, AllocationEngine
from .capacity import capacity_frame, time_slots, weekly_available, weekly_total
from .stats import IntervalStats, StatisticsReporter, stats_to_dataframe

__all__ = [
    "AllocationEngine",
    "QUOTA_SHARE",
    "weekly_available",
    "weekly_total",
    "time_slots",
    "capacity_frame",
    "StatisticsReporter",
    "IntervalStats",
    "stats_to_dataframe",
]
