"""
Allocation Statistics
=====================
Proportions and distributions derived from final allocation state.

Undefined ratios:
    - overall proportion with no people raises DivisionUndefinedError
    - per-interval ratios with a zero denominator are NaN (key kept)
"""
import math
from dataclasses import dataclass
from typing import Dict, List

import pandas as pd

from vaxplan.errors import DivisionUndefinedError
from vaxplan.registry import Registry
from vaxplan.utils.logging_setup import get_logger

logger = get_logger("vaxplan.solver.stats")


@dataclass
class IntervalStats:
    """Allocation figures for one age interval."""
    label: str
    members: int
    allocated: int
    proportion: float    # allocated / members
    distribution: float  # allocated / allocated overall


def _ratio(num: int, den: int) -> float:
    return num / den if den else math.nan


class StatisticsReporter:
    """Read-only statistics over a registry's allocation state."""

    def __init__(self, registry: Registry):
        self.registry = registry

    def _counts(self) -> Dict[str, List[int]]:
        """{label: [members, allocated]} in ascending interval order."""
        counts = {label: [0, 0] for label in self.registry.age_intervals()}
        for p in self.registry.people():
            entry = counts[self.registry.interval_of(p).label]
            entry[0] += 1
            if p.assigned:
                entry[1] += 1
        return counts

    def overall_allocated_proportion(self) -> float:
        people = self.registry.people()
        if not people:
            raise DivisionUndefinedError("No people registered")
        return sum(1 for p in people if p.assigned) / len(people)

    def allocated_proportion_by_interval(self) -> Dict[str, float]:
        return {label: _ratio(alloc, members) for label, (members, alloc) in self._counts().items()}

    def allocated_distribution_across_intervals(self) -> Dict[str, float]:
        counts = self._counts()
        total_allocated = sum(alloc for _, alloc in counts.values())
        return {label: _ratio(alloc, total_allocated) for label, (_, alloc) in counts.items()}

    def interval_stats(self) -> List[IntervalStats]:
        counts = self._counts()
        total_allocated = sum(alloc for _, alloc in counts.values())
        stats = [
            IntervalStats(
                label=label,
                members=members,
                allocated=alloc,
                proportion=_ratio(alloc, members),
                distribution=_ratio(alloc, total_allocated),
            )
            for label, (members, alloc) in counts.items()
        ]
        logger.debug(f"Calculated stats for {len(stats)} intervals, {total_allocated} allocated")
        return stats

    def interval_summary(self) -> pd.DataFrame:
        """Per-interval DataFrame for display or export."""
        return stats_to_dataframe(self.interval_stats())


def stats_to_dataframe(stats: List[IntervalStats]) -> pd.DataFrame:
    columns = ["interval", "members", "allocated", "proportion", "distribution"]
    return pd.DataFrame(
        [[s.label, s.members, s.allocated, s.proportion, s.distribution] for s in stats],
        columns=columns,
    )
