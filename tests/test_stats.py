"""Tests for allocation statistics."""
import math

import pytest

from vaxplan.errors import DivisionUndefinedError
from vaxplan.solver.allocation import AllocationEngine
from vaxplan.solver.stats import StatisticsReporter


class TestOverallProportion:
    """Tests for overall_allocated_proportion."""

    def test_no_people_raises(self, registry):
        with pytest.raises(DivisionUndefinedError):
            StatisticsReporter(registry).overall_allocated_proportion()

    def test_zero_division_compatible(self, registry):
        with pytest.raises(ZeroDivisionError):
            StatisticsReporter(registry).overall_allocated_proportion()

    def test_before_allocation(self, small_registry):
        assert StatisticsReporter(small_registry).overall_allocated_proportion() == 0.0

    def test_quota_scenario(self, quota_registry):
        AllocationEngine(quota_registry).allocate_day("Hub", 0)
        stats = StatisticsReporter(quota_registry)
        assert stats.overall_allocated_proportion() == pytest.approx(88 / 150)


class TestByInterval:
    """Tests for per-interval proportions and distribution."""

    def test_proportion_by_interval(self, quota_registry):
        AllocationEngine(quota_registry).allocate_day("Hub", 0)
        by_interval = StatisticsReporter(quota_registry).allocated_proportion_by_interval()
        assert by_interval == {
            "[0,40)": pytest.approx(14 / 50),
            "[40,60)": pytest.approx(24 / 50),
            "[60,+)": pytest.approx(1.0),
        }

    def test_distribution(self, quota_registry):
        AllocationEngine(quota_registry).allocate_day("Hub", 0)
        dist = StatisticsReporter(quota_registry).allocated_distribution_across_intervals()
        assert dist["[60,+)"] == pytest.approx(50 / 88)
        assert dist["[40,60)"] == pytest.approx(24 / 88)
        assert dist["[0,40)"] == pytest.approx(14 / 88)
        assert sum(dist.values()) == pytest.approx(1.0)

    def test_empty_interval_is_nan(self, quota_registry):
        quota_registry.set_age_intervals(40, 50, 60)
        AllocationEngine(quota_registry).allocate_day("Hub", 0)
        by_interval = StatisticsReporter(quota_registry).allocated_proportion_by_interval()
        # Nobody is aged 50..59
        assert "[50,60)" in by_interval
        assert math.isnan(by_interval["[50,60)"])

    def test_distribution_nan_when_nobody_allocated(self, small_registry):
        dist = StatisticsReporter(small_registry).allocated_distribution_across_intervals()
        assert set(dist) == {"[0,40)", "[40,60)", "[60,+)"}
        assert all(math.isnan(v) for v in dist.values())

    def test_overall_is_weighted_mean(self, quota_registry):
        quota_registry.set_weekly_hours([1, 1, 0, 0, 0, 0, 0])
        AllocationEngine(quota_registry).allocate_week()
        stats = StatisticsReporter(quota_registry)

        by_interval = stats.allocated_proportion_by_interval()
        weighted = sum(
            ratio * len(quota_registry.people_in_interval(label))
            for label, ratio in by_interval.items()
        )
        assert stats.overall_allocated_proportion() == pytest.approx(
            weighted / quota_registry.count_people()
        )


class TestSummary:
    """Tests for the per-interval DataFrame."""

    def test_interval_summary(self, quota_registry):
        AllocationEngine(quota_registry).allocate_day("Hub", 0)
        df = StatisticsReporter(quota_registry).interval_summary()
        assert list(df.columns) == ["interval", "members", "allocated", "proportion", "distribution"]
        assert list(df["interval"]) == ["[0,40)", "[40,60)", "[60,+)"]
        assert list(df["members"]) == [50, 50, 50]
        assert list(df["allocated"]) == [14, 24, 50]
