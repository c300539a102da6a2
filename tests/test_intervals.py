"""Tests for age intervals."""
import pytest

from vaxplan.errors import ConfigurationError, NotConfiguredError
from vaxplan.models.interval import Interval, IntervalSet


class TestInterval:
    """Tests for a single interval."""

    def test_label(self):
        assert Interval(0, 40).label == "[0,40)"
        assert Interval(60, None).label == "[60,+)"
        assert Interval(0, 5).label == "[0,5)"
        assert str(Interval(40, 60)) == "[40,60)"

    def test_contains_half_open(self):
        i = Interval(40, 60)
        assert i.contains(40)
        assert i.contains(59)
        assert not i.contains(60)
        assert not i.contains(39)

    def test_unbounded(self):
        i = Interval(60, None)
        assert i.contains(60)
        assert i.contains(130)
        assert not i.contains(59)

    def test_equality_by_bounds(self):
        assert Interval(0, 40) == Interval(0, 40)
        assert Interval(0, 40) != Interval(0, 50)


class TestIntervalSet:
    """Tests for interval definition and classification."""

    def test_define(self):
        s = IntervalSet()
        s.define([40, 50, 60])
        assert s.labels() == ["[0,40)", "[40,50)", "[50,60)", "[60,+)"]

    def test_single_break(self):
        s = IntervalSet([18])
        assert s.labels() == ["[0,18)", "[18,+)"]

    @pytest.mark.parametrize("breaks", [
        [],
        [60, 40],
        [40, 40],
        [0, 40],
        [-5, 40],
    ])
    def test_invalid_breaks(self, breaks):
        with pytest.raises(ConfigurationError):
            IntervalSet().define(breaks)

    def test_redefine_replaces(self):
        s = IntervalSet([40, 60])
        s.define([30])
        assert s.labels() == ["[0,30)", "[30,+)"]
        assert len(s) == 2

    def test_classify(self):
        s = IntervalSet([40, 60])
        assert s.classify(0).label == "[0,40)"
        assert s.classify(39).label == "[0,40)"
        assert s.classify(40).label == "[40,60)"
        assert s.classify(60).label == "[60,+)"
        assert s.classify(200).label == "[60,+)"

    def test_classify_coverage(self):
        """Every age 0..200 falls in exactly one interval."""
        s = IntervalSet([10, 20, 40, 65, 80])
        for age in range(201):
            matches = [i for i in s if i.contains(age)]
            assert len(matches) == 1
            assert s.classify(age) == matches[0]

    def test_no_gaps_no_overlaps(self):
        s = IntervalSet([10, 20, 40])
        intervals = list(s)
        assert intervals[0].start == 0
        assert intervals[-1].end is None
        for prev, cur in zip(intervals, intervals[1:]):
            assert prev.end == cur.start

    def test_classify_undefined(self):
        with pytest.raises(NotConfiguredError):
            IntervalSet().classify(30)

    def test_classify_negative(self):
        with pytest.raises(ConfigurationError):
            IntervalSet([40]).classify(-1)

    def test_descending_order(self):
        s = IntervalSet([40, 60])
        assert [i.label for i in s.by_descending_start()] == ["[60,+)", "[40,60)", "[0,40)"]

    def test_find(self):
        s = IntervalSet([40, 60])
        assert s.find("[40,60)") == Interval(40, 60)
        with pytest.raises(NotConfiguredError):
            s.find("[1,2)")
