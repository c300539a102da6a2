"""
Age Intervals
=============
Half-open age brackets [start, end) partitioning [0, +inf).

The set is rebuilt from scratch on every ``define`` call; nothing outside
this module keeps references to a previous set, so classification always
reflects the current brackets.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from vaxplan.errors import ConfigurationError, NotConfiguredError


@dataclass(frozen=True, order=True)
class Interval:
    """Age bracket [start, end); end=None means unbounded."""

    start: int
    end: Optional[int] = None

    def contains(self, age: int) -> bool:
        if age < self.start:
            return False
        return self.end is None or age < self.end

    @property
    def label(self) -> str:
        end = "+" if self.end is None else str(self.end)
        return f"[{self.start},{end})"

    def __str__(self) -> str:
        return self.label


class IntervalSet:
    """Ordered, gap-free partition of ages into labeled intervals."""

    def __init__(self, breaks: Optional[Sequence[int]] = None):
        self._intervals: List[Interval] = []
        if breaks is not None:
            self.define(breaks)

    def define(self, breaks: Iterable[int]) -> List[Interval]:
        """
        Build [0,b0), [b0,b1), ..., [bn,+inf) from ascending breaks.

        Raises:
            ConfigurationError: breaks empty, not strictly ascending or not positive
        """
        values = [int(b) for b in breaks]
        if not values:
            raise ConfigurationError("At least one age break is required")
        if values[0] <= 0:
            raise ConfigurationError(f"Age breaks must be positive, got {values[0]}")
        for prev, cur in zip(values, values[1:]):
            if cur <= prev:
                raise ConfigurationError(f"Age breaks must be strictly ascending: {values}")

        bounds = [0] + values
        intervals = [Interval(lo, hi) for lo, hi in zip(bounds, bounds[1:])]
        intervals.append(Interval(values[-1], None))
        self._intervals = intervals
        return list(intervals)

    @property
    def is_defined(self) -> bool:
        return bool(self._intervals)

    def __len__(self) -> int:
        return len(self._intervals)

    def __iter__(self):
        return iter(self._intervals)

    def classify(self, age: int) -> Interval:
        """Return the unique interval containing ``age``."""
        if not self._intervals:
            raise NotConfiguredError("Age intervals are not defined")
        if age < 0:
            raise ConfigurationError(f"Age cannot be negative: {age}")
        for interval in self._intervals:
            if interval.contains(age):
                return interval
        # Unreachable for a set built by define()
        raise ConfigurationError(f"No interval contains age {age}")

    def by_descending_start(self) -> List[Interval]:
        """Intervals oldest-first; this order drives allocation priority."""
        return sorted(self._intervals, key=lambda i: i.start, reverse=True)

    def labels(self) -> List[str]:
        return [i.label for i in self._intervals]

    def find(self, label: str) -> Interval:
        for interval in self._intervals:
            if interval.label == label:
                return interval
        raise NotConfiguredError(f"Unknown age interval: {label!r}")
