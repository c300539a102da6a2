"""
Allocation Engine — Age-Prioritized Quota Cascade
=================================================
Assigns unassigned people to (hub, day) slots.

Algorithm for one (hub, day):
    1. total = daily available slots of the hub on that day
    2. For each age interval, oldest first:
           quota = floor(0.40 * (total - allocated so far))
           assign up to quota unassigned people of that interval
    3. Mop-up: the slots still free (total - allocated so far) go to
       unassigned people of the oldest interval.

Candidates inside an interval are taken in ascending SSN order.
Hubs are processed in name order and days Monday..Sunday, so a cleared
registry always produces the same weekly plan.
"""
import math
from typing import Dict, List

from vaxplan.errors import NotConfiguredError
from vaxplan.models.days import DAYS, DAYS_PER_WEEK, day_index
from vaxplan.models.interval import Interval
from vaxplan.models.person import Person
from vaxplan.models.schedule import AllocationPlan
from vaxplan.registry import Registry
from vaxplan.utils.logging_setup import AllocationLogger, get_logger

logger = get_logger("vaxplan.solver.allocation")
alog = AllocationLogger("vaxplan.solver.allocation")

# Share of the still-free slots offered to each interval
QUOTA_SHARE = 0.40


class AllocationEngine:
    """Quota-based allocation over a Registry's mutable person state."""

    def __init__(self, registry: Registry, quota_share: float = QUOTA_SHARE):
        self.registry = registry
        self.quota_share = quota_share

    def _candidates(self, interval: Interval) -> List[Person]:
        """Unassigned people currently classified into ``interval``, SSN order."""
        return [
            p for p in self.registry.people()
            if not p.assigned and self.registry.interval_of(p) == interval
        ]

    def _allocate_interval(self, interval: Interval, slots: int, hub: str, day: int) -> List[str]:
        if slots <= 0:
            return []
        chosen = self._candidates(interval)[:slots]
        for p in chosen:
            p.assign(hub, day)
        return [p.ssn for p in chosen]

    def allocate_day(self, hub: str, day) -> List[str]:
        """
        Allocate one hub's slots for one day.

        Returns:
            Sorted SSNs of everyone assigned to (hub, day) after the call

        Raises:
            NotConfiguredError: hub unknown/unstaffed, hours or intervals unset
        """
        d = day_index(day)
        total = self.registry.daily_available_slots(hub, d)
        intervals = self.registry.intervals.by_descending_start()
        if not intervals:
            raise NotConfiguredError("Age intervals are not defined")

        with alog.hub_day(hub, DAYS[d], total) as run:
            allocated = 0
            for interval in intervals:
                quota = math.floor((total - allocated) * self.quota_share)
                got = self._allocate_interval(interval, quota, hub, d)
                allocated += len(got)
                alog.quota(interval.label, quota, len(got))

            # Leftover slots go to the oldest bracket, whichever bracket left them
            leftover = total - allocated
            mopped = self._allocate_interval(intervals[0], leftover, hub, d)
            allocated += len(mopped)
            alog.mop_up(intervals[0].label, leftover, len(mopped))
            run["allocated"] = allocated

        return self.allocated_to(hub, d)

    def clear_allocation(self) -> None:
        """Reset every person to unassigned."""
        for p in self.registry.people():
            p.clear()
        logger.debug(f"Cleared allocation of {self.registry.count_people()} people")

    def allocate_week(self) -> Dict[int, Dict[str, List[str]]]:
        """
        Run allocate_day for each hub (name order) and each day (Monday first).

        Returns:
            {day: {hub: [ssn, ...]}} for all 7 days and all hubs
        """
        hubs = self.registry.hubs()
        alog.week(hubs, self.registry.count_people(), self.registry.age_intervals())
        for hub in hubs:
            for d in range(DAYS_PER_WEEK):
                self.allocate_day(hub, d)

        plan = self.plan()
        logger.info(f"Week allocated: {plan.total}/{self.registry.count_people()} people assigned")
        return plan.slots

    def plan(self) -> AllocationPlan:
        """Current plan, rebuilt from per-person allocation state."""
        return AllocationPlan.from_people(self.registry.people(), self.registry.hubs())

    def allocated_to(self, hub: str, day) -> List[str]:
        d = day_index(day)
        return sorted(p.ssn for p in self.registry.people() if p.is_assigned_to(hub, d))
