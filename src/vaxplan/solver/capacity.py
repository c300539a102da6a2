"""
Capacity Analysis
=================
Slot availability per hub and day, derived from staffing and working hours.
"""
from typing import Dict, List

import pandas as pd

from vaxplan.models.days import DAYS, DAYS_PER_WEEK
from vaxplan.registry import Registry


def weekly_available(registry: Registry) -> Dict[str, List[int]]:
    """
    Available vaccination slots for every hub and every day.

    Returns:
        {hub_name: [monday_slots, ..., sunday_slots]}, hubs in name order
    """
    return {
        hub: [registry.daily_available_slots(hub, d) for d in range(DAYS_PER_WEEK)]
        for hub in registry.hubs()
    }


def weekly_total(registry: Registry) -> int:
    """Total slots offered by all hubs over the week."""
    return sum(sum(days) for days in weekly_available(registry).values())


def time_slots(registry: Registry) -> List[List[str]]:
    """Quarter-hour slot start times for each day of the week."""
    return registry.schedule.time_slots()


def capacity_frame(registry: Registry) -> pd.DataFrame:
    """One row per hub: staffing, hourly capacity and daily slots."""
    columns = ["hub", "doctors", "nurses", "other", "hourly_capacity"] + DAYS + ["week_total"]
    available = weekly_available(registry)
    rows = []
    for name, days in available.items():
        hub = registry.hub(name)
        row = {
            "hub": name,
            "doctors": hub.doctors,
            "nurses": hub.nurses,
            "other": hub.other,
            "hourly_capacity": hub.hourly_capacity,
        }
        row.update(dict(zip(DAYS, days)))
        row["week_total"] = sum(days)
        rows.append(row)
    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(rows, columns=columns)
