"""Weekly working hours and allocation plan models."""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from vaxplan.errors import ConfigurationError, NotConfiguredError
from .days import DAYS, DAYS_PER_WEEK, day_index
from .person import Person

# A single day cannot exceed this many working hours
MAX_DAILY_HOURS = 12

# Time slots start at 09:00 and last 15 minutes
FIRST_SLOT_HOUR = 9
SLOTS_PER_HOUR = 4


@dataclass
class WeeklySchedule:
    """Working hours for Monday (index 0) through Sunday (index 6)."""

    hours: List[int] = field(default_factory=list)

    def __post_init__(self):
        if self.hours:
            self.hours = self.validate(self.hours)

    @staticmethod
    def validate(hours: Iterable[int]) -> List[int]:
        values = [int(h) for h in hours]
        if len(values) != DAYS_PER_WEEK:
            raise ConfigurationError(f"Exactly {DAYS_PER_WEEK} daily hour values required, got {len(values)}")
        for d, h in enumerate(values):
            if h > MAX_DAILY_HOURS:
                raise ConfigurationError(f"{DAYS[d]}: {h}h exceeds the {MAX_DAILY_HOURS}h daily limit")
            if h < 0:
                raise ConfigurationError(f"{DAYS[d]}: working hours cannot be negative ({h})")
        return values

    @property
    def is_defined(self) -> bool:
        return len(self.hours) == DAYS_PER_WEEK

    def hours_on(self, day) -> int:
        if not self.is_defined:
            raise NotConfiguredError("Weekly working hours are not set")
        return self.hours[day_index(day)]

    def time_slots(self) -> List[List[str]]:
        """
        Quarter-hour slot start times for each day.

        Slots start at 09:00 and cover the day's working hours,
        formatted "HH:MM" with leading zeros.
        """
        if not self.is_defined:
            raise NotConfiguredError("Weekly working hours are not set")
        week = []
        for h in self.hours:
            day_slots = []
            for offset in range(h):
                hour = FIRST_SLOT_HOUR + offset
                for q in range(SLOTS_PER_HOUR):
                    day_slots.append(f"{hour:02d}:{q * 60 // SLOTS_PER_HOUR:02d}")
            week.append(day_slots)
        return week


@dataclass
class AllocationPlan:
    """
    Who goes where, derived from per-person allocation state.

    ``slots`` maps day index -> hub name -> sorted person ids. Every
    known hub appears for every day, possibly with an empty list.
    """

    slots: Dict[int, Dict[str, List[str]]] = field(default_factory=dict)

    @classmethod
    def from_people(cls, people: Iterable[Person], hubs: Iterable[str]) -> "AllocationPlan":
        hub_names = sorted(hubs)
        slots = {d: {h: [] for h in hub_names} for d in range(DAYS_PER_WEEK)}
        for p in people:
            if not p.assigned:
                continue
            slots[p.day].setdefault(p.hub, []).append(p.ssn)
        for by_hub in slots.values():
            for ids in by_hub.values():
                ids.sort()
        return cls(slots=slots)

    def assigned_to(self, hub: str, day) -> List[str]:
        return list(self.slots.get(day_index(day), {}).get(hub, []))

    def counts(self) -> Dict[Tuple[str, int], int]:
        """Number of people per (hub, day)."""
        return {
            (hub, day): len(ids)
            for day, by_hub in self.slots.items()
            for hub, ids in by_hub.items()
        }

    @property
    def total(self) -> int:
        return sum(len(ids) for by_hub in self.slots.values() for ids in by_hub.values())

    def to_week_list(self) -> List[Dict[str, List[str]]]:
        """Seven dicts, Monday first, each mapping hub -> person ids."""
        return [dict(self.slots.get(d, {})) for d in range(DAYS_PER_WEEK)]

    def to_dataframe(self) -> pd.DataFrame:
        """One row per assignment."""
        rows = [
            {"day": day, "day_name": DAYS[day], "hub": hub, "ssn": ssn}
            for day in sorted(self.slots)
            for hub in sorted(self.slots[day])
            for ssn in self.slots[day][hub]
        ]
        if not rows:
            return pd.DataFrame(columns=["day", "day_name", "hub", "ssn"])
        return pd.DataFrame(rows)

    def to_matrix(self, hubs: Optional[List[str]] = None) -> pd.DataFrame:
        """Hub × day matrix of allocation counts."""
        hub_names = hubs if hubs is not None else sorted(
            {h for by_hub in self.slots.values() for h in by_hub}
        )
        data = {
            DAYS[d]: [len(self.slots.get(d, {}).get(h, [])) for h in hub_names]
            for d in range(DAYS_PER_WEEK)
        }
        return pd.DataFrame(data, index=pd.Index(hub_names, name="hub"))
