"""
Campaign Registry
=================
Owns people, hubs, age intervals and the weekly working hours.
Every engine, reporter and loader receives a Registry explicitly.
"""
import datetime
from typing import Dict, Iterable, List, Optional

from vaxplan.errors import ConfigurationError, DuplicateHubError, NotConfiguredError
from vaxplan.models.hub import Hub
from vaxplan.models.interval import Interval, IntervalSet
from vaxplan.models.person import Person
from vaxplan.models.schedule import WeeklySchedule
from vaxplan.utils.logging_setup import get_logger, log_function_call

logger = get_logger("vaxplan.registry")


class Registry:
    """In-memory campaign state."""

    def __init__(self, current_year: Optional[int] = None):
        self.current_year = current_year if current_year is not None else datetime.date.today().year
        self._people: Dict[str, Person] = {}
        self._hubs: Dict[str, Hub] = {}
        self.intervals = IntervalSet()
        self.schedule = WeeklySchedule()

    # --- People ---

    def add_person(self, first: str, last: str, ssn: str, birth_year: int) -> bool:
        """
        Register a person.

        Returns:
            False (and no change) when the SSN is already known

        Raises:
            ConfigurationError: blank SSN, or birth year after current_year
        """
        ssn = str(ssn).strip()
        if not ssn:
            raise ConfigurationError("SSN must not be blank")
        if birth_year > self.current_year:
            raise ConfigurationError(
                f"Birth year {birth_year} of {ssn} is after reference year {self.current_year}"
            )
        if ssn in self._people:
            logger.debug(f"Duplicate SSN ignored: {ssn}")
            return False
        self._people[ssn] = Person(first=first, last=last, ssn=ssn, birth_year=birth_year)
        return True

    def count_people(self) -> int:
        return len(self._people)

    def has_person(self, ssn: str) -> bool:
        return ssn in self._people

    def person(self, ssn: str) -> Person:
        try:
            return self._people[ssn]
        except KeyError:
            raise NotConfiguredError(f"Unknown person: {ssn!r}") from None

    def get_person(self, ssn: str) -> str:
        """Person info formatted as "SSN, LAST, FIRST"."""
        return str(self.person(ssn))

    def get_age(self, ssn: str) -> int:
        return self.person(ssn).age(self.current_year)

    def people(self) -> List[Person]:
        """All people in ascending SSN order."""
        return [self._people[k] for k in sorted(self._people)]

    # --- Age intervals ---

    @log_function_call
    def set_age_intervals(self, *breaks: int) -> List[str]:
        """Replace the age intervals; see IntervalSet.define."""
        if len(breaks) == 1 and isinstance(breaks[0], (list, tuple)):
            breaks = tuple(breaks[0])
        self.intervals.define(breaks)
        logger.info(f"Age intervals: {', '.join(self.intervals.labels())}")
        return self.intervals.labels()

    def age_intervals(self) -> List[str]:
        return self.intervals.labels()

    def interval_of(self, person: Person) -> Interval:
        """Current interval of a person, recomputed on every call."""
        return self.intervals.classify(person.age(self.current_year))

    def people_in_interval(self, label: str) -> List[str]:
        """SSNs of the people whose age falls in the labeled interval."""
        interval = self.intervals.find(label)
        return [p.ssn for p in self.people() if self.interval_of(p) == interval]

    # --- Hubs ---

    @log_function_call
    def define_hub(self, name: str) -> None:
        name = str(name).strip()
        if name in self._hubs:
            raise DuplicateHubError(f"Hub already defined: {name!r}")
        self._hubs[name] = Hub(name=name)

    def hubs(self) -> List[str]:
        """Hub names in lexicographic order."""
        return sorted(self._hubs)

    def hub(self, name: str) -> Hub:
        try:
            return self._hubs[name]
        except KeyError:
            raise NotConfiguredError(f"Unknown hub: {name!r}") from None

    @log_function_call
    def set_staff(self, name: str, doctors: int, nurses: int, other: int) -> None:
        if name not in self._hubs:
            raise ConfigurationError(f"Unknown hub: {name!r}")
        if doctors < 1 or nurses < 1 or other < 1:
            raise ConfigurationError(
                f"Staff counts must all be at least 1 (doctors={doctors}, nurses={nurses}, other={other})"
            )
        hub = self._hubs[name]
        hub.doctors, hub.nurses, hub.other = doctors, nurses, other

    def hourly_capacity(self, name: str) -> int:
        """Vaccinations per hour; NotConfiguredError for unknown or unstaffed hubs."""
        hub = self._hubs.get(name)
        if hub is None or hub.hourly_capacity == 0:
            raise NotConfiguredError(f"Hub {name!r} is not defined or has no staff")
        return hub.hourly_capacity

    # --- Working hours ---

    @log_function_call
    def set_weekly_hours(self, hours: Iterable[int]) -> None:
        self.schedule = WeeklySchedule(hours=WeeklySchedule.validate(hours))

    def weekly_hours(self) -> List[int]:
        if not self.schedule.is_defined:
            raise NotConfiguredError("Weekly working hours are not set")
        return list(self.schedule.hours)

    def daily_available_slots(self, hub: str, day) -> int:
        """Working hours of ``day`` times the hub's hourly capacity."""
        return self.schedule.hours_on(day) * self.hourly_capacity(hub)
