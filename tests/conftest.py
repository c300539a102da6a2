"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from vaxplan.registry import Registry
from vaxplan.solver.allocation import AllocationEngine

YEAR = 2021


@pytest.fixture
def registry():
    """Empty registry with a fixed reference year."""
    return Registry(current_year=YEAR)


@pytest.fixture
def small_registry(registry):
    """Six people, two hubs, intervals [0,40) [40,60) [60,+)."""
    people = [
        ("Mario", "Rossi", "AAA01", 1950),      # 71
        ("Anna", "Bianchi", "AAA02", 1955),     # 66
        ("Luca", "Verdi", "BBB01", 1971),       # 50
        ("Sara", "Neri", "BBB02", 1978),        # 43
        ("Paolo", "Gialli", "CCC01", 1995),     # 26
        ("Giulia", "Blu", "CCC02", 2001),       # 20
    ]
    for first, last, ssn, year in people:
        registry.add_person(first, last, ssn, year)
    registry.set_age_intervals(40, 60)
    registry.define_hub("Torino")
    registry.set_staff("Torino", 1, 1, 1)      # 10/h
    registry.define_hub("Milano")
    registry.set_staff("Milano", 2, 2, 2)      # 20/h
    registry.set_weekly_hours([4, 4, 4, 4, 4, 0, 0])
    return registry


@pytest.fixture
def quota_registry(registry):
    """
    50 people each aged 70, 45 and 20; one hub with 100 slots on Monday.

    Hub "Hub": 10 doctors, 9 nurses, 5 other -> min(100, 108, 100) = 100/h,
    Monday has 1 working hour.
    """
    for i in range(50):
        registry.add_person("Old", f"P{i:02d}", f"O{i:03d}", YEAR - 70)
        registry.add_person("Mid", f"P{i:02d}", f"M{i:03d}", YEAR - 45)
        registry.add_person("Young", f"P{i:02d}", f"Y{i:03d}", YEAR - 20)
    registry.set_age_intervals(40, 60)
    registry.define_hub("Hub")
    registry.set_staff("Hub", 10, 9, 5)
    registry.set_weekly_hours([1, 0, 0, 0, 0, 0, 0])
    return registry


@pytest.fixture
def engine(small_registry):
    return AllocationEngine(small_registry)


@pytest.fixture
def people_csv():
    """Valid people CSV content with one bad line and one duplicate."""
    return (
        "SSN,LAST,FIRST,YEAR\n"
        "AAA01,Rossi,Mario,1950\n"
        "BBB01,Verdi,Luca,1971\n"
        "CCC01,Gialli\n"
        "AAA01,Rossi,Mario,1950\n"
        "DDD01,Neri,Sara,1978\n"
    )

