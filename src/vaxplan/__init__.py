"""Vaccination campaign planner: registration, hub capacity and age-prioritized allocation."""
from vaxplan.errors import (
    ConfigurationError,
    DivisionUndefinedError,
    DuplicateHubError,
    DuplicateKeyError,
    HeaderError,
    NotConfiguredError,
    VaccinationError,
)
from vaxplan.registry import Registry
from vaxplan.solver.allocation import AllocationEngine
from vaxplan.solver.stats import StatisticsReporter

__version__ = "0.1.0"

__all__ = [
    "Registry",
    "AllocationEngine",
    "StatisticsReporter",
    "VaccinationError",
    "DuplicateKeyError",
    "DuplicateHubError",
    "ConfigurationError",
    "NotConfiguredError",
    "HeaderError",
    "DivisionUndefinedError",
]
