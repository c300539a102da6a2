# vaxplan/models - Data models for the vaccination campaign
from .config import CampaignConfig, HubConfig
from .days import DAYS, day_index, day_name
from .hub import Hub
from .interval import Interval, IntervalSet
from .person import Person
from .schedule import AllocationPlan, WeeklySchedule

__all__ = [
    "Person",
    "Hub",
    "Interval", "IntervalSet",
    "WeeklySchedule", "AllocationPlan",
    "DAYS", "day_index", "day_name",
    "CampaignConfig", "HubConfig",
]
