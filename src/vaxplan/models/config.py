"""
Campaign Configuration
======================
Pydantic-validated description of a campaign: working hours, age breaks
and hub staffing. Used at the CLI boundary and for JSON config files.

Usage:
    from vaxplan.models.config import CampaignConfig

    cfg = CampaignConfig(hours=[8, 8, 8, 8, 8, 4, 0], age_breaks=[40, 60])
    cfg.apply_to(registry)
"""
import json
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .days import DAYS_PER_WEEK
from .schedule import MAX_DAILY_HOURS

if TYPE_CHECKING:
    from vaxplan.registry import Registry


class HubConfig(BaseModel):
    """Staffing of a single hub."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    doctors: int = Field(ge=1)
    nurses: int = Field(ge=1)
    other: int = Field(ge=1)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("hub name cannot be blank")
        return v

    @classmethod
    def parse_spec(cls, spec: str) -> "HubConfig":
        """Parse "NAME:DOCTORS:NURSES:OTHER" as used on the command line."""
        parts = spec.rsplit(":", 3)
        if len(parts) != 4:
            raise ValueError(f"Hub spec must be NAME:DOCTORS:NURSES:OTHER, got {spec!r}")
        name, doctors, nurses, other = parts
        return cls(name=name, doctors=int(doctors), nurses=int(nurses), other=int(other))


class CampaignConfig(BaseModel):
    """Validated campaign configuration."""
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    hours: Optional[List[int]] = Field(default=None, description="Working hours Monday..Sunday")
    age_breaks: List[int] = Field(default_factory=list, description="Ascending interval breaks")
    hubs: List[HubConfig] = Field(default_factory=list)
    current_year: Optional[int] = Field(default=None, ge=1900, le=3000)

    @field_validator("hours")
    @classmethod
    def validate_hours(cls, v: Optional[List[int]]) -> Optional[List[int]]:
        if v is None:
            return v
        if len(v) != DAYS_PER_WEEK:
            raise ValueError(f"hours must have exactly {DAYS_PER_WEEK} values")
        if any(h < 0 or h > MAX_DAILY_HOURS for h in v):
            raise ValueError(f"each day must have between 0 and {MAX_DAILY_HOURS} hours")
        return v

    @field_validator("age_breaks")
    @classmethod
    def validate_breaks(cls, v: List[int]) -> List[int]:
        if any(b <= 0 for b in v):
            raise ValueError("age breaks must be positive")
        if any(b >= a for b, a in zip(v, v[1:])):
            raise ValueError("age breaks must be strictly ascending")
        return v

    @model_validator(mode="after")
    def validate_model(self):
        """Cross-field validation."""
        names = [h.name for h in self.hubs]
        if len(names) != len(set(names)):
            raise ValueError("hub names must be unique")
        return self

    def apply_to(self, registry: "Registry") -> "Registry":
        """Push hours, intervals and hubs into a registry."""
        if self.hours is not None:
            registry.set_weekly_hours(self.hours)
        if self.age_breaks:
            registry.set_age_intervals(*self.age_breaks)
        for hub in self.hubs:
            if hub.name not in registry.hubs():
                registry.define_hub(hub.name)
            registry.set_staff(hub.name, hub.doctors, hub.nurses, hub.other)
        return registry

    def to_dict(self) -> dict:
        return self.model_dump()

    @classmethod
    def from_dict(cls, d: dict) -> "CampaignConfig":
        return cls.model_validate(d)


def load_config(path: Union[str, Path]) -> CampaignConfig:
    """Read and validate a JSON campaign configuration file."""
    with open(path, encoding="utf-8") as fh:
        return CampaignConfig.from_dict(json.load(fh))
