"""Person model for campaign registrants."""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Person:
    """A registered person and their current allocation state."""

    first: str
    last: str
    ssn: str
    birth_year: int

    # Allocation state, owned by the allocation engine
    assigned: bool = field(default=False, compare=False)
    hub: Optional[str] = field(default=None, compare=False)
    day: Optional[int] = field(default=None, compare=False)

    def __post_init__(self):
        """Normalize identity fields."""
        self.first = str(self.first).strip()
        self.last = str(self.last).strip()
        self.ssn = str(self.ssn).strip()
        self.birth_year = int(self.birth_year)

    def age(self, current_year: int) -> int:
        """Age in years, computed against the given current year."""
        return current_year - self.birth_year

    def assign(self, hub: str, day: int) -> None:
        """Mark this person as allocated to (hub, day)."""
        self.assigned = True
        self.hub = hub
        self.day = day

    def clear(self) -> None:
        """Reset allocation state to unassigned."""
        self.assigned = False
        self.hub = None
        self.day = None

    def is_assigned_to(self, hub: str, day: int) -> bool:
        return self.assigned and self.hub == hub and self.day == day

    def __str__(self) -> str:
        return f"{self.ssn}, {self.last}, {self.first}"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "ssn": self.ssn,
            "last": self.last,
            "first": self.first,
            "birth_year": self.birth_year,
            "assigned": self.assigned,
            "hub": self.hub,
            "day": self.day,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Person":
        """Create from dictionary. Allocation state is restored only when consistent."""
        p = cls(
            first=d.get("first", ""),
            last=d.get("last", ""),
            ssn=d.get("ssn", ""),
            birth_year=int(d.get("birth_year", 0)),
        )
        if d.get("assigned") and d.get("hub") is not None and d.get("day") is not None:
            p.assign(str(d["hub"]), int(d["day"]))
        return p
