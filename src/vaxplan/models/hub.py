"""Vaccination hub model."""
from dataclasses import dataclass

# Vaccinations per hour that one staff member of each role can sustain
DOCTOR_RATE = 10
NURSE_RATE = 12
OTHER_RATE = 20


@dataclass
class Hub:
    """A vaccination site; its hourly capacity is derived from staffing."""

    name: str
    doctors: int = 0
    nurses: int = 0
    other: int = 0

    @property
    def is_staffed(self) -> bool:
        return self.doctors > 0 and self.nurses > 0 and self.other > 0

    @property
    def hourly_capacity(self) -> int:
        """Vaccinations per hour: min(10*doctors, 12*nurses, 20*other)."""
        return min(
            DOCTOR_RATE * self.doctors,
            NURSE_RATE * self.nurses,
            OTHER_RATE * self.other,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "doctors": self.doctors,
            "nurses": self.nurses,
            "other": self.other,
            "hourly_capacity": self.hourly_capacity,
        }
