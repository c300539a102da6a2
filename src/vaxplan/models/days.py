"""Day-of-week constants and normalization."""
from typing import Union

from vaxplan.errors import ConfigurationError

# Monday = 0 ... Sunday = 6
DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
DAYS_PER_WEEK = len(DAYS)

# Day normalization map
DAY_ALIASES = {
    "mon": 0, "monday": 0, "lun": 0, "lunedi": 0, "lunedì": 0,
    "tue": 1, "tuesday": 1, "mar": 1, "martedi": 1, "martedì": 1,
    "wed": 2, "wednesday": 2, "mer": 2, "mercoledi": 2, "mercoledì": 2,
    "thu": 3, "thursday": 3, "gio": 3, "giovedi": 3, "giovedì": 3,
    "fri": 4, "friday": 4, "ven": 4, "venerdi": 4, "venerdì": 4,
    "sat": 5, "saturday": 5, "sab": 5, "sabato": 5,
    "sun": 6, "sunday": 6, "dom": 6, "domenica": 6,
}


def day_index(day: Union[int, str]) -> int:
    """Normalize a day (0..6 or a name such as "Mon"/"monday") to its index."""
    if isinstance(day, bool):
        raise ConfigurationError(f"Invalid day: {day!r}")
    if isinstance(day, int):
        if 0 <= day < DAYS_PER_WEEK:
            return day
        raise ConfigurationError(f"Day index out of range 0..6: {day}")
    key = str(day).strip().lower()
    if key in DAY_ALIASES:
        return DAY_ALIASES[key]
    if key.isdigit():
        return day_index(int(key))
    raise ConfigurationError(f"Unknown day: {day!r}")


def day_name(day: Union[int, str]) -> str:
    """Canonical short name (Mon..Sun) of a day."""
    return DAYS[day_index(day)]
