"""CSV loading and saving for campaign registrants."""
import io
from pathlib import Path
from typing import Callable, Iterable, Optional, TextIO, Union

import pandas as pd

from vaxplan.errors import HeaderError
from vaxplan.registry import Registry
from vaxplan.utils.logging_setup import get_logger

logger = get_logger("vaxplan.io.csv_loader")

HEADER = "SSN,LAST,FIRST,YEAR"
COLUMNS = HEADER.split(",")

# Called with (line_number, raw_line); line 1 is the header
LoadListener = Callable[[int, str], None]

Source = Union[str, Path, TextIO, Iterable[str]]


def _noop_listener(line_number: int, line: str) -> None:
    pass


def _safe_int(value: str) -> Optional[int]:
    """Parse an integer field, None when it is not one."""
    try:
        return int(value.strip())
    except ValueError:
        return None


class PeopleLoader:
    """
    Line-oriented people CSV reader.

    Malformed lines are skipped and reported to the listener:
    wrong field count, blank or duplicate SSN, a non-integer year
    or a birth year after the registry reference year.
    """

    def __init__(self, registry: Registry, listener: Optional[LoadListener] = None):
        self.registry = registry
        self.listener = listener or _noop_listener

    def set_load_listener(self, listener: Optional[LoadListener]) -> None:
        self.listener = listener or _noop_listener

    def _reject(self, line_number: int, line: str, reason: str) -> None:
        logger.debug(f"Line {line_number} skipped ({reason}): {line!r}")
        self.listener(line_number, line)

    def load(self, source: Source) -> int:
        """
        Load people into the registry.

        Args:
            source: Path to a CSV file, a text stream or an iterable of lines

        Returns:
            Number of lines read, header included

        Raises:
            HeaderError: the first line is not "SSN,LAST,FIRST,YEAR"
        """
        if isinstance(source, (str, Path)):
            with open(source, encoding="utf-8", newline="") as fh:
                return self._load_lines(fh)
        return self._load_lines(source)

    def _load_lines(self, source: Iterable[str]) -> int:
        lines = iter(source)
        header = next(lines, "").rstrip("\r\n")
        if header != HEADER:
            self.listener(1, header)
            raise HeaderError(f"Expected header {HEADER!r}, got {header!r}")

        count = 1
        added = 0
        for raw in lines:
            count += 1
            line = raw.rstrip("\r\n")
            fields = line.split(",")
            if len(fields) != len(COLUMNS):
                self._reject(count, line, f"{len(fields)} fields")
                continue
            ssn, last, first, year = fields
            ssn = ssn.strip()
            if not ssn:
                self._reject(count, line, "blank SSN")
                continue
            if self.registry.has_person(ssn):
                self._reject(count, line, "duplicate SSN")
                continue
            birth_year = _safe_int(year)
            if birth_year is None:
                self._reject(count, line, "invalid year")
                continue
            if birth_year > self.registry.current_year:
                self._reject(count, line, "birth year in the future")
                continue
            self.registry.add_person(first, last, ssn, birth_year)
            added += 1

        logger.info(f"Loaded {added} people from {count} lines")
        return count


def load_people(registry: Registry, source: Source, listener: Optional[LoadListener] = None) -> int:
    """Load a people CSV; see PeopleLoader.load."""
    return PeopleLoader(registry, listener).load(source)


def load_people_text(registry: Registry, text: str, listener: Optional[LoadListener] = None) -> int:
    """Load people from CSV content held in a string."""
    return load_people(registry, io.StringIO(text), listener)


def people_to_dataframe(registry: Registry) -> pd.DataFrame:
    """Registered people with age, interval and allocation columns."""
    columns = COLUMNS + ["AGE", "INTERVAL", "ASSIGNED", "HUB", "DAY"]
    rows = []
    for p in registry.people():
        age = p.age(registry.current_year)
        interval = registry.interval_of(p).label if registry.intervals.is_defined else ""
        rows.append([p.ssn, p.last, p.first, p.birth_year, age, interval, p.assigned, p.hub, p.day])
    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(rows, columns=columns)


def save_people(registry: Registry, path: Union[str, Path]) -> None:
    """
    Save registered people as a CSV that load_people reads back.

    Args:
        registry: Registry to export
        path: Output path
    """
    df = pd.DataFrame(
        [[p.ssn, p.last, p.first, p.birth_year] for p in registry.people()],
        columns=COLUMNS,
    )
    df.to_csv(path, index=False, lineterminator="\n")
