"""Keeps a list of incidents backed by a comma-separated text file."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterator

from .incident import Incident


class Field(Enum):
    """An incident field that can be searched or edited."""

    AREA = 1
    TYPE = 2
    DATE = 3

    @property
    def attr(self) -> str:
        """Name of the matching Incident attribute."""
        return self.name.lower()


class IncidentManager:
    """In-memory incident list that persists to ``data_file`` after every change."""

    def __init__(self, data_file: str | Path = "incidents.txt") -> None:
        self.data_file = Path(data_file)
        self._incidents: list[Incident] = []

    def load(self) -> None:
        """Append incidents read from the data file; a missing file is ignored."""
        try:
            text = self.data_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        for line in text.splitlines():
            area, _, rest = line.partition(",")
            kind, _, date = rest.partition(",")
            if area and kind and date:
                self._incidents.append(Incident(area, kind, date))

    def save(self) -> None:
        """Write all incidents to the data file, one per line."""
        with self.data_file.open("w", encoding="utf-8", newline="\n") as fh:
            for inc in self._incidents:
                fh.write(f"{inc.area},{inc.type},{inc.date}\n")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._incidents):
            raise IndexError(f"incident index {index} out of range")

    def add(self, incident: Incident) -> None:
        """Append an incident and save."""
        self._incidents.append(incident)
        self.save()

    def remove(self, index: int) -> Incident:
        """Delete the incident at ``index`` (0-based), save, and return it."""
        self._check_index(index)
        removed = self._incidents.pop(index)
        self.save()
        return removed

    def edit(self, index: int, field: Field | int, value: str) -> None:
        """Replace one field of the incident at ``index`` (0-based) and save."""
        self._check_index(index)
        setattr(self._incidents[index], Field(field).attr, value)
        self.save()

    def filter(self, field: Field | int, keyword: str) -> list[Incident]:
        """Return incidents whose ``field`` contains ``keyword``, ignoring case."""
        attr = Field(field).attr
        needle = keyword.lower()
        return [inc for inc in self._incidents if needle in getattr(inc, attr).lower()]

    def sort_by_area(self) -> None:
        """Sort incidents by area text and save."""
        self._incidents.sort(key=lambda inc: inc.area)
        self.save()

    def sort_by_date(self) -> None:
        """Sort incidents by date text and save."""
        self._incidents.sort(key=lambda inc: inc.date)
        self.save()

    def __len__(self) -> int:
        return len(self._incidents)

    def __getitem__(self, index: int) -> Incident:
        self._check_index(index)
        return self._incidents[index]

    def __iter__(self) -> Iterator[Incident]:
        return iter(self._incidents)