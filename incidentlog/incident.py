"""The incident record and date validation."""

from __future__ import annotations

import re
from dataclasses import dataclass

_DATE_FIELD = re.compile(r"\s*[+-]?[0-9]+", re.ASCII)


@dataclass
class Incident:
    """A reported incident: where it happened, what it was and when."""

    area: str = ""
    type: str = ""
    date: str = ""


def _parse_field(text: str) -> int | None:
    if not _DATE_FIELD.fullmatch(text):
        return None
    return int(text)


def validate_date(date: str) -> bool:
    """Return True if ``date`` is a real calendar date in dd.mm.yyyy form, year 1900 or later."""
    if len(date) != 10 or date[2] != "." or date[5] != ".":
        return False

    parts = [_parse_field(date[0:2]), _parse_field(date[3:5]), _parse_field(date[6:10])]
    if None in parts:
        return False
    day, month, year = parts

    if year < 1900 or not 1 <= month <= 12 or day < 1:
        return False

    days_in_month = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
    if year % 4 == 0 and (year % 100 != 0 or year % 400 == 0):
        days_in_month[1] = 29

    return day <= days_in_month[month - 1]