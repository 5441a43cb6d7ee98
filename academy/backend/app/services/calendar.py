"""Date-only helpers shared by the scheduling services.

Weekdays are numbered 0=Sunday..6=Saturday throughout, matching the weekday
labels staff type into class records ("Mon", "Tuesday", ...).
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Iterator

_ISO_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_DAY_FIRST_RE = re.compile(r"^(\d{2})[/-](\d{2})[/-](\d{4})$")

WEEKDAY_LABELS = {
    "sun": 0,
    "mon": 1,
    "tue": 2,
    "wed": 3,
    "thu": 4,
    "fri": 5,
    "sat": 6,
}
WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def parse_date_only(value: str | date | None) -> date | None:
    """Parse ``YYYY-MM-DD``, ``DD-MM-YYYY`` or ``DD/MM/YYYY``.

    Returns ``None`` for empty or unparseable input so callers can reject the
    request instead of carrying a malformed date forward.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    normalized = str(value).strip()
    if not normalized:
        return None
    match = _DAY_FIRST_RE.match(normalized)
    if match:
        dd, mm, yyyy = match.groups()
    else:
        match = _ISO_RE.match(normalized)
        if not match:
            return None
        yyyy, mm, dd = match.groups()
    try:
        return date(int(yyyy), int(mm), int(dd))
    except ValueError:
        return None


def format_date(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def weekday_index(value: date) -> int:
    # date.weekday() is Monday=0
    return (value.weekday() + 1) % 7


def day_matches(label: str | None, weekday: int) -> bool:
    """True when ``label`` names ``weekday`` or names no day at all."""

    if not label:
        return True
    key = str(label).strip()[:3].lower()
    expected = WEEKDAY_LABELS.get(key)
    if expected is None:
        return True
    return expected == weekday


def iter_dates(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def parse_weekdays(value: str | None) -> frozenset[int]:
    if not value:
        return frozenset()
    days = set()
    for raw in value.split(","):
        label = raw.strip()
        if not label:
            continue
        key = label[:3].lower()
        if key not in WEEKDAY_LABELS:
            raise ValueError(f"Unknown weekday label: {label!r}")
        days.add(WEEKDAY_LABELS[key])
    return frozenset(days)


def describe_weekdays(weekdays: frozenset[int]) -> str:
    names = [WEEKDAY_NAMES[day] for day in sorted(weekdays)]
    if len(names) <= 1:
        return "".join(names)
    return ", ".join(names[:-1]) + " and " + names[-1]


__all__ = [
    "WEEKDAY_LABELS",
    "parse_date_only",
    "format_date",
    "weekday_index",
    "day_matches",
    "iter_dates",
    "parse_weekdays",
    "describe_weekdays",
]
