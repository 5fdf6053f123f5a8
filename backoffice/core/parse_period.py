"""Period Parsing — YYYY-MM strings to calendar months and their instant bounds.

Invariants:
    - Accepted form is exactly "<year>-<month>" with integer parts
    - year in [1900, 9999], month in [1, 12]; anything else is unparseable
    - start_instant is the first instant of the month, end_instant the last (23:59:59.999999)
    - All instants are UTC

Design Decisions:
    - try_parse_period returns None instead of raising: callers decide whether a
      bad period is a validation failure (endpoint) or not (never silently ignored
      at aggregation — services parse through enforce_listing first)
    - Month names are a fixed English table, independent of process locale
"""

import calendar
from dataclasses import dataclass
from datetime import datetime, timezone

MIN_YEAR = 1900
MAX_YEAR = 9999

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


@dataclass(frozen=True, order=True)
class Period:
    """A calendar year-month. Ordered chronologically."""
    year: int
    month: int

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    def start_instant(self) -> datetime:
        return datetime(self.year, self.month, 1, tzinfo=timezone.utc)

    def end_instant(self) -> datetime:
        last_day = calendar.monthrange(self.year, self.month)[1]
        return datetime(
            self.year, self.month, last_day, 23, 59, 59, 999_999,
            tzinfo=timezone.utc,
        )


def try_parse_period(raw: str | None) -> Period | None:
    """Parse a YYYY-MM string. Returns None for blank or malformed input."""
    if raw is None or not raw.strip():
        return None
    parts = raw.strip().split("-")
    if len(parts) != 2:
        return None
    try:
        year = int(parts[0])
        month = int(parts[1])
    except ValueError:
        return None
    if year < MIN_YEAR or year > MAX_YEAR:
        return None
    if month < 1 or month > 12:
        return None
    return Period(year=year, month=month)


def month_name(month: int) -> str:
    return MONTH_NAMES[month - 1]
