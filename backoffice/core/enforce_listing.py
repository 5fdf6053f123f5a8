"""Listing Enforcement — endpoint-level checks for search and report parameters.

Invariants:
    - pageNumber, if supplied, must be >= 1; pageSize, if supplied, in [1, 100]
    - A range with both bounds present must satisfy low <= high
    - A non-blank period must parse as YYYY-MM; format failures are reported
      before (and separately from) ordering failures
    - Every violation raises RequestValidationFailedError naming the offending
      field(s) and echoing the offending values; nothing reaches the store

Design Decisions:
    - All inverted ranges of one request are collected and reported together,
      pagination is reported on its own (matches the HTTP contract)
    - Absent parameters are never an error here: defaults come from core/pagination.py
"""

from dataclasses import dataclass
from typing import Any

from backoffice.core.errors import RequestValidationFailedError
from backoffice.core.pagination import MAX_PAGE_SIZE
from backoffice.core.parse_period import Period, try_parse_period

PAGINATION_MESSAGE = (
    "Invalid pagination parameters. PageNumber must be >= 1 "
    f"and PageSize must be between 1 and {MAX_PAGE_SIZE}."
)
RANGE_MESSAGE = (
    "Invalid range filter(s). Ensure that Min/Start is less than "
    "or equal to Max/End."
)
PERIOD_FORMAT_MESSAGE = (
    "Invalid period format. Use YYYY-MM for startPeriod/endPeriod."
)


@dataclass(frozen=True)
class BoundedRange:
    """One optional [low, high] filter pair, as received from the caller.

    shown overrides what is echoed back on failure (e.g. the raw period
    strings instead of the parsed values).
    """
    name: str
    low: Any
    high: Any
    low_label: str = "min"
    high_label: str = "max"
    shown: tuple[Any, Any] | None = None

    @property
    def is_inverted(self) -> bool:
        return self.low is not None and self.high is not None and self.low > self.high

    def echo(self) -> dict:
        low, high = self.shown if self.shown is not None else (self.low, self.high)
        return {self.low_label: low, self.high_label: high}


def check_pagination(page_number: int | None, page_size: int | None) -> None:
    """Reject out-of-range page parameters; absent values are fine."""
    invalid: dict[str, int] = {}
    if page_number is not None and page_number < 1:
        invalid["pageNumber"] = page_number
    if page_size is not None and (page_size < 1 or page_size > MAX_PAGE_SIZE):
        invalid["pageSize"] = page_size
    if invalid:
        raise RequestValidationFailedError(
            PAGINATION_MESSAGE, field=", ".join(invalid), details=invalid,
        )


def check_ranges(*ranges: BoundedRange) -> None:
    """Reject every inverted range at once, echoing both bounds of each."""
    inverted = [r for r in ranges if r.is_inverted]
    if not inverted:
        return
    raise RequestValidationFailedError(
        RANGE_MESSAGE,
        field=", ".join(r.name for r in inverted),
        details={r.name: r.echo() for r in inverted},
    )


def parse_period_window(
    start_period: str | None, end_period: str | None,
) -> tuple[Period | None, Period | None]:
    """Parse an optional [startPeriod, endPeriod] window, rejecting malformed bounds."""
    start = try_parse_period(start_period)
    end = try_parse_period(end_period)
    bad_start = _is_present(start_period) and start is None
    bad_end = _is_present(end_period) and end is None
    if bad_start or bad_end:
        raise RequestValidationFailedError(
            PERIOD_FORMAT_MESSAGE,
            field=", ".join(
                name for name, bad in (
                    ("startPeriod", bad_start), ("endPeriod", bad_end),
                ) if bad
            ),
            details={"startPeriod": start_period, "endPeriod": end_period},
        )
    return start, end


def period_range(
    start: Period | None, end: Period | None,
    start_raw: str | None, end_raw: str | None,
) -> BoundedRange:
    return BoundedRange(
        "period", start, end, "start", "end", shown=(start_raw, end_raw),
    )


def _is_present(raw: str | None) -> bool:
    return raw is not None and bool(raw.strip())
