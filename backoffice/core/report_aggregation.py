"""Report Aggregation — post-grouping filters, sorting and paging for both reports.

Invariants:
    - Input rows are already grouped by the store (one per customer / per month)
    - Post-aggregation bounds are inclusive; absent bound → no constraint
    - total_count is the number of rows AFTER bounds, BEFORE paging
    - Paging happens last, over the filtered and sorted rows
    - Best customers default to spend, descending; revenue defaults to
      chronological (year, month), ascending

Design Decisions:
    - Grouping in SQL, bounds/sort/page in memory: min/max on aggregates would need
      HAVING clauses per dialect, and the grouped set is small (one row per customer
      or per month). Revisit if the customer base grows large.
    - sorted() is stable, so ties keep the store's deterministic input order
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Sequence, TypeVar

from backoffice.core.domain_types import (
    BestCustomersSortKey, RevenueSortKey, SortDirection,
)
from backoffice.core.pagination import PageRequest, slice_page
from backoffice.core.parse_period import month_name

RowT = TypeVar("RowT")


@dataclass(frozen=True)
class CustomerSpend:
    """One best-customers row: a customer with >= 1 order."""
    customer_name: str
    customer_email: str
    total_orders: int
    spent_amount: Decimal


@dataclass(frozen=True)
class MonthlyRevenue:
    """One revenue-by-period row: a calendar month with >= 1 order."""
    year: int
    month: int
    total_orders: int
    total_revenue: Decimal

    @property
    def month_name(self) -> str:
        return month_name(self.month)


@dataclass(frozen=True)
class AggregateBounds:
    """Inclusive min/max bounds on a group's order count and money amount."""
    min_orders: int | None = None
    max_orders: int | None = None
    min_amount: Decimal | None = None
    max_amount: Decimal | None = None

    def admits(self, total_orders: int, amount: Decimal) -> bool:
        if self.min_orders is not None and total_orders < self.min_orders:
            return False
        if self.max_orders is not None and total_orders > self.max_orders:
            return False
        if self.min_amount is not None and amount < self.min_amount:
            return False
        if self.max_amount is not None and amount > self.max_amount:
            return False
        return True


def rank_best_customers(
    rows: Sequence[CustomerSpend],
    bounds: AggregateBounds,
    sort_key: BestCustomersSortKey,
    direction: SortDirection,
    page: PageRequest,
) -> tuple[list[CustomerSpend], int]:
    kept = [r for r in rows if bounds.admits(r.total_orders, r.spent_amount)]
    if sort_key is BestCustomersSortKey.TOTAL_ORDERS:
        key: Callable[[CustomerSpend], object] = lambda r: r.total_orders
    else:
        key = lambda r: r.spent_amount
    return _sort_and_page(kept, key, direction, page)


def rank_revenue_periods(
    rows: Sequence[MonthlyRevenue],
    bounds: AggregateBounds,
    sort_key: RevenueSortKey,
    direction: SortDirection,
    page: PageRequest,
) -> tuple[list[MonthlyRevenue], int]:
    kept = [r for r in rows if bounds.admits(r.total_orders, r.total_revenue)]
    if sort_key is RevenueSortKey.TOTAL_ORDERS:
        key: Callable[[MonthlyRevenue], object] = lambda r: r.total_orders
    elif sort_key is RevenueSortKey.TOTAL_REVENUE:
        key = lambda r: r.total_revenue
    else:
        key = lambda r: (r.year, r.month)
    return _sort_and_page(kept, key, direction, page)


def _sort_and_page(
    rows: list[RowT],
    key: Callable[[RowT], object],
    direction: SortDirection,
    page: PageRequest,
) -> tuple[list[RowT], int]:
    ordered = sorted(rows, key=key, reverse=direction is SortDirection.DESC)
    return slice_page(ordered, page), len(ordered)
