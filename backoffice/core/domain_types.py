"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CustomerId, ProductId, OrderId, OrderLineId wrap UUIDs
    - Money is always Decimal, never float
    - Sort keys and directions encoded as Enums — parsed leniently from query strings

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - from_query() classmethods fold the accepted aliases and the default into one place
"""

from decimal import Decimal
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CustomerId = NewType("CustomerId", UUID)
ProductId = NewType("ProductId", UUID)
OrderId = NewType("OrderId", UUID)
OrderLineId = NewType("OrderLineId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

Money = NewType("Money", Decimal)


# ─── Enums ───────────────────────────────────────────────────────

class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_query(cls, raw: str | None, default: "SortDirection") -> "SortDirection":
        """Only an explicit asc/desc overrides the default (case-insensitive)."""
        value = (raw or "").strip().lower()
        if value == cls.ASC.value:
            return cls.ASC
        if value == cls.DESC.value:
            return cls.DESC
        return default


class BestCustomersSortKey(str, Enum):
    """Sort keys for the best-customers report. Anything unknown sorts by spend."""
    TOTAL_ORDERS = "totalOrders"
    SPENT_AMOUNT = "spentAmount"

    @classmethod
    def from_query(cls, raw: str | None) -> "BestCustomersSortKey":
        value = (raw or "").strip().lower()
        if value in ("totalorders", "orders"):
            return cls.TOTAL_ORDERS
        return cls.SPENT_AMOUNT


class RevenueSortKey(str, Enum):
    """Sort keys for the revenue-by-period report. Anything unknown is chronological."""
    TOTAL_ORDERS = "totalOrders"
    TOTAL_REVENUE = "totalRevenue"
    PERIOD = "date"

    @classmethod
    def from_query(cls, raw: str | None) -> "RevenueSortKey":
        value = (raw or "").strip().lower()
        if value in ("totalorders", "orders"):
            return cls.TOTAL_ORDERS
        if value in ("totalrevenue", "revenue"):
            return cls.TOTAL_REVENUE
        return cls.PERIOD
