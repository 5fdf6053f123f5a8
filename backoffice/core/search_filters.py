"""Search Filters — turns search parameters into a list of independent predicate clauses.

Invariants:
    - String filters are "contains", case-folded, trimmed; blank means "no filter"
    - Range bounds become one GTE and/or one LTE clause each; absent bound → no clause
    - Clauses are ANDed by the store; an empty list imposes no constraint
    - Field names are logical ("customer.name", "product.price"), never column objects

Design Decisions:
    - Clauses are plain data, not SQLAlchemy expressions: core stays IO-free and every
      clause is testable on its own; repositories/query_filters.py translates them
    - For orders, product.* fields mean "any line's product matches", each clause on its own
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID


class FilterOp(str, Enum):
    EQ = "eq"
    CONTAINS = "contains"
    GTE = "gte"
    LTE = "lte"


@dataclass(frozen=True)
class FilterClause:
    field: str
    op: FilterOp
    value: Any


def contains(field: str, raw: str | None) -> FilterClause | None:
    if raw is None:
        return None
    value = raw.strip().lower()
    if not value:
        return None
    return FilterClause(field, FilterOp.CONTAINS, value)


def at_least(field: str, value: Any) -> FilterClause | None:
    if value is None:
        return None
    return FilterClause(field, FilterOp.GTE, value)


def at_most(field: str, value: Any) -> FilterClause | None:
    if value is None:
        return None
    return FilterClause(field, FilterOp.LTE, value)


def equals(field: str, value: Any) -> FilterClause | None:
    if value is None:
        return None
    return FilterClause(field, FilterOp.EQ, value)


def _collect(*clauses: FilterClause | None) -> list[FilterClause]:
    return [c for c in clauses if c is not None]


def build_customer_filters(
    name: str | None = None,
    email: str | None = None,
    phone: str | None = None,
) -> list[FilterClause]:
    return _collect(
        contains("name", name),
        contains("email", email),
        contains("phone", phone),
    )


def build_product_filters(
    title: str | None = None,
    description: str | None = None,
    slug: str | None = None,
    min_price: Decimal | None = None,
    max_price: Decimal | None = None,
) -> list[FilterClause]:
    return _collect(
        contains("title", title),
        contains("description", description),
        contains("slug", slug),
        at_least("price", min_price),
        at_most("price", max_price),
    )


def build_order_filters(
    order_id: UUID | None = None,
    customer_name: str | None = None,
    customer_email: str | None = None,
    customer_phone: str | None = None,
    product_title: str | None = None,
    product_description: str | None = None,
    product_slug: str | None = None,
    product_price_start: Decimal | None = None,
    product_price_end: Decimal | None = None,
    created_at_start: datetime | None = None,
    created_at_end: datetime | None = None,
    updated_at_start: datetime | None = None,
    updated_at_end: datetime | None = None,
) -> list[FilterClause]:
    return _collect(
        equals("id", order_id),
        contains("customer.name", customer_name),
        contains("customer.email", customer_email),
        contains("customer.phone", customer_phone),
        contains("product.title", product_title),
        contains("product.description", product_description),
        contains("product.slug", product_slug),
        at_least("product.price", product_price_start),
        at_most("product.price", product_price_end),
        at_least("created_at", created_at_start),
        at_most("created_at", created_at_end),
        at_least("updated_at", updated_at_start),
        at_most("updated_at", updated_at_end),
    )


def build_best_customer_filters(
    customer_name: str | None = None,
    customer_email: str | None = None,
) -> list[FilterClause]:
    """Pre-aggregation filters of the best-customers report (applied to source rows)."""
    return _collect(
        contains("customer.name", customer_name),
        contains("customer.email", customer_email),
    )
