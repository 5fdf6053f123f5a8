"""Report Repository — grouped order aggregates for the two sales reports.

Invariants:
    - One row per customer with >= 1 order (spend_by_customer)
    - One row per (year, month) of created_at with >= 1 order (revenue_by_month)
    - An order's amount is the sum of its frozen line totals
    - Pre-aggregation filters narrow the source orders BEFORE grouping
    - Rows come back in a deterministic order (name/email, chronological)

Design Decisions:
    - Per-order totals computed in a subquery first, so counting orders and
      summing money happen over one row per order (no join fan-out)
    - extract() compiles per dialect (EXTRACT on PostgreSQL, strftime on SQLite);
      PostgreSQL sessions are pinned to UTC (infrastructure/database.py), so the
      extracted month matches the UTC period window
"""

from datetime import datetime
from decimal import Decimal
from typing import Sequence

from sqlalchemy import Integer, cast, extract, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.report_aggregation import CustomerSpend, MonthlyRevenue
from backoffice.core.search_filters import FilterClause
from backoffice.models.customer import Customer
from backoffice.models.order import Order
from backoffice.models.order_line import OrderLine
from backoffice.repositories.query_filters import build_conditions, column

SPEND_FIELDS = {
    "customer.name": column(Customer.name),
    "customer.email": column(Customer.email),
}


def _order_totals():
    return (
        select(
            OrderLine.order_id.label("order_id"),
            func.sum(OrderLine.total).label("order_total"),
        )
        .group_by(OrderLine.order_id)
        .subquery("order_totals")
    )


def _money(value) -> Decimal:
    if value is None:
        return Decimal("0")
    return value if isinstance(value, Decimal) else Decimal(str(value))


class SqlReportRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def spend_by_customer(
        self, filters: Sequence[FilterClause],
    ) -> list[CustomerSpend]:
        totals = _order_totals()
        conditions = build_conditions(filters, SPEND_FIELDS)
        query = (
            select(
                Customer.name,
                Customer.email,
                func.count(Order.id).label("total_orders"),
                func.sum(totals.c.order_total).label("spent_amount"),
            )
            .select_from(Order)
            .join(Customer, Customer.id == Order.customer_id)
            .outerjoin(totals, totals.c.order_id == Order.id)
            .where(*conditions)
            .group_by(Customer.id, Customer.name, Customer.email)
            .order_by(Customer.name, Customer.email)
        )
        result = await self.db.execute(query)
        return [
            CustomerSpend(
                customer_name=row.name,
                customer_email=row.email,
                total_orders=row.total_orders,
                spent_amount=_money(row.spent_amount),
            )
            for row in result.all()
        ]

    async def revenue_by_month(
        self, created_from: datetime | None, created_to: datetime | None,
    ) -> list[MonthlyRevenue]:
        totals = _order_totals()
        year = cast(extract("year", Order.created_at), Integer).label("year")
        month = cast(extract("month", Order.created_at), Integer).label("month")
        query = (
            select(
                year,
                month,
                func.count(Order.id).label("total_orders"),
                func.sum(totals.c.order_total).label("total_revenue"),
            )
            .select_from(Order)
            .outerjoin(totals, totals.c.order_id == Order.id)
        )
        if created_from is not None:
            query = query.where(Order.created_at >= created_from)
        if created_to is not None:
            query = query.where(Order.created_at <= created_to)
        query = query.group_by(year, month).order_by(year, month)
        result = await self.db.execute(query)
        return [
            MonthlyRevenue(
                year=int(row.year),
                month=int(row.month),
                total_orders=row.total_orders,
                total_revenue=_money(row.total_revenue),
            )
            for row in result.all()
        ]
