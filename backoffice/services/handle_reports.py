"""Report Handlers — best customers and revenue by period.

Invariants:
    - All parameter checks run before the store is queried:
      pagination, then period format, then range ordering
    - A malformed period is always rejected, never silently ignored
    - Missing pageNumber/pageSize default to 1/10
    - The store groups; core/report_aggregation.py filters, sorts and pages
"""

import logging

from backoffice.core.domain_types import (
    BestCustomersSortKey, RevenueSortKey, SortDirection,
)
from backoffice.core.enforce_listing import (
    BoundedRange, check_pagination, check_ranges, parse_period_window,
    period_range,
)
from backoffice.core.pagination import clamp_page, total_pages
from backoffice.core.report_aggregation import (
    AggregateBounds, rank_best_customers, rank_revenue_periods,
)
from backoffice.core.repository_protocols import UnitOfWork
from backoffice.core.search_filters import build_best_customer_filters
from backoffice.schemas.report import (
    BestCustomerRow, BestCustomersQuery, BestCustomersResponse,
    RevenueByPeriodQuery, RevenueByPeriodResponse, RevenuePeriodRow,
)

logger = logging.getLogger(__name__)


class ReportHandlers:
    """Read-only aggregate reports over orders."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def best_customers(self, query: BestCustomersQuery) -> BestCustomersResponse:
        check_pagination(query.page_number, query.page_size)
        check_ranges(
            BoundedRange("orders", query.min_orders, query.max_orders),
            BoundedRange("spent", query.min_spent, query.max_spent),
        )
        page = clamp_page(query.page_number, query.page_size)

        groups = await self.uow.reports.spend_by_customer(
            build_best_customer_filters(query.customer_name, query.customer_email),
        )
        rows, total = rank_best_customers(
            groups,
            AggregateBounds(
                query.min_orders, query.max_orders,
                query.min_spent, query.max_spent,
            ),
            BestCustomersSortKey.from_query(query.order_by),
            SortDirection.from_query(query.order_direction, SortDirection.DESC),
            page,
        )
        logger.debug("Best customers computed", extra={"total_count": total})
        return BestCustomersResponse(
            customers=[
                BestCustomerRow(
                    customer_name=r.customer_name,
                    customer_email=r.customer_email,
                    total_orders=r.total_orders,
                    spent_amount=r.spent_amount,
                )
                for r in rows
            ],
            page_number=page.number,
            page_size=page.size,
            total_count=total,
            total_pages=total_pages(total, page.size),
        )

    async def revenue_by_period(
        self, query: RevenueByPeriodQuery,
    ) -> RevenueByPeriodResponse:
        check_pagination(query.page_number, query.page_size)
        start, end = parse_period_window(query.start_period, query.end_period)
        check_ranges(
            period_range(start, end, query.start_period, query.end_period),
            BoundedRange("orders", query.min_orders, query.max_orders),
            BoundedRange("revenue", query.min_revenue, query.max_revenue),
        )
        page = clamp_page(query.page_number, query.page_size)

        groups = await self.uow.reports.revenue_by_month(
            start.start_instant() if start else None,
            end.end_instant() if end else None,
        )
        rows, total = rank_revenue_periods(
            groups,
            AggregateBounds(
                query.min_orders, query.max_orders,
                query.min_revenue, query.max_revenue,
            ),
            RevenueSortKey.from_query(query.order_by),
            SortDirection.from_query(query.order_direction, SortDirection.ASC),
            page,
        )
        logger.debug("Revenue by period computed", extra={"total_count": total})
        return RevenueByPeriodResponse(
            items=[
                RevenuePeriodRow(
                    year=r.year,
                    month=r.month_name,
                    total_orders=r.total_orders,
                    total_revenue=r.total_revenue,
                )
                for r in rows
            ],
            page_number=page.number,
            page_size=page.size,
            total_count=total,
            total_pages=total_pages(total, page.size),
        )
