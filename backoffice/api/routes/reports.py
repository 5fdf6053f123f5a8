"""Report Routes — best customers and revenue by period.

Invariants:
    - Read-only; never writes
    - pageNumber/pageSize default to 1/10 when absent
"""

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, Query

from backoffice.infrastructure.unit_of_work import SqlAlchemyUnitOfWork, get_unit_of_work
from backoffice.schemas.report import (
    BestCustomersQuery, BestCustomersResponse, RevenueByPeriodQuery,
    RevenueByPeriodResponse,
)
from backoffice.services.handle_reports import ReportHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


def get_handlers(
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
) -> ReportHandlers:
    return ReportHandlers(uow)


@router.get("/best-customers", response_model=BestCustomersResponse)
async def best_customers(
    customer_name: str | None = Query(None, alias="customerName"),
    customer_email: str | None = Query(None, alias="customerEmail"),
    min_orders: int | None = Query(None, alias="minOrders"),
    max_orders: int | None = Query(None, alias="maxOrders"),
    min_spent: Decimal | None = Query(None, alias="minSpent"),
    max_spent: Decimal | None = Query(None, alias="maxSpent"),
    order_by: str | None = Query(None, alias="orderBy"),
    order_direction: str | None = Query(None, alias="orderDirection"),
    page_number: int | None = Query(None, alias="pageNumber"),
    page_size: int | None = Query(None, alias="pageSize"),
    handlers: ReportHandlers = Depends(get_handlers),
):
    """Customers ranked by spend (default) or order count."""
    return await handlers.best_customers(BestCustomersQuery(
        customer_name=customer_name,
        customer_email=customer_email,
        min_orders=min_orders,
        max_orders=max_orders,
        min_spent=min_spent,
        max_spent=max_spent,
        order_by=order_by,
        order_direction=order_direction,
        page_number=page_number,
        page_size=page_size,
    ))


@router.get("/revenue-by-period", response_model=RevenueByPeriodResponse)
async def revenue_by_period(
    start_period: str | None = Query(None, alias="startPeriod"),
    end_period: str | None = Query(None, alias="endPeriod"),
    min_orders: int | None = Query(None, alias="minOrders"),
    max_orders: int | None = Query(None, alias="maxOrders"),
    min_revenue: Decimal | None = Query(None, alias="minRevenue"),
    max_revenue: Decimal | None = Query(None, alias="maxRevenue"),
    order_by: str | None = Query(None, alias="orderBy"),
    order_direction: str | None = Query(None, alias="orderDirection"),
    page_number: int | None = Query(None, alias="pageNumber"),
    page_size: int | None = Query(None, alias="pageSize"),
    handlers: ReportHandlers = Depends(get_handlers),
):
    """Orders and revenue per calendar month, chronological by default."""
    return await handlers.revenue_by_period(RevenueByPeriodQuery(
        start_period=start_period,
        end_period=end_period,
        min_orders=min_orders,
        max_orders=max_orders,
        min_revenue=min_revenue,
        max_revenue=max_revenue,
        order_by=order_by,
        order_direction=order_direction,
        page_number=page_number,
        page_size=page_size,
    ))
