"""Report Schemas — query parameters and rows of the two sales reports."""

from decimal import Decimal

from backoffice.schemas.common import CamelModel, MoneyOut, PageEnvelope


class BestCustomersQuery(CamelModel):
    customer_name: str | None = None
    customer_email: str | None = None
    min_orders: int | None = None
    max_orders: int | None = None
    min_spent: Decimal | None = None
    max_spent: Decimal | None = None
    order_by: str | None = None
    order_direction: str | None = None
    page_number: int | None = None
    page_size: int | None = None


class BestCustomerRow(CamelModel):
    customer_name: str
    customer_email: str
    total_orders: int
    spent_amount: MoneyOut


class BestCustomersResponse(PageEnvelope):
    customers: list[BestCustomerRow]


class RevenueByPeriodQuery(CamelModel):
    start_period: str | None = None
    end_period: str | None = None
    min_orders: int | None = None
    max_orders: int | None = None
    min_revenue: Decimal | None = None
    max_revenue: Decimal | None = None
    order_by: str | None = None
    order_direction: str | None = None
    page_number: int | None = None
    page_size: int | None = None


class RevenuePeriodRow(CamelModel):
    year: int
    month: str
    total_orders: int
    total_revenue: MoneyOut


class RevenueByPeriodResponse(PageEnvelope):
    items: list[RevenuePeriodRow]
