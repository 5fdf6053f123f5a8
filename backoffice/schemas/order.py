"""Order Schemas — creation payload, search parameters, responses.

Invariants:
    - unitPrice and total on a line are the values frozen at creation
    - totalAmount is the sum of the frozen line totals
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from backoffice.schemas.common import CamelModel, MoneyOut, PageEnvelope


class OrderLineCreate(CamelModel):
    product_id: UUID | None = None
    quantity: int | None = None


class OrderCreate(CamelModel):
    customer_id: UUID | None = None
    lines: list[OrderLineCreate] | None = None


class OrderSearch(CamelModel):
    id: UUID | None = None
    customer_name: str | None = None
    customer_email: str | None = None
    customer_phone: str | None = None
    product_title: str | None = None
    product_description: str | None = None
    product_slug: str | None = None
    product_price_start: Decimal | None = None
    product_price_end: Decimal | None = None
    created_at_start: datetime | None = None
    created_at_end: datetime | None = None
    updated_at_start: datetime | None = None
    updated_at_end: datetime | None = None
    page_number: int | None = None
    page_size: int | None = None


class OrderLineResponse(CamelModel):
    id: UUID
    product_id: UUID
    product_title: str
    quantity: int
    unit_price: MoneyOut
    total: MoneyOut


class OrderCreatedResponse(CamelModel):
    id: UUID
    customer_id: UUID
    created_at: datetime
    updated_at: datetime
    lines: list[OrderLineResponse]


class OrderResponse(OrderCreatedResponse):
    customer_name: str
    total_amount: MoneyOut


class OrderListResponse(PageEnvelope):
    orders: list[OrderResponse]
