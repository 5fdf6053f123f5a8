"""Order Routes — order creation, lookup and search.

Invariants:
    - Routes never contain business logic (delegate to OrderHandlers)
    - No update or delete endpoints: orders are read-only once created
"""

import logging
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from backoffice.infrastructure.unit_of_work import SqlAlchemyUnitOfWork, get_unit_of_work
from backoffice.schemas.order import (
    OrderCreate, OrderCreatedResponse, OrderListResponse, OrderResponse,
    OrderSearch,
)
from backoffice.services.handle_orders import OrderHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/orders", tags=["orders"])


def get_handlers(
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
) -> OrderHandlers:
    return OrderHandlers(uow)


@router.get("", response_model=OrderListResponse)
async def search_orders(
    order_id: UUID | None = Query(None, alias="id"),
    customer_name: str | None = Query(None, alias="customerName"),
    customer_email: str | None = Query(None, alias="customerEmail"),
    customer_phone: str | None = Query(None, alias="customerPhone"),
    product_title: str | None = Query(None, alias="productTitle"),
    product_description: str | None = Query(None, alias="productDescription"),
    product_slug: str | None = Query(None, alias="productSlug"),
    product_price_start: Decimal | None = Query(None, alias="productPriceStart"),
    product_price_end: Decimal | None = Query(None, alias="productPriceEnd"),
    created_at_start: datetime | None = Query(None, alias="createdAtStart"),
    created_at_end: datetime | None = Query(None, alias="createdAtEnd"),
    updated_at_start: datetime | None = Query(None, alias="updatedAtStart"),
    updated_at_end: datetime | None = Query(None, alias="updatedAtEnd"),
    page_number: int | None = Query(None, alias="pageNumber"),
    page_size: int | None = Query(None, alias="pageSize"),
    handlers: OrderHandlers = Depends(get_handlers),
):
    """Search orders by customer/product fragments and ranges, newest first."""
    return await handlers.search(OrderSearch(
        id=order_id,
        customer_name=customer_name,
        customer_email=customer_email,
        customer_phone=customer_phone,
        product_title=product_title,
        product_description=product_description,
        product_slug=product_slug,
        product_price_start=product_price_start,
        product_price_end=product_price_end,
        created_at_start=created_at_start,
        created_at_end=created_at_end,
        updated_at_start=updated_at_start,
        updated_at_end=updated_at_end,
        page_number=page_number,
        page_size=page_size,
    ))


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: UUID, handlers: OrderHandlers = Depends(get_handlers),
):
    return await handlers.get(order_id)


@router.post(
    "", response_model=OrderCreatedResponse, status_code=status.HTTP_201_CREATED,
)
async def create_order(
    body: OrderCreate,
    response: Response,
    handlers: OrderHandlers = Depends(get_handlers),
):
    created = await handlers.create(body)
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return created
