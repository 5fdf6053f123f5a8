"""Order Handlers — order creation workflow, get, search.

Invariants:
    - Creation runs Validate → ResolveCustomer → ResolveProducts → ComputeLines → Persist
      as one atomic step; no intermediate state is ever persisted
    - Failure order: customerId, lines present, customer exists (404),
      quantities, products resolved (404)
    - Products are resolved once, as a batch over the distinct requested ids
    - created_at == updated_at == now at creation
    - Line unit prices and totals are frozen at creation; reads never recompute them

Design Decisions:
    - Order and lines added to the session together and committed once
    - The creation response is built from the priced lines, not from a re-read
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from backoffice.core.enforce_listing import BoundedRange, check_pagination, check_ranges
from backoffice.core.enforce_order import (
    check_line_quantities, check_order_header, check_products_resolved,
    distinct_product_ids,
)
from backoffice.core.errors import ResourceNotFoundError
from backoffice.core.order_pricing import order_total, price_lines
from backoffice.core.pagination import clamp_page, total_pages
from backoffice.core.repository_protocols import OrderLike, UnitOfWork
from backoffice.core.search_filters import build_order_filters
from backoffice.models.order import Order
from backoffice.models.order_line import OrderLine
from backoffice.schemas.order import (
    OrderCreate, OrderCreatedResponse, OrderLineResponse, OrderListResponse,
    OrderResponse, OrderSearch,
)

logger = logging.getLogger(__name__)


class OrderHandlers:
    """Order use cases, one request-scoped unit of work each."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def create(self, body: OrderCreate) -> OrderCreatedResponse:
        check_order_header(body.customer_id, body.lines)
        customer = await self.uow.customers.find_by_id(body.customer_id)
        if customer is None:
            raise ResourceNotFoundError("Customer", str(body.customer_id))
        check_line_quantities(body.lines)

        requested = distinct_product_ids(body.lines)
        products = await self.uow.products.find_by_ids(
            {pid for pid in requested if pid is not None},
        )
        check_products_resolved(requested, len(products))
        products_by_id = {p.id: p for p in products}
        priced = price_lines(body.lines, products_by_id)

        now = datetime.now(timezone.utc)
        order = Order(
            customer_id=customer.id, customer=customer,
            created_at=now, updated_at=now,
        )
        order.lines = [
            OrderLine(
                product_id=line.product_id,
                product=products_by_id[line.product_id],
                position=position,
                quantity=line.quantity,
                unit_price=line.unit_price,
                total=line.total,
            )
            for position, line in enumerate(priced)
        ]
        self.uow.orders.add(order)
        await self.uow.commit()
        logger.info(
            "Order created",
            extra={
                "order_id": str(order.id),
                "customer_id": str(customer.id),
                "line_count": len(priced),
            },
        )
        return OrderCreatedResponse(
            id=order.id,
            customer_id=order.customer_id,
            created_at=order.created_at,
            updated_at=order.updated_at,
            lines=[
                OrderLineResponse(
                    id=stored.id,
                    product_id=line.product_id,
                    product_title=line.product_title,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    total=line.total,
                )
                for stored, line in zip(order.lines, priced)
            ],
        )

    async def get(self, order_id: UUID) -> OrderResponse:
        order = await self.uow.orders.find_by_id(order_id)
        if order is None:
            raise ResourceNotFoundError("Order", str(order_id))
        return to_order_response(order)

    async def search(self, query: OrderSearch) -> OrderListResponse:
        check_ranges(
            BoundedRange(
                "productPrice", query.product_price_start, query.product_price_end,
                "start", "end",
            ),
            BoundedRange(
                "createdAt", query.created_at_start, query.created_at_end,
                "start", "end",
            ),
            BoundedRange(
                "updatedAt", query.updated_at_start, query.updated_at_end,
                "start", "end",
            ),
        )
        check_pagination(query.page_number, query.page_size)
        page = clamp_page(query.page_number, query.page_size)
        filters = build_order_filters(
            order_id=query.id,
            customer_name=query.customer_name,
            customer_email=query.customer_email,
            customer_phone=query.customer_phone,
            product_title=query.product_title,
            product_description=query.product_description,
            product_slug=query.product_slug,
            product_price_start=query.product_price_start,
            product_price_end=query.product_price_end,
            created_at_start=query.created_at_start,
            created_at_end=query.created_at_end,
            updated_at_start=query.updated_at_start,
            updated_at_end=query.updated_at_end,
        )
        orders, total = await self.uow.orders.search(filters, page)
        return OrderListResponse(
            orders=[to_order_response(o) for o in orders],
            page_number=page.number,
            page_size=page.size,
            total_count=total,
            total_pages=total_pages(total, page.size),
        )


def to_order_response(order: OrderLike) -> OrderResponse:
    """Assemble the read view of an order from its frozen line values."""
    return OrderResponse(
        id=order.id,
        customer_id=order.customer_id,
        customer_name=order.customer.name,
        created_at=order.created_at,
        updated_at=order.updated_at,
        total_amount=order_total([line.total for line in order.lines]),
        lines=[
            OrderLineResponse(
                id=line.id,
                product_id=line.product_id,
                product_title=line.product.title,
                quantity=line.quantity,
                unit_price=line.unit_price,
                total=line.total,
            )
            for line in order.lines
        ],
    )
