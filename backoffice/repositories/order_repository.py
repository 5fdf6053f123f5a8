"""Order Repository — order lookup with details and filtered search.

Invariants:
    - Loaded orders always carry customer, lines and each line's product (selectin)
    - product.* filters match when ANY line's product matches; each clause is
      evaluated on its own, so two clauses may be satisfied by different lines
    - search orders by created_at descending
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.pagination import PageRequest
from backoffice.core.search_filters import FilterClause
from backoffice.models.customer import Customer
from backoffice.models.order import Order
from backoffice.models.order_line import OrderLine
from backoffice.models.product import Product
from backoffice.repositories.query_filters import build_conditions, column


def _via_customer(col):
    return lambda predicate: Order.customer.has(predicate(col))


def _via_any_product(col):
    return lambda predicate: Order.lines.any(
        OrderLine.product.has(predicate(col)),
    )


ORDER_FIELDS = {
    "id": column(Order.id),
    "customer.name": _via_customer(Customer.name),
    "customer.email": _via_customer(Customer.email),
    "customer.phone": _via_customer(Customer.phone),
    "product.title": _via_any_product(Product.title),
    "product.description": _via_any_product(Product.description),
    "product.slug": _via_any_product(Product.slug),
    "product.price": _via_any_product(Product.price),
    "created_at": column(Order.created_at),
    "updated_at": column(Order.updated_at),
}


class SqlOrderRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, order_id: UUID) -> Order | None:
        result = await self.db.execute(
            select(Order).where(Order.id == order_id),
        )
        return result.scalar_one_or_none()

    def add(self, order: Order) -> None:
        self.db.add(order)

    async def search(
        self, filters: Sequence[FilterClause], page: PageRequest,
    ) -> tuple[list[Order], int]:
        conditions = build_conditions(filters, ORDER_FIELDS)
        total = await self.db.scalar(
            select(func.count()).select_from(Order).where(*conditions),
        )
        result = await self.db.execute(
            select(Order)
            .where(*conditions)
            .order_by(Order.created_at.desc(), Order.id.asc())
            .offset(page.offset)
            .limit(page.size),
        )
        return list(result.scalars().all()), total or 0
